"""Category engine and supporting services"""
