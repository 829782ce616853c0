"""Seller console bot built around the product category engine."""
