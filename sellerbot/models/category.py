# sellerbot/models/category.py
from enum import Enum
from typing import Annotated, List, Literal, Optional, Union
from pydantic import ConfigDict, Field
from .base import CatalogModel

class SpecificationType(str, Enum):
    TEXT = "text"
    NUMBER = "number"
    SELECT = "select"
    BOOLEAN = "boolean"

class SpecificationOption(CatalogModel):
    """A single choice of a select specification"""
    value: str
    label: str
    label_ar: str

class _SpecificationBase(CatalogModel):
    id: str
    key: str
    key_ar: str
    required: bool = False

    # options only make sense on the select variant
    model_config = ConfigDict(extra="forbid")

class TextSpecification(_SpecificationBase):
    type: Literal["text"] = "text"

class NumberSpecification(_SpecificationBase):
    type: Literal["number"] = "number"

class BooleanSpecification(_SpecificationBase):
    type: Literal["boolean"] = "boolean"

class SelectSpecification(_SpecificationBase):
    type: Literal["select"] = "select"
    options: List[SpecificationOption] = []

CategorySpecification = Annotated[
    Union[TextSpecification, NumberSpecification, BooleanSpecification, SelectSpecification],
    Field(discriminator="type")
]

class Category(CatalogModel):
    """Category model for product categorization"""
    id: str
    value: str
    label: str
    label_ar: str
    description: Optional[str] = None
    description_ar: Optional[str] = None
    level: int = 0
    is_active: bool = True
    icon: Optional[str] = None
    specifications: List[CategorySpecification] = []

    # Parent links are not stored on the node, see TreeIndex
    children: List['Category'] = []

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def display_label(self, rtl: bool = False) -> str:
        return self.label_ar if rtl else self.label

    def display_description(self, rtl: bool = False) -> Optional[str]:
        return self.description_ar if rtl else self.description

Category.model_rebuild()
