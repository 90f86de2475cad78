"""Catalog Models - Pydantic models for resources resolved by the catalog."""
from decimal import Decimal

from pydantic import BaseModel, field_validator

from core.services.money import to_decimal as _to_decimal

# Resource classes that can be put into a cart
PRODUCT_CLASS = "product"
CART_ELIGIBLE_CLASSES = frozenset({PRODUCT_CLASS})


class Product(BaseModel):
    """
    Catalog resource.

    Not every resource is a product: categories and content pages live in
    the same table and are told apart by class_key.
    """
    id: int
    name: str = ""
    class_key: str = PRODUCT_CLASS
    price: Decimal = Decimal("0")
    weight: Decimal = Decimal("0")
    deleted: bool = False
    published: bool = True

    class Config:
        extra = "ignore"  # Ignore unknown columns from DB

    @field_validator("price", "weight", mode="before")
    @classmethod
    def convert_to_decimal(cls, v):
        return _to_decimal(v)

    @property
    def is_cart_eligible(self) -> bool:
        return self.class_key in CART_ELIGIBLE_CLASSES
