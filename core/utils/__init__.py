# Utilities Module
from .validators import coerce_count, parse_product_id

__all__ = [
    "coerce_count",
    "parse_product_id",
]
