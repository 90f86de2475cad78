"""Cart models with Decimal-based pricing."""
import hashlib
import json
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Optional

from core.errors import CartErrorCode
from core.services.money import multiply, to_decimal, to_json_number


def line_key(product_id: int, attributes: Dict[str, Any]) -> str:
    """
    Deterministic key of a cart line.

    The same product with the same attributes always maps to the same key,
    whatever order the attribute keys were given in.
    """
    encoded = json.dumps(attributes or {}, sort_keys=True, separators=(",", ":"), default=str)
    return hashlib.md5(f"{product_id}{encoded}".encode("utf-8")).hexdigest()


@dataclass
class LineItem:
    """Single line of the cart. Price and weight are snapshots taken on add."""
    product_id: int
    price: Decimal
    weight: Decimal
    count: int
    attributes: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        self.price = to_decimal(self.price)
        self.weight = to_decimal(self.weight)

    @property
    def total_price(self) -> Decimal:
        return multiply(self.price, self.count)

    @property
    def total_weight(self) -> Decimal:
        return multiply(self.weight, self.count)

    def to_dict(self) -> dict:
        """Convert to dictionary for session storage."""
        return {
            "id": self.product_id,
            "price": str(self.price),
            "weight": str(self.weight),
            "count": self.count,
            "data": dict(self.attributes),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "LineItem":
        """Create from dictionary."""
        return cls(
            product_id=int(data["id"]),
            price=to_decimal(data.get("price", 0)),
            weight=to_decimal(data.get("weight", 0)),
            count=int(data["count"]),
            attributes=dict(data.get("data") or {}),
        )


@dataclass
class CartState:
    """Cart contents owned by one session: key -> LineItem, in insertion order."""
    items: Dict[str, LineItem] = field(default_factory=dict)


def empty_status() -> dict:
    return {"total": Decimal("0"), "count": 0, "weight": Decimal("0")}


@dataclass
class CartResult:
    """Response envelope returned by every cart operation."""
    success: bool
    message: str
    data: Dict[str, Any] = field(default_factory=dict)
    code: Optional[CartErrorCode] = None

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "message": self.message,
            "data": _jsonable(self.data),
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)


def _jsonable(value: Any) -> Any:
    if isinstance(value, Decimal):
        return to_json_number(value)
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    if isinstance(value, LineItem):
        return _jsonable(value.to_dict())
    return value
