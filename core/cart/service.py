"""Cart service: line items, quantity limits, and status aggregation."""
from typing import Any, Dict, Mapping, Optional

from core.errors import (
    CartErrorCode,
    MSG_ADD_ERR_COUNT,
    MSG_ADD_ERR_COUNT_MIN,
    MSG_ADD_ERR_ID,
    MSG_ADD_ERR_NOT_FOUND,
    MSG_ADD_ERR_PRODUCT,
    MSG_ADD_SUCCESS,
    MSG_CHANGE_ERR,
    MSG_CHANGE_SUCCESS,
    MSG_CLEAN_SUCCESS,
    MSG_REMOVE_ERR,
    MSG_REMOVE_SUCCESS,
)
from core.i18n import LexiconLocalizer, Localizer
from core.logging import get_logger, sanitize_id_for_logging
from core.utils import coerce_count, parse_product_id
from .catalog import ProductCatalog
from .config import CartConfig
from .hooks import CartEvent, CartHooks
from .models import CartResult, CartState, LineItem, empty_status, line_key

logger = get_logger(__name__)


class CartService:
    """
    Manages one shopper's cart.

    The cart contents live in a CartState passed in by the caller, so a
    session store can restore and persist it around each request through
    get() and set(). Every public operation returns a CartResult; validation
    failures are never raised.
    """

    def __init__(
        self,
        catalog: ProductCatalog,
        state: Optional[CartState] = None,
        config: Optional[CartConfig] = None,
        localizer: Optional[Localizer] = None,
        hooks: Optional[CartHooks] = None,
    ):
        self.catalog = catalog
        self.state = state if state is not None else CartState()
        self.config = config or CartConfig()
        self.localizer = localizer or LexiconLocalizer(self.config.language)
        self.hooks = hooks or CartHooks()

    @property
    def cart(self) -> Dict[str, LineItem]:
        return self.state.items

    def add(self, product_id: Any, count: Any = 1, attributes: Optional[Dict[str, Any]] = None) -> CartResult:
        """Add a product, merging into an existing line with the same attributes."""
        pid = parse_product_id(product_id)
        if pid is None:
            return self.error(MSG_ADD_ERR_ID, CartErrorCode.INVALID_PRODUCT_ID)
        count = coerce_count(count)
        attributes = dict(attributes or {})

        product = self.catalog.resolve(
            pid,
            include_deleted=self.config.allow_deleted,
            include_unpublished=self.config.allow_unpublished,
        )
        if product is None:
            logger.info(f"Rejected add: product {pid} not found")
            return self.error(MSG_ADD_ERR_NOT_FOUND, CartErrorCode.PRODUCT_NOT_FOUND, self.status())
        if not product.is_cart_eligible:
            logger.info(f"Rejected add: resource {pid} is a {product.class_key!r}")
            return self.error(MSG_ADD_ERR_PRODUCT, CartErrorCode.NOT_A_PRODUCT, self.status())
        if count > self.config.max_count:
            logger.info(f"Rejected add: count {count} over limit {self.config.max_count}")
            return self.error(
                MSG_ADD_ERR_COUNT,
                CartErrorCode.COUNT_LIMIT_EXCEEDED,
                self.status({"rejected_count": count}),
                {"count": count, "max_count": self.config.max_count},
            )

        # Plugins may swap the product or adjust count and attributes in place
        payload = {"product": product, "count": count, "attributes": attributes, "cart": self}
        self.hooks.fire(CartEvent.BEFORE_ADD, payload)
        product = payload["product"]
        count = coerce_count(payload["count"])
        attributes = payload["attributes"]

        key = line_key(product.id, attributes)
        if key in self.cart:
            return self.change(key, self.cart[key].count + count)
        if count <= 0:
            return self.error(MSG_ADD_ERR_COUNT_MIN, CartErrorCode.INVALID_COUNT, self.status())

        self.cart[key] = LineItem(
            product_id=product.id,
            price=product.price,
            weight=product.weight,
            count=count,
            attributes=attributes,
        )
        self.hooks.fire(CartEvent.AFTER_ADD, {"key": key, "cart": self})
        logger.debug(f"Added product {product.id} x{count} as {sanitize_id_for_logging(key)}")
        return self.success(MSG_ADD_SUCCESS, self.status({"key": key}))

    def remove(self, key: str) -> CartResult:
        """Remove a line by key."""
        if key not in self.cart:
            # No status here, unlike change()
            return self.error(MSG_REMOVE_ERR, CartErrorCode.KEY_NOT_FOUND)

        self.hooks.fire(CartEvent.BEFORE_REMOVE, {"key": key, "cart": self})
        del self.cart[key]
        self.hooks.fire(CartEvent.AFTER_REMOVE, {"key": key, "cart": self})
        logger.debug(f"Removed line {sanitize_id_for_logging(key)}")
        return self.success(MSG_REMOVE_SUCCESS, self.status())

    def change(self, key: str, count: Any) -> CartResult:
        """Set the quantity of a line; zero or less removes it."""
        if key not in self.cart:
            return self.error(MSG_CHANGE_ERR, CartErrorCode.KEY_NOT_FOUND, self.status())

        count = coerce_count(count)
        if count <= 0:
            return self.remove(key)

        self.hooks.fire(CartEvent.BEFORE_CHANGE, {"key": key, "count": count, "cart": self})
        self.cart[key].count = count
        self.hooks.fire(CartEvent.AFTER_CHANGE, {"key": key, "count": count, "cart": self})
        logger.debug(f"Changed line {sanitize_id_for_logging(key)} to {count}")
        return self.success(MSG_CHANGE_SUCCESS, self.status({"key": key}))

    def clean(self) -> CartResult:
        """Empty the cart."""
        self.hooks.fire(CartEvent.BEFORE_CLEAN, {"cart": self})
        self.state.items = {}
        self.hooks.fire(CartEvent.AFTER_CLEAN, {"cart": self})
        return self.success(MSG_CLEAN_SUCCESS, self.status())

    def status(self, extra: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """Total count, price and weight of the cart. Fields in extra win."""
        status = empty_status()
        for item in self.cart.values():
            status["count"] += item.count
            status["total"] += item.total_price
            status["weight"] += item.total_weight
        if extra:
            status.update(extra)
        return status

    def get(self) -> Dict[str, LineItem]:
        return self.cart

    def set(self, cart: Optional[Mapping[str, Any]] = None) -> None:
        """Replace the cart contents as-is. Dict snapshots are turned into LineItems."""
        self.state.items = {
            key: item if isinstance(item, LineItem) else LineItem.from_dict(item)
            for key, item in (cart or {}).items()
        }

    def success(self, message: str, data: Optional[Dict[str, Any]] = None, placeholders: Optional[Dict[str, Any]] = None) -> CartResult:
        return CartResult(
            success=True,
            message=self.localizer.render(message, placeholders or {}),
            data=data or {},
        )

    def error(
        self,
        message: str,
        code: CartErrorCode,
        data: Optional[Dict[str, Any]] = None,
        placeholders: Optional[Dict[str, Any]] = None,
    ) -> CartResult:
        return CartResult(
            success=False,
            message=self.localizer.render(message, placeholders or {}),
            data=data or {},
            code=code,
        )
