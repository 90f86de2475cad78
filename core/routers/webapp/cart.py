"""
WebApp Cart Router

Each request restores the session's cart, runs one operation and persists
the result. Responses are cart result envelopes, rendered as JSON objects or
as JSON strings depending on CART_JSON_RESPONSE.
"""
from typing import Callable, Union

from fastapi import APIRouter, Depends, HTTPException, Response

from core.cart import CartConfig, CartHooks, CartResult, CartService, CartSessionStore, ProductCatalog, render_result
from core.cart.responses import serialize_items
from core.errors import ERROR_SERVICE_UNAVAILABLE
from core.logging import get_logger, sanitize_id_for_logging
from core.routers.deps import get_cart_config, get_cart_hooks, get_cart_store, get_catalog, get_session_id
from .models import AddToCartRequest, ChangeCartItemRequest, RemoveCartItemRequest

logger = get_logger(__name__)

router = APIRouter(tags=["webapp-cart"])


class CartContext:
    """Per-request wiring of the cart service and its session store."""

    def __init__(
        self,
        session_id: str = Depends(get_session_id),
        config: CartConfig = Depends(get_cart_config),
        catalog: ProductCatalog = Depends(get_catalog),
        store: CartSessionStore = Depends(get_cart_store),
        hooks: CartHooks = Depends(get_cart_hooks),
    ):
        self.session_id = session_id
        self.config = config
        self.store = store
        self.service = CartService(catalog, config=config, hooks=hooks)

    def run(self, operation: Callable[[CartService], CartResult]) -> Union[dict, Response]:
        self._sync(self.store.restore)
        result = operation(self.service)
        self._sync(self.store.persist)

        rendered = render_result(result, self.config)
        if isinstance(rendered, str):
            return Response(content=rendered, media_type="application/json")
        return rendered

    def _sync(self, action: Callable[[CartService, str], object]) -> None:
        """Run a session store call; store outages become 503."""
        try:
            action(self.service, self.session_id)
        except ValueError as e:
            logger.error(f"Cart session {sanitize_id_for_logging(self.session_id)} store failed: {e}")
            raise HTTPException(status_code=503, detail=ERROR_SERVICE_UNAVAILABLE)


@router.get("/cart")
def get_cart(ctx: CartContext = Depends()):
    """Cart status with its lines."""
    return ctx.run(lambda cart: CartResult(
        success=True,
        message="",
        data=cart.status({"items": serialize_items(cart)}),
    ))


@router.post("/cart/add")
def add_to_cart(request: AddToCartRequest, ctx: CartContext = Depends()):
    return ctx.run(lambda cart: cart.add(request.product_id, request.count, request.attributes))


@router.post("/cart/change")
def change_cart_item(request: ChangeCartItemRequest, ctx: CartContext = Depends()):
    """Set line quantity (0 = remove)."""
    return ctx.run(lambda cart: cart.change(request.key, request.count))


@router.post("/cart/remove")
def remove_cart_item(request: RemoveCartItemRequest, ctx: CartContext = Depends()):
    return ctx.run(lambda cart: cart.remove(request.key))


@router.post("/cart/clean")
def clean_cart(ctx: CartContext = Depends()):
    return ctx.run(lambda cart: cart.clean())
