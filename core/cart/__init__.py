"""Cart package: models, service, collaborators, and session storage."""
from .catalog import InMemoryCatalog, ProductCatalog, SupabaseCatalog
from .config import CartConfig
from .hooks import CartEvent, CartHooks
from .models import CartResult, CartState, LineItem, line_key
from .responses import render_result
from .service import CartService
from .storage import CartSessionStore

__all__ = [
    "CartConfig",
    "CartEvent",
    "CartHooks",
    "CartResult",
    "CartService",
    "CartSessionStore",
    "CartState",
    "InMemoryCatalog",
    "LineItem",
    "ProductCatalog",
    "SupabaseCatalog",
    "line_key",
    "render_result",
]
