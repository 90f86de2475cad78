"""
Shared Dependencies for Routers

Lazy-loaded singletons to optimize cold start.
Tests replace them through app.dependency_overrides.
"""

from typing import Optional

from fastapi import Header, HTTPException

from core.cart import CartConfig, CartHooks, CartSessionStore, ProductCatalog
from core.errors import ERROR_SESSION_REQUIRED


# ==================== LAZY SINGLETONS ====================

_cart_config: Optional[CartConfig] = None
_cart_hooks: Optional[CartHooks] = None
_catalog: Optional[ProductCatalog] = None
_cart_store: Optional[CartSessionStore] = None


def get_cart_config() -> CartConfig:
    """Get CartConfig built from environment (lazy loaded)"""
    global _cart_config
    if _cart_config is None:
        _cart_config = CartConfig.from_env()
    return _cart_config


def get_cart_hooks() -> CartHooks:
    """Process-wide hook registry; plugins register on it at startup"""
    global _cart_hooks
    if _cart_hooks is None:
        _cart_hooks = CartHooks()
    return _cart_hooks


def get_catalog() -> ProductCatalog:
    """Get Supabase-backed catalog (lazy loaded)"""
    global _catalog
    if _catalog is None:
        from core.cart import SupabaseCatalog
        from core.db import get_supabase
        _catalog = SupabaseCatalog(get_supabase())
    return _catalog


def get_cart_store() -> CartSessionStore:
    """Get Redis session store (lazy loaded)"""
    global _cart_store
    if _cart_store is None:
        from core.db import get_redis
        _cart_store = CartSessionStore(get_redis())
    return _cart_store


# ==================== SESSION ====================

def get_session_id(x_session_id: Optional[str] = Header(None, alias="X-Session-Id")) -> str:
    """Session identifier issued by the storefront."""
    if not x_session_id or not x_session_id.strip():
        raise HTTPException(status_code=400, detail=ERROR_SESSION_REQUIRED)
    return x_session_id.strip()
