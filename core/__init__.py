"""
Cart Core Module

This package contains:
- cart: cart service, collaborators and session store
- db: Supabase and Redis clients
- i18n: message lexicons
- routers: FastAPI endpoints

Note: Imports are lazy so that importing core.cart does not
require database credentials.
"""

__all__ = [
    "get_supabase",
    "get_redis",
]


def __getattr__(name):
    """Lazy attribute access for clean serverless loading."""
    if name == "get_supabase":
        from core.db import get_supabase
        return get_supabase
    elif name == "get_redis":
        from core.db import get_redis
        return get_redis
    raise AttributeError(f"module 'core' has no attribute '{name}'")
