"""
FastAPI Routers Package

All routers are included in api/index.py.
"""

from core.routers.webapp import router as webapp_router

__all__ = [
    "webapp_router",
]
