"""
Cart Service - Main FastAPI Application

Single entry point for the storefront cart API.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.logging import get_logger
from core.routers import webapp_router

logger = get_logger(__name__)


app = FastAPI(
    title="Cart Service",
    description="Session shopping cart API",
    version="1.0.0",
)

# Storefront widgets are served from other origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(webapp_router)


# ==================== HEALTH CHECK ====================

@app.get("/api/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok", "service": "cart"}
