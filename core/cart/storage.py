"""Redis-backed session store for cart contents."""
import json
from typing import Dict

from upstash_redis import Redis

from core.db import RedisKeys, TTL
from core.logging import get_logger, sanitize_id_for_logging
from .models import LineItem
from .service import CartService

logger = get_logger(__name__)


class CartSessionStore:
    """
    Persists a session's cart between requests.

    The service is never touched directly: restore() feeds the snapshot
    through CartService.set() and persist() reads it back through get().
    """

    def __init__(self, redis: Redis, ttl: int = TTL.CART):
        self.redis = redis
        self.ttl = ttl

    def load(self, session_id: str) -> Dict[str, LineItem]:
        """Load a snapshot. Missing or corrupted snapshots give an empty cart."""
        key = RedisKeys.cart_key(session_id)
        try:
            raw = self.redis.get(key)
        except Exception as e:
            logger.error(f"Failed to load cart from Redis: {e}")
            raise ValueError(f"Cart service unavailable: {str(e)}")

        if not raw:
            return {}

        try:
            data = json.loads(raw)
            return {k: LineItem.from_dict(v) for k, v in data.items()}
        except (json.JSONDecodeError, KeyError, TypeError, ValueError, AttributeError) as e:
            logger.warning(f"Corrupted cart data for session {sanitize_id_for_logging(session_id)}: {e}")
            self.clear(session_id)
            return {}

    def save(self, session_id: str, items: Dict[str, LineItem]) -> None:
        key = RedisKeys.cart_key(session_id)
        payload = json.dumps({k: item.to_dict() for k, item in items.items()})
        try:
            self.redis.set(key, payload, ex=self.ttl)
        except Exception as e:
            logger.error(f"Failed to save cart to Redis: {e}")
            raise ValueError(f"Cart service unavailable: {str(e)}")

    def clear(self, session_id: str) -> None:
        try:
            self.redis.delete(RedisKeys.cart_key(session_id))
        except Exception as e:
            logger.error(f"Failed to clear cart from Redis: {e}")
            raise ValueError(f"Cart service unavailable: {str(e)}")

    def restore(self, service: CartService, session_id: str) -> CartService:
        service.set(self.load(session_id))
        return service

    def persist(self, service: CartService, session_id: str) -> None:
        items = service.get()
        if items:
            self.save(session_id, items)
        else:
            self.clear(session_id)
