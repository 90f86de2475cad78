"""
Cart event hooks.

Plugins register callbacks for before/after notification points around
cart mutations. Callbacks receive the event and a payload dict. They cannot
veto the operation; the only feedback channel is in-place mutation of the
BeforeAddToCart payload (product, count, attributes).
"""
from collections import defaultdict
from enum import Enum
from typing import Any, Callable, Dict, List

from core.logging import get_logger

logger = get_logger(__name__)


class CartEvent(str, Enum):
    """Notification points fired by CartService."""
    BEFORE_ADD = "BeforeAddToCart"
    AFTER_ADD = "AfterAddToCart"
    BEFORE_REMOVE = "BeforeRemove"
    AFTER_REMOVE = "AfterRemove"
    BEFORE_CHANGE = "BeforeChange"
    AFTER_CHANGE = "AfterChange"
    BEFORE_CLEAN = "BeforeClean"
    AFTER_CLEAN = "AfterClean"


HookCallback = Callable[[CartEvent, Dict[str, Any]], None]


class CartHooks:
    """Callback registry with fire-and-forget dispatch."""

    def __init__(self) -> None:
        self._callbacks: Dict[CartEvent, List[HookCallback]] = defaultdict(list)

    def register(self, event: CartEvent, callback: HookCallback) -> None:
        self._callbacks[CartEvent(event)].append(callback)

    def unregister(self, event: CartEvent, callback: HookCallback) -> None:
        callbacks = self._callbacks.get(CartEvent(event), [])
        if callback in callbacks:
            callbacks.remove(callback)

    def fire(self, event: CartEvent, payload: Dict[str, Any]) -> None:
        """Invoke every callback registered for the event, in registration order."""
        for callback in list(self._callbacks.get(event, [])):
            try:
                callback(event, payload)
            except Exception as e:
                # A broken plugin must not break the cart
                logger.error(f"Cart hook {getattr(callback, '__name__', callback)!r} failed on {event.value}: {e}", exc_info=True)
