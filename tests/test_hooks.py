"""Tests for cart event hooks"""
from unittest.mock import Mock

from core.cart import CartEvent, CartHooks, line_key
from core.services.models import Product


def _recorder(hooks, events):
    calls = []
    for event in events:
        hooks.register(event, lambda e, payload: calls.append(e))
    return calls


def test_no_hooks_is_noop():
    """Firing with nothing registered does nothing"""
    CartHooks().fire(CartEvent.BEFORE_ADD, {})


def test_add_fires_before_and_after(cart_service, hooks):
    calls = _recorder(hooks, list(CartEvent))

    cart_service.add(5, 1)

    assert calls == [CartEvent.BEFORE_ADD, CartEvent.AFTER_ADD]


def test_add_to_existing_line_fires_change(cart_service, hooks):
    cart_service.add(5, 1)
    calls = _recorder(hooks, list(CartEvent))

    cart_service.add(5, 1)

    assert calls == [CartEvent.BEFORE_ADD, CartEvent.BEFORE_CHANGE, CartEvent.AFTER_CHANGE]


def test_remove_change_clean_events(cart_service, hooks):
    key = cart_service.add(5, 2).data["key"]
    calls = _recorder(hooks, list(CartEvent))

    cart_service.change(key, 3)
    cart_service.remove(key)
    cart_service.clean()

    assert calls == [
        CartEvent.BEFORE_CHANGE, CartEvent.AFTER_CHANGE,
        CartEvent.BEFORE_REMOVE, CartEvent.AFTER_REMOVE,
        CartEvent.BEFORE_CLEAN, CartEvent.AFTER_CLEAN,
    ]


def test_rejected_operations_fire_nothing(cart_service, hooks):
    calls = _recorder(hooks, list(CartEvent))

    cart_service.add(999)
    cart_service.add(5, 5000)
    cart_service.remove("missing")
    cart_service.change("missing", 1)

    assert calls == []


def test_set_fires_nothing(cart_service, hooks):
    calls = _recorder(hooks, list(CartEvent))

    cart_service.set({})

    assert calls == []


def test_before_add_can_mutate_payload(cart_service, hooks):
    def bump(event, payload):
        payload["count"] = 3
        payload["attributes"]["gift_wrap"] = True

    hooks.register(CartEvent.BEFORE_ADD, bump)

    result = cart_service.add(5, 1)

    assert result.data["key"] == line_key(5, {"gift_wrap": True})
    assert cart_service.status()["count"] == 3


def test_before_add_can_swap_product(cart_service, hooks):
    def swap(event, payload):
        payload["product"] = Product(id=5, price="8", weight="1")

    hooks.register(CartEvent.BEFORE_ADD, swap)
    cart_service.add(5, 1)

    assert cart_service.status()["total"] == 8


def test_change_payload(cart_service, hooks):
    key = cart_service.add(5, 1).data["key"]
    callback = Mock()
    hooks.register(CartEvent.AFTER_CHANGE, callback)

    cart_service.change(key, 4)

    event, payload = callback.call_args[0]
    assert event == CartEvent.AFTER_CHANGE
    assert payload["key"] == key
    assert payload["count"] == 4
    assert payload["cart"] is cart_service


def test_failing_hook_does_not_abort(cart_service, hooks):
    hooks.register(CartEvent.AFTER_ADD, Mock(side_effect=RuntimeError("plugin down")))

    result = cart_service.add(5, 1)

    assert result.success is True
    assert cart_service.status()["count"] == 1


def test_unregister(hooks):
    callback = Mock()
    hooks.register(CartEvent.BEFORE_CLEAN, callback)
    hooks.unregister(CartEvent.BEFORE_CLEAN, callback)

    hooks.fire(CartEvent.BEFORE_CLEAN, {})

    callback.assert_not_called()
