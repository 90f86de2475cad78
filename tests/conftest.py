"""Pytest configuration and fixtures"""
import os
import pytest
from decimal import Decimal
from unittest.mock import Mock

# Set test environment variables
os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test_key")
os.environ.setdefault("UPSTASH_REDIS_REST_URL", "https://test.upstash.io")
os.environ.setdefault("UPSTASH_REDIS_REST_TOKEN", "test_token")

from core.cart import CartConfig, CartHooks, CartService, CartState, InMemoryCatalog
from core.services.models import Product


@pytest.fixture
def sample_product():
    """Product with price 10 and weight 1"""
    return Product(id=5, name="Mug", price=Decimal("10"), weight=Decimal("1"))


@pytest.fixture
def catalog(sample_product):
    """Catalog with one product of each kind the cart must tell apart"""
    return InMemoryCatalog([
        sample_product,
        Product(id=6, name="T-shirt", price="19.90", weight="0.25"),
        Product(id=7, name="Kitchen", class_key="category"),
        Product(id=8, name="Old mug", price="5", deleted=True),
        Product(id=9, name="Draft mug", price="7", published=False),
    ])


@pytest.fixture
def cart_config():
    return CartConfig()


@pytest.fixture
def hooks():
    return CartHooks()


@pytest.fixture
def cart_service(catalog, cart_config, hooks):
    """Cart service over an empty state"""
    return CartService(catalog, state=CartState(), config=cart_config, hooks=hooks)


@pytest.fixture
def mock_redis():
    """Mock Upstash Redis client backed by a dict"""
    storage = {}
    redis = Mock()
    redis.storage = storage
    redis.get.side_effect = lambda key: storage.get(key)

    def _set(key, value, ex=None):
        storage[key] = value
        return True

    redis.set.side_effect = _set
    redis.delete.side_effect = lambda key: 1 if storage.pop(key, None) is not None else 0
    return redis


@pytest.fixture
def mock_supabase_client():
    """Mock Supabase client"""
    client = Mock()

    table_mock = Mock()
    table_mock.select.return_value = table_mock
    table_mock.eq.return_value = table_mock
    table_mock.limit.return_value = table_mock

    client.table.return_value = table_mock
    return client
