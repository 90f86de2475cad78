"""Tests for cart input coercion"""
import sys
import pytest
from decimal import Decimal

from core.utils import coerce_count, parse_product_id


@pytest.mark.parametrize("value,expected", [
    (5, 5),
    ("5", 5),
    (" 12 ", 12),
    (3.0, 3),
    (Decimal("7"), 7),
    (0, None),
    (-1, None),
    ("-1", None),
    ("1.5", None),
    (2.5, None),
    ("abc", None),
    ("", None),
    (None, None),
    (True, None),
    ([5], None),
    ("\u00b2", None),
    ("\u2460", None),
    ("9" * 5000, None),
    (Decimal("1e9999999"), None),
])
def test_parse_product_id(value, expected):
    assert parse_product_id(value) == expected


@pytest.mark.parametrize("value,expected", [
    (3, 3),
    ("3", 3),
    ("3.9", 3),
    (2.7, 2),
    (-1.5, -1),
    ("abc", 0),
    ("", 0),
    (None, 0),
    (float("nan"), 0),
    ("1e9999999", sys.maxsize),
    ("-1e9999999", -sys.maxsize),
    ("Infinity", sys.maxsize),
    (float("-inf"), -sys.maxsize),
])
def test_coerce_count(value, expected):
    assert coerce_count(value) == expected
