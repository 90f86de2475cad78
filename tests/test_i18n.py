"""Tests for i18n lexicons"""
import pytest
from core.i18n import SUPPORTED_LANGUAGES, LexiconLocalizer, detect_language, get_text


def test_get_text_existing_key():
    """Test getting existing translation"""
    assert get_text("cart.add_success", "en") == "The product has been added to your cart"


def test_get_text_all_languages():
    """Every supported language has the cart lexicon"""
    for lang in SUPPORTED_LANGUAGES:
        text = get_text("cart.clean_success", lang)
        assert text != "cart.clean_success"


def test_get_text_fallback_to_english():
    """Key missing from the German lexicon comes from English"""
    assert get_text("cart.add_err_count_min", "de") == "The quantity must be greater than zero"


def test_get_text_missing_key():
    assert get_text("cart.nope", "ru") == "cart.nope"
    assert get_text("cart.nope", "ru", default="?") == "?"


def test_get_text_section_key_returns_key():
    assert get_text("cart", "en") == "cart"


def test_get_text_with_params():
    text = get_text("cart.add_err_count", "en", count=5000, max_count=1000)
    assert text == "You cannot add 5000 items at once, the limit is 1000"


def test_get_text_missing_param_keeps_template():
    text = get_text("cart.add_err_count", "en", count=5000)
    assert "{max_count}" in text


@pytest.mark.parametrize("code,expected", [("ru-RU", "ru"), ("DE", "de"), ("fr", "en"), (None, "en")])
def test_detect_language(code, expected):
    assert detect_language(code) == expected


def test_localizer_render():
    localizer = LexiconLocalizer("ru-RU")
    assert localizer.lang == "ru"
    assert localizer.render("cart.add_err_count", {"count": 7, "max_count": 5}) == "Нельзя добавить 7 шт. за раз, максимум 5"
