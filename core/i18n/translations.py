"""Internationalization System"""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Protocol

from core.logging import get_logger

logger = get_logger(__name__)

# Supported languages with their names
SUPPORTED_LANGUAGES = {
    "en": "English",
    "ru": "Русский",
    "de": "Deutsch",
}

DEFAULT_LANGUAGE = "en"

LOCALES_PATH = Path(__file__).parent.parent.parent / "locales"

# Cache for loaded lexicons
_translations: dict[str, dict[str, Any]] = {}


def _normalize(lang: Optional[str]) -> str:
    """Map "ru-RU" to "ru"; unsupported or empty codes give the default language."""
    if not lang:
        return DEFAULT_LANGUAGE
    lang = lang.split("-")[0].lower()
    return lang if lang in SUPPORTED_LANGUAGES else DEFAULT_LANGUAGE


def _load_translations(lang: str) -> dict[str, Any]:
    """Load the lexicon for a language"""
    if lang in _translations:
        return _translations[lang]

    file_path = LOCALES_PATH / f"{lang}.json"
    if not file_path.exists():
        if lang != DEFAULT_LANGUAGE:
            return _load_translations(DEFAULT_LANGUAGE)
        return {}

    try:
        with open(file_path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Failed to load lexicon {file_path}: {e}")
        return {}

    if not isinstance(data, dict):
        return {}
    _translations[lang] = data
    return data


def _lookup(translations: dict[str, Any], key: str) -> Any:
    """Resolve dotted keys ("cart.add_success") against nested dicts."""
    current: Any = translations
    try:
        for part in key.split("."):
            current = current[part]
    except (KeyError, TypeError):
        return None
    return current


def get_text(key: str, lang: str = DEFAULT_LANGUAGE, default: str | None = None, **kwargs) -> str:
    """
    Get translated text by key.

    Args:
        key: Lexicon key (e.g., "cart.add_success")
        lang: Language code (e.g., "ru", "en-US")
        default: Default value if key not found (instead of returning key)
        **kwargs: Placeholders to format into the string

    Returns:
        Translated string or key/default if not found
    """
    lang = _normalize(lang)

    text = _lookup(_load_translations(lang), key)
    if text is None and lang != DEFAULT_LANGUAGE:
        text = _lookup(_load_translations(DEFAULT_LANGUAGE), key)

    # Missing key or a partial key pointing at a section
    if not isinstance(text, str):
        return default if default is not None else key

    if kwargs:
        try:
            return text.format(**kwargs)
        except (KeyError, ValueError, IndexError):
            return text

    return text


def detect_language(language_code: str | None) -> str:
    """Normalize a client language code to a supported one."""
    return _normalize(language_code)


class Localizer(Protocol):
    """Renders a message key with placeholders into user-facing text."""

    def render(self, key: str, placeholders: Optional[Dict[str, Any]] = None) -> str:
        ...


class LexiconLocalizer:
    """Localizer over the JSON lexicons in locales/."""

    def __init__(self, lang: str = DEFAULT_LANGUAGE) -> None:
        self.lang = detect_language(lang)

    def render(self, key: str, placeholders: Optional[Dict[str, Any]] = None) -> str:
        return get_text(key, self.lang, **(placeholders or {}))
