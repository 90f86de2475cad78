# Internationalization Module
from .translations import (
    SUPPORTED_LANGUAGES,
    LexiconLocalizer,
    Localizer,
    detect_language,
    get_text,
)

__all__ = ["SUPPORTED_LANGUAGES", "LexiconLocalizer", "Localizer", "detect_language", "get_text"]
