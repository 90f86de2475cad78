"""Cart configuration from environment variables."""
import os
from dataclasses import dataclass

DEFAULT_MAX_COUNT = 1000
DEFAULT_LANGUAGE = "en"


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name, "")
    try:
        return int(value)
    except ValueError:
        return default


@dataclass
class CartConfig:
    """
    Cart behaviour switches.

    - max_count: largest quantity accepted by a single add
    - allow_deleted / allow_unpublished: let soft-deleted or unpublished
      products into the cart
    - json_response: render results as JSON strings at the API boundary
    - language: lexicon used for result messages
    """
    max_count: int = DEFAULT_MAX_COUNT
    allow_deleted: bool = False
    allow_unpublished: bool = False
    json_response: bool = False
    language: str = DEFAULT_LANGUAGE

    @classmethod
    def from_env(cls) -> "CartConfig":
        return cls(
            max_count=_env_int("CART_MAX_COUNT", DEFAULT_MAX_COUNT),
            allow_deleted=_env_bool("CART_ALLOW_DELETED"),
            allow_unpublished=_env_bool("CART_ALLOW_UNPUBLISHED"),
            json_response=_env_bool("CART_JSON_RESPONSE"),
            language=os.environ.get("CART_LANGUAGE", DEFAULT_LANGUAGE),
        )
