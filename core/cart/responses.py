"""Rendering of cart results at the API boundary."""
from typing import Union

from .config import CartConfig
from .models import CartResult


def render_result(result: CartResult, config: CartConfig) -> Union[dict, str]:
    """Structured dict by default, JSON string when json_response is on."""
    if config.json_response:
        return result.to_json()
    return result.to_dict()


def serialize_items(service) -> dict:
    """Cart lines keyed by line key, as stored in the session."""
    return {key: item.to_dict() for key, item in service.get().items()}
