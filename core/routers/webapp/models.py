"""
WebApp API Pydantic Models

Request bodies for cart endpoints. Ids and counts are passed through
unvalidated: the cart service reports bad values as failed results.
"""
from typing import Any, Union

from pydantic import BaseModel, Field


class AddToCartRequest(BaseModel):
    product_id: Union[int, str, None] = None
    count: Union[int, float, str] = 1
    attributes: dict[str, Any] = Field(default_factory=dict)


class ChangeCartItemRequest(BaseModel):
    key: str
    count: Union[int, float, str] = 1  # 0 removes the line


class RemoveCartItemRequest(BaseModel):
    key: str
