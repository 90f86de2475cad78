"""
Cart error taxonomy and lexicon keys.

Every cart failure is reported as a failed CartResult whose message is
rendered from one of the lexicon keys below.
"""
from enum import Enum


class CartErrorCode(str, Enum):
    """Recoverable cart failures."""
    INVALID_PRODUCT_ID = "InvalidProductId"
    PRODUCT_NOT_FOUND = "ProductNotFound"
    NOT_A_PRODUCT = "NotAProduct"
    COUNT_LIMIT_EXCEEDED = "CountLimitExceeded"
    INVALID_COUNT = "InvalidCount"
    KEY_NOT_FOUND = "KeyNotFound"


# Error messages
MSG_ADD_ERR_ID = "cart.add_err_id"
MSG_ADD_ERR_NOT_FOUND = "cart.add_err_nf"
MSG_ADD_ERR_PRODUCT = "cart.add_err_product"
MSG_ADD_ERR_COUNT = "cart.add_err_count"
MSG_ADD_ERR_COUNT_MIN = "cart.add_err_count_min"
MSG_REMOVE_ERR = "cart.remove_error"
MSG_CHANGE_ERR = "cart.change_error"

# Success messages
MSG_ADD_SUCCESS = "cart.add_success"
MSG_REMOVE_SUCCESS = "cart.remove_success"
MSG_CHANGE_SUCCESS = "cart.change_success"
MSG_CLEAN_SUCCESS = "cart.clean_success"

# HTTP boundary
ERROR_SESSION_REQUIRED = "X-Session-Id header is required"
ERROR_SERVICE_UNAVAILABLE = "Cart service unavailable"
