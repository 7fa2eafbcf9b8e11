"""Order log validation module."""

from .order_rules import is_duplicate_order, validate_log_path
from .types import ORDER_LOG_SUFFIX, ErrorCode, ErrorType, OrderLogError

__all__ = [
    "validate_log_path",
    "is_duplicate_order",
    "ErrorCode",
    "ErrorType",
    "OrderLogError",
    "ORDER_LOG_SUFFIX",
]
