from .exceptions import AppException, input_read_failed, invalid_weight

__all__ = [
    "AppException",
    "input_read_failed",
    "invalid_weight",
]
