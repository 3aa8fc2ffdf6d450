"""
Application Exception Handling

Single AppException class for every fatal condition, plus factory functions.
"""

from typing import Any, Dict, Optional


class AppException(Exception):
    """
    Unified application exception for fatal errors.

    Raised wherever the tool cannot continue; the entry point prints the
    message on stderr and exits with ``exit_code``.

    Usage:
        raise AppException("Failed to read input.", "INPUT_READ_FAILED")
        raise AppException("Invalid number for weight.", "INVALID_WEIGHT", details={"value": "abc"})

    Error Codes:
        - INPUT_READ_FAILED (1)
        - INVALID_WEIGHT (1)
    """

    def __init__(
        self,
        message: str,
        code: str,
        exit_code: int = 1,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize application exception.

        Args:
            message: Human-readable diagnostic shown to the operator
            code: Machine-readable error code (e.g., "INVALID_WEIGHT")
            exit_code: Process exit status (default: 1)
            details: Additional error context (optional)
        """
        self.message = message
        self.code = code
        self.exit_code = exit_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a dictionary for logging."""
        error_dict = {
            "code": self.code,
            "message": self.message,
            "exit_code": self.exit_code,
        }

        if self.details:
            error_dict["details"] = self.details

        return error_dict


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def input_read_failed() -> AppException:
    """Create input stream failure exception."""
    return AppException("Failed to read input.", "INPUT_READ_FAILED")


def invalid_weight(raw: str) -> AppException:
    """Create malformed weight exception."""
    return AppException(
        "Invalid number for weight.",
        "INVALID_WEIGHT",
        details={"value": raw}
    )
