"""
Application Exception Handling

Single AppException class for catalog loading errors. Label decoding never
raises: unknown formats and missing products are reported on the decoded
label itself.
"""

from typing import Any, Dict, Optional


class AppException(Exception):
    """
    Unified application exception.

    Usage:
        raise AppException("Catalog file not found", "CATALOG_NOT_FOUND")

    Error Codes:
        Catalog:
            - CATALOG_NOT_FOUND
            - CATALOG_INVALID
    """

    def __init__(
        self,
        message: str,
        code: str,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "CATALOG_NOT_FOUND")
            details: Additional error context (optional)
        """
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def catalog_not_found(path: str) -> AppException:
    """Create catalog file not found exception."""
    return AppException(
        f"Catalog file not found: {path}",
        "CATALOG_NOT_FOUND",
        {"path": path}
    )


def catalog_invalid(path: str, reason: str) -> AppException:
    """Create invalid catalog exception."""
    return AppException(
        f"Invalid catalog {path}: {reason}",
        "CATALOG_INVALID",
        {"path": path, "reason": reason}
    )
