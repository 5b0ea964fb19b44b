"""
==============================================================================
Utilities Package
==============================================================================

Utility functions for the application.

Modules:
--------
- normalization: Zero stripping and label quantity parsing
- report: Terminal report printer (import from label_inspector.utils.report)

==============================================================================
"""

from .normalization import (
    parse_decimal,
    strip_leading_zeros,
    strip_or_default,
    strip_trailing_zeros,
    strip_zeros,
)

__all__ = [
    "parse_decimal",
    "strip_leading_zeros",
    "strip_or_default",
    "strip_trailing_zeros",
    "strip_zeros",
]
