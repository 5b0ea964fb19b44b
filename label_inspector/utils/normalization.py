"""
==============================================================================
Code Normalization Module
==============================================================================

String helpers shared by the matcher, the label decoder and diagnostics.

Normalization Rules:
-------------------
- strip_leading_zeros("00417")   -> "417"
- strip_zeros("004170")          -> "417"
- strip_leading_zeros("0000")    -> ""

Quantity Parsing:
----------------
Label quantity fields are parsed from their leading numeric prefix. A field
with no numeric prefix yields NaN, which callers receive unchanged.

==============================================================================
"""

from __future__ import annotations

import math
import re


# Leading decimal number: optional sign, digits with optional fraction, exponent
DECIMAL_PREFIX_RE = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def strip_leading_zeros(code: str) -> str:
    """Remove leading '0' characters (an all-zero code becomes empty)."""
    return code.lstrip("0")


def strip_trailing_zeros(code: str) -> str:
    """Remove trailing '0' characters."""
    return code.rstrip("0")


def strip_zeros(code: str) -> str:
    """
    Remove leading and trailing zeros.

    Args:
        code: Numeric code string

    Returns:
        Code with zeros stripped from both ends

    Example:
        >>> strip_zeros("0041700")
        '417'
    """
    return strip_trailing_zeros(strip_leading_zeros(code))


def strip_or_default(field: str, default: str = "0") -> str:
    """Strip leading zeros, falling back to default when nothing is left."""
    return strip_leading_zeros(field) or default


def parse_decimal(text: str) -> float:
    """
    Parse a base-10 number from the start of a label field.

    Args:
        text: Raw substring sliced from the label

    Returns:
        Parsed value, or NaN when the field has no numeric prefix

    Example:
        >>> parse_decimal("00123")
        123.0
        >>> math.isnan(parse_decimal("ab12"))
        True
    """
    match = DECIMAL_PREFIX_RE.match(text)
    if not match:
        return math.nan
    return float(match.group(0))
