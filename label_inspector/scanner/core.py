"""
==============================================================================
Label Decoder Core Module
==============================================================================

Positional decoder for the two supplier label layouts.

LITORAL (33 digits):
-------------------
    0-4      prefix
    5-12     product code
    13       -
    14-18    quantity (MT)
    19-32    control
    Color: entered manually by the operator

EUROTEXTIL GS1 (45 digits, starts with "01"):
--------------------------------------------
    0-1      "01"
    2-7      purchase order
    11-17    product code
    27-29    color
    31-35    sequence
    37-41    quantity (MT)
    Color: read from the label

Any other length or prefix is reported as an unknown format. Offsets are
0-indexed; slices are end-exclusive.

==============================================================================
"""

from __future__ import annotations

import logging

from label_inspector.catalog import CatalogIndex, CodeMatcher
from label_inspector.utils.normalization import parse_decimal, strip_or_default

from .models import DecodedLabel, LabelErrorKind, LabelFormat


# Module logger
logger = logging.getLogger(__name__)


# =============================================================================
# LAYOUT CONSTANTS
# =============================================================================

class LitoralLayout:
    """Field offsets of the LITORAL label."""

    LENGTH = 33
    CODE = slice(5, 13)
    QUANTITY = slice(14, 19)
    CONTROL = slice(19, 33)


class EurotextilLayout:
    """Field offsets of the EUROTEXTIL GS1 label."""

    LENGTH = 45
    PREFIX = "01"
    PO = slice(2, 8)
    CODE = slice(11, 18)
    COLOR = slice(27, 30)
    SEQUENCE = slice(31, 36)
    QUANTITY = slice(37, 42)


def product_not_found_message(code: str) -> str:
    return f"Produto {code} não encontrado"


def invalid_length_message(length: int) -> str:
    return f"Código inválido ({length} dígitos, esperado 33 ou 45)"


class LabelDecoder:
    """
    Supplier label decoder.

    Classifies a digit string by length (and prefix for EUROTEXTIL), slices
    the fields out of it and resolves the product code in the catalog.

    Example:
        >>> decoder = LabelDecoder(CodeMatcher(index))
        >>> label = decoder.decode("000004170000000012300099887766554")
        >>> label.format
        <LabelFormat.LITORAL: 'LITORAL'>
    """

    def __init__(self, matcher: CodeMatcher) -> None:
        """
        Initialize decoder.

        Args:
            matcher: Code matcher used for product lookup
        """
        self._matcher = matcher

    @classmethod
    def for_index(cls, index: CatalogIndex) -> "LabelDecoder":
        """Create a decoder over a catalog index."""
        return cls(CodeMatcher(index))

    def decode(self, digits: str) -> DecodedLabel:
        """
        Decode a scanned label.

        Args:
            digits: Raw label payload

        Returns:
            DecodedLabel; unknown formats and unmatched products are
            reported through its error fields
        """
        length = len(digits)

        if length == LitoralLayout.LENGTH:
            return self._decode_litoral(digits)

        if length == EurotextilLayout.LENGTH and digits.startswith(EurotextilLayout.PREFIX):
            return self._decode_eurotextil(digits)

        logger.debug(f"Unknown label format ({length} digits)")
        return DecodedLabel(
            format=LabelFormat.UNKNOWN,
            length=length,
            raw=digits,
            error=invalid_length_message(length),
            error_kind=LabelErrorKind.UNKNOWN_FORMAT,
        )

    def _decode_litoral(self, digits: str) -> DecodedLabel:
        """Decode a 33-digit LITORAL label."""
        code = digits[LitoralLayout.CODE]
        match = self._matcher.resolve(code)

        return DecodedLabel(
            format=LabelFormat.LITORAL,
            length=len(digits),
            raw=digits,
            code=code,
            quantity=parse_decimal(digits[LitoralLayout.QUANTITY]),
            control=digits[LitoralLayout.CONTROL],
            requires_manual_color=True,
            match=match,
            **self._not_found(code, match.found),
        )

    def _decode_eurotextil(self, digits: str) -> DecodedLabel:
        """Decode a 45-digit EUROTEXTIL GS1 label."""
        code = digits[EurotextilLayout.CODE]
        match = self._matcher.resolve(code)

        return DecodedLabel(
            format=LabelFormat.EUROTEXTIL,
            length=len(digits),
            raw=digits,
            po=digits[EurotextilLayout.PO],
            code=code,
            color=strip_or_default(digits[EurotextilLayout.COLOR]),
            sequence=strip_or_default(digits[EurotextilLayout.SEQUENCE]),
            quantity=parse_decimal(digits[EurotextilLayout.QUANTITY]),
            requires_manual_color=False,
            match=match,
            **self._not_found(code, match.found),
        )

    @staticmethod
    def _not_found(code: str, found: bool) -> dict:
        """Error fields for a label whose product was not matched."""
        if found:
            return {}
        logger.debug(f"Product {code} not found")
        return {
            "error": product_not_found_message(code),
            "error_kind": LabelErrorKind.PRODUCT_NOT_FOUND,
        }
