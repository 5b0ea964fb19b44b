"""
==============================================================================
Code Matcher Module
==============================================================================

Resolves a code extracted from a label against the catalog index.

Matching Cascade (first hit wins):
---------------------------------
1. exact           - code is an index key
2. stripped_zeros  - code without leading zeros is an index key
3. normalized      - first key whose zero-stripped form (both ends) equals
                     the code's zero-stripped form
4. prefix_6..3     - first key whose leading-stripped form starts with the
                     first N characters of the leading-stripped code,
                     trying N = 6, 5, 4, 3 in that order

Stages 3 and 4 scan the whole index in insertion order.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Optional

from label_inspector.utils.normalization import strip_leading_zeros, strip_zeros

from .catalog import CatalogIndex
from .models import MatchMethod, MatchResult


# Module logger
logger = logging.getLogger(__name__)


# Prefix lengths, most specific first
PREFIX_SIZES = (6, 5, 4, 3)


class CodeMatcher:
    """
    Tolerant product code matcher.

    Example:
        >>> matcher = CodeMatcher(index)
        >>> result = matcher.resolve("00004170")
        >>> result.method
        <MatchMethod.STRIPPED_ZEROS: 'stripped_zeros'>
    """

    def __init__(self, index: CatalogIndex) -> None:
        """
        Initialize matcher.

        Args:
            index: Read-only catalog index
        """
        self._index = index

    def resolve(self, code: str) -> MatchResult:
        """
        Resolve a code through the matching cascade.

        Args:
            code: Code extracted from a label

        Returns:
            MatchResult; record is None when every stage failed
        """
        product = self._index.get(code)
        if product is not None:
            logger.debug(f"Exact match: {code}")
            return MatchResult(record=product, method=MatchMethod.EXACT)

        stripped = strip_leading_zeros(code)
        product = self._index.get(stripped)
        if product is not None:
            logger.debug(f"Match without leading zeros: {code} → {stripped}")
            return MatchResult(record=product, method=MatchMethod.STRIPPED_ZEROS)

        result = self._match_normalized(stripped)
        if result is not None:
            return result

        result = self._match_prefix(stripped)
        if result is not None:
            return result

        logger.debug(f"No catalog match for {code}")
        return MatchResult()

    def _match_normalized(self, stripped: str) -> Optional[MatchResult]:
        """Compare codes with zeros removed from both ends."""
        normalized = strip_zeros(stripped)

        for stored_code, product in self._index.items():
            if strip_zeros(stored_code) == normalized:
                logger.debug(f"Normalized match: {normalized} → {stored_code}")
                return MatchResult(
                    record=product,
                    method=MatchMethod.NORMALIZED,
                    base_used=normalized,
                )

        return None

    def _match_prefix(self, stripped: str) -> Optional[MatchResult]:
        """Compare leading digits, longest prefix first."""
        for size in PREFIX_SIZES:
            if len(stripped) < size:
                continue

            prefix = stripped[:size]

            for stored_code, product in self._index.items():
                stored = strip_leading_zeros(stored_code)
                if len(stored) >= size and stored[:size] == prefix:
                    logger.debug(f"Prefix match ({size}): {prefix} → {stored_code}")
                    return MatchResult(
                        record=product,
                        method=MatchMethod.prefix(size),
                        base_used=prefix,
                    )

        return None
