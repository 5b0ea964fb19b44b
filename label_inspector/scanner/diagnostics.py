"""
==============================================================================
Diagnostics Module
==============================================================================

Suggestions for codes that failed every matching stage.

Suggestions (in order):
----------------------
1. Code without leading zeros
2. Code with its last 2, 3 and 4 characters cut (leading zeros stripped)
3. Up to five catalog codes containing the first four characters of the
   code (leading zeros stripped), or an explicit "none found"

==============================================================================
"""

from __future__ import annotations

import logging
from typing import List, Optional

from label_inspector.catalog import CatalogIndex
from label_inspector.utils.normalization import strip_leading_zeros

from .models import DecodedLabel, Diagnostics, SimilarProduct, Truncation


# Module logger
logger = logging.getLogger(__name__)


TRUNCATION_CUTS = (2, 3, 4)
SEARCH_BASE_LENGTH = 4


class DiagnosticsGenerator:
    """
    Generates debugging suggestions for unmatched codes.

    Attributes:
        similar_limit: Maximum similar products listed
        preview_length: Characters of description kept per similar product
    """

    def __init__(
        self,
        index: CatalogIndex,
        similar_limit: int = 5,
        preview_length: int = 40
    ) -> None:
        self._index = index
        self.similar_limit = similar_limit
        self.preview_length = preview_length

    def for_label(self, label: DecodedLabel) -> Optional[Diagnostics]:
        """
        Diagnose a decoded label.

        Returns:
            Diagnostics, or None when the label has no extracted code or
            its product was matched
        """
        if label.code is None or label.product is not None:
            return None
        return self.generate(label.code)

    def generate(self, code: str) -> Diagnostics:
        """
        Build suggestions for a code.

        Args:
            code: Code extracted from the label

        Returns:
            Diagnostics with truncations and similar products
        """
        truncations = [
            Truncation(cut=cut, base=strip_leading_zeros(code[:-cut]))
            for cut in TRUNCATION_CUTS
            if len(code) > cut
        ]

        base_search = strip_leading_zeros(code[:SEARCH_BASE_LENGTH])
        similar = self._find_similar(base_search)

        logger.debug(f"Diagnostics for {code}: {len(similar)} similar products")

        return Diagnostics(
            code=code,
            stripped=strip_leading_zeros(code),
            truncations=truncations,
            base_search=base_search,
            similar=similar,
            similar_found=bool(similar),
        )

    def _find_similar(self, base_search: str) -> List[SimilarProduct]:
        """Collect index entries whose code contains the search base."""
        similar: List[SimilarProduct] = []

        for code, product in self._index.items():
            if len(similar) >= self.similar_limit:
                break
            if base_search in code:
                similar.append(SimilarProduct(
                    code=code,
                    description=product.description[:self.preview_length],
                    erp_code=product.erp_code,
                    erp_name=product.erp_name,
                ))

        return similar
