"""
==============================================================================
Inspector Service Module
==============================================================================

Business logic tying the catalog index, the label decoder and the
diagnostics generator together.

Entry Points:
------------
- decode(digits)  -> DecodedLabel
- diagnose(label) -> Diagnostics | None
- scan(term)      -> list of ProductView

==============================================================================
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional

from label_inspector.catalog import CatalogIndex, ProductRecord, ProductView, load_catalog
from label_inspector.config import Settings, get_settings
from label_inspector.scanner import (
    DecodedLabel,
    Diagnostics,
    DiagnosticsGenerator,
    LabelDecoder,
)


# Module logger
logger = logging.getLogger(__name__)


class InspectorService:
    """
    Service for label inspection operations.

    Owns the read-only catalog index for the lifetime of the process and
    hands it to the decoder and diagnostics generator.

    Example:
        >>> service = InspectorService.from_file(Path("depra.json"))
        >>> label = service.decode("000004170000000012300099887766554")
        >>> label.product.description
        'HELANCA LIGHT'
    """

    def __init__(self, index: CatalogIndex, settings: Optional[Settings] = None) -> None:
        """
        Initialize service.

        Args:
            index: Catalog index built at startup
            settings: Application settings (global settings if None)
        """
        self._settings = settings or get_settings()
        self._index = index
        self._decoder = LabelDecoder.for_index(index)
        self._diagnostics = DiagnosticsGenerator(
            index,
            similar_limit=self._settings.similar_products_limit,
            preview_length=self._settings.description_preview_length,
        )

    @classmethod
    def from_records(
        cls,
        records: List[ProductRecord],
        settings: Optional[Settings] = None
    ) -> "InspectorService":
        """Create service from already-loaded records."""
        return cls(CatalogIndex.build(records), settings)

    @classmethod
    def from_file(
        cls,
        products_file: Path,
        settings: Optional[Settings] = None
    ) -> "InspectorService":
        """
        Create service from the catalog file.

        Raises:
            AppException: If the catalog cannot be loaded
        """
        index = CatalogIndex.build(load_catalog(products_file))
        stats = index.get_stats()
        logger.info(
            f"📦 Catalog index ready: {stats['unique_codes']} unique codes, "
            f"suppliers {stats['suppliers']}"
        )
        return cls(index, settings)

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def index(self) -> CatalogIndex:
        return self._index

    @property
    def settings(self) -> Settings:
        return self._settings

    # =========================================================================
    # OPERATIONS
    # =========================================================================

    def decode(self, digits: str) -> DecodedLabel:
        """Decode a label and resolve its product."""
        label = self._decoder.decode(digits)
        if label.error:
            logger.debug(f"Label {digits}: {label.error}")
        return label

    def diagnose(self, label: DecodedLabel) -> Optional[Diagnostics]:
        """Suggestions for a label whose product was not found."""
        return self._diagnostics.for_label(label)

    def scan(self, term: str) -> List[ProductView]:
        """Free-text catalog search capped at the configured limit."""
        return self._index.scan(term, limit=self._settings.search_limit)

    def group_by_supplier(self) -> Dict[str, List[ProductView]]:
        return self._index.group_by_supplier()
