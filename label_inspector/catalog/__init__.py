"""
==============================================================================
Catalog Package - Product Lookup
==============================================================================

Product catalog index with tolerant code matching.

Classes:
--------
- ProductRecord: Pydantic model for catalog file records
- ProductView: Read-only product stored in the index
- CatalogIndex: Index keyed by product code, with free-text search
- CodeMatcher: Multi-stage code resolution against the index

==============================================================================
"""

from .models import MatchMethod, MatchResult, ProductRecord, ProductView
from .catalog import CatalogIndex, scan_order
from .loader import load_catalog, parse_catalog
from .matcher import CodeMatcher

__all__ = [
    "ProductRecord",
    "ProductView",
    "MatchMethod",
    "MatchResult",
    "CatalogIndex",
    "scan_order",
    "CodeMatcher",
    "load_catalog",
    "parse_catalog",
]
