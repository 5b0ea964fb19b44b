"""
==============================================================================
Catalog Index Module
==============================================================================

Read-only product index keyed by the literal product code.

Features:
---------
- Index built once from the loaded records
- Keys are the product code exactly as supplied (no zero stripping)
- Duplicate codes: the last record in input order wins
- Scan order: canonical integer codes ascending, then the rest as inserted
- Free-text search over code, description and ERP name
- Supplier grouping for catalog listings

Example:
--------
    records = load_catalog(Path("depra.json"))
    index = CatalogIndex.build(records)
    view = index.get("4170")

==============================================================================
"""

from __future__ import annotations

import logging
import re
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from .models import ProductRecord, ProductView


# Module logger
logger = logging.getLogger(__name__)


# Supplier groups shown by the catalog listing
LITORAL_GROUP = "LITORAL"
EUROTEXTIL_GROUP = "EUROTEXTIL"

# Integer-like codes up to this value are scanned ahead of the others
MAX_INTEGER_KEY = 2 ** 32 - 2
INTEGER_KEY_RE = re.compile(r"0|[1-9][0-9]*")


def scan_order(codes: Iterable[str]) -> List[str]:
    """
    Order product codes for the linear scans.

    Codes that are canonical non-negative integers (no leading zeros, at
    most MAX_INTEGER_KEY) come first in ascending numeric order. Every other
    code follows in insertion order, so "0123" is scanned after "4170".

    Args:
        codes: Distinct codes in insertion order

    Returns:
        Codes in scan order
    """
    integer_codes: List[str] = []
    other_codes: List[str] = []

    for code in codes:
        if INTEGER_KEY_RE.fullmatch(code) and int(code) <= MAX_INTEGER_KEY:
            integer_codes.append(code)
        else:
            other_codes.append(code)

    integer_codes.sort(key=int)
    return integer_codes + other_codes


class CatalogIndex:
    """
    Product index keyed by product code.

    Iteration follows scan_order(): integer-like codes ascending, then the
    remaining codes in order of first occurrence. The matcher, diagnostics,
    search and listing all scan in this order.

    Attributes:
        record_count: Number of records the index was built from

    Example:
        >>> index = CatalogIndex.build([ProductRecord(product_code="4170")])
        >>> "4170" in index
        True
    """

    def __init__(self, products: Dict[str, ProductView], record_count: int = 0) -> None:
        """
        Wrap an already-built mapping.

        Args:
            products: Mapping of product code to view
            record_count: Number of source records (duplicates included)
        """
        self._products: Mapping[str, ProductView] = MappingProxyType(
            {code: products[code] for code in scan_order(products)}
        )
        self._record_count = record_count

    @classmethod
    def build(cls, records: Iterable[ProductRecord]) -> "CatalogIndex":
        """
        Build the index from catalog records.

        Args:
            records: Records in source order

        Returns:
            CatalogIndex with one entry per distinct product code
        """
        products: Dict[str, ProductView] = {}
        count = 0

        for record in records:
            count += 1
            code = str(record.product_code)
            if code in products:
                logger.debug(f"Duplicate product code {code!r}, keeping the later record")
            products[code] = ProductView.from_record(record)

        logger.debug(f"Index built: {count} records, {len(products)} unique codes")
        return cls(products, record_count=count)

    # =========================================================================
    # MAPPING ACCESS
    # =========================================================================

    @property
    def record_count(self) -> int:
        """Number of records the index was built from."""
        return self._record_count

    def get(self, code: str) -> Optional[ProductView]:
        """Get product by exact code."""
        return self._products.get(code)

    def items(self) -> Iterator[Tuple[str, ProductView]]:
        """Iterate (code, product) pairs in index order."""
        return iter(self._products.items())

    def __contains__(self, code: object) -> bool:
        return code in self._products

    def __iter__(self) -> Iterator[str]:
        return iter(self._products)

    def __len__(self) -> int:
        return len(self._products)

    def __repr__(self) -> str:
        return f"CatalogIndex(codes={len(self)}, records={self._record_count})"

    # =========================================================================
    # SEARCH METHODS
    # =========================================================================

    def scan(self, term: str, limit: int = 20) -> List[ProductView]:
        """
        Free-text search over the catalog.

        A product matches when the term is a substring of its code, or a
        case-insensitive substring of its description or ERP name.

        Args:
            term: Search term
            limit: Maximum results

        Returns:
            Matching products in index order
        """
        lower_term = term.lower()
        results: List[ProductView] = []

        for code, product in self._products.items():
            if (
                term in code
                or lower_term in product.description.lower()
                or lower_term in product.erp_name.lower()
            ):
                results.append(product)
                if len(results) >= limit:
                    break

        return results

    def group_by_supplier(self) -> Dict[str, List[ProductView]]:
        """
        Group products by supplier for listings.

        Any supplier group mentioning LITORAL is listed under LITORAL,
        everything else under EUROTEXTIL.
        """
        groups: Dict[str, List[ProductView]] = {}

        for product in self._products.values():
            key = LITORAL_GROUP if LITORAL_GROUP in product.supplier_group else EUROTEXTIL_GROUP
            groups.setdefault(key, []).append(product)

        return groups

    def get_stats(self) -> Dict:
        """Get index statistics."""
        return {
            "total_records": self._record_count,
            "unique_codes": len(self._products),
            "suppliers": {
                supplier: len(products)
                for supplier, products in self.group_by_supplier().items()
            },
        }
