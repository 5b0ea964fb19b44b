"""
==============================================================================
Catalog Loader Module
==============================================================================

Reads the supplier catalog export (a JSON array of product objects).

JSON Structure:
--------------
[
  {
    "codigo_produto": "4170",
    "produto": "HELANCA LIGHT",
    "cod_erp": "E1",
    "nome_erp": "Helanca",
    "fornecedor": "LITORAL GROUP"
  },
  ...
]

==============================================================================
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List

from pydantic import ValidationError

from label_inspector.core import exceptions

from .models import ProductRecord


# Module logger
logger = logging.getLogger(__name__)


def load_catalog(products_file: Path) -> List[ProductRecord]:
    """
    Load catalog records from a JSON file.

    Args:
        products_file: Path to the catalog export

    Returns:
        Records in file order

    Raises:
        AppException: CATALOG_NOT_FOUND or CATALOG_INVALID
    """
    try:
        with products_file.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.error(f"Products file not found: {products_file}")
        raise exceptions.catalog_not_found(str(products_file))
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {products_file}: {e}")
        raise exceptions.catalog_invalid(str(products_file), str(e))

    return parse_catalog(data, source=str(products_file))


def parse_catalog(data: object, source: str = "<memory>") -> List[ProductRecord]:
    """
    Validate already-decoded catalog data.

    Args:
        data: Decoded JSON document
        source: Name used in error messages

    Returns:
        Valid records in input order (invalid items are logged and skipped)

    Raises:
        AppException: If the root element is not an array
    """
    if not isinstance(data, list):
        logger.error(f"Catalog root must be an array: {source}")
        raise exceptions.catalog_invalid(source, "root element is not an array")

    records: List[ProductRecord] = []
    skipped = 0

    for position, item in enumerate(data):
        try:
            records.append(ProductRecord.model_validate(item))
        except ValidationError as e:
            logger.warning(f"Skipping invalid product at position {position}: {e}")
            skipped += 1

    if skipped:
        logger.warning(f"⚠️ Skipped {skipped} invalid products in {source}")
    logger.info(f"✅ Loaded {len(records)} products from {source}")
    return records
