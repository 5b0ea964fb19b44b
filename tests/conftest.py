"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides catalog, decoder, service and console fixtures.

==============================================================================
"""

import io
import json
from pathlib import Path
from typing import Dict, List

import pytest
from rich.console import Console

from label_inspector.catalog import CatalogIndex, CodeMatcher, ProductRecord, parse_catalog
from label_inspector.config import Settings
from label_inspector.scanner import DiagnosticsGenerator, LabelDecoder
from label_inspector.services import InspectorService
from label_inspector.utils.report import ReportPrinter


# ============================================================================
# CATALOG FIXTURES
# ============================================================================

CATALOG_DATA: List[Dict] = [
    {
        "codigo_produto": "4170",
        "produto": "HELANCA LIGHT",
        "cod_erp": "E1",
        "nome_erp": "Helanca",
        "fornecedor": "LITORAL GROUP",
    },
    {
        "codigo_produto": 3260226,
        "produto": "SATIN INDONESIA",
        "cod_erp": "E2",
        "nome_erp": "Satin",
        "fornecedor": "LITORAL GROUP",
    },
    {
        "codigo_produto": "5142100",
        "produto": "CREPE AMANDA",
        "cod_erp": "E3",
        "nome_erp": "Crepe Amanda",
        "fornecedor": "EUROTEXTIL",
    },
    {
        "codigo_produto": "669103",
        "produto": "TWO WAY SPAN",
        "cod_erp": "E4",
        "nome_erp": "Two Way",
        "fornecedor": "EUROTEXTIL",
    },
]


@pytest.fixture
def catalog_data() -> List[Dict]:
    """Raw catalog export as decoded from JSON."""
    return [dict(item) for item in CATALOG_DATA]


@pytest.fixture
def records(catalog_data: List[Dict]) -> List[ProductRecord]:
    """Validated catalog records."""
    return parse_catalog(catalog_data)


@pytest.fixture
def index(records: List[ProductRecord]) -> CatalogIndex:
    """Catalog index built from the sample records."""
    return CatalogIndex.build(records)


@pytest.fixture
def empty_index() -> CatalogIndex:
    """Index with no products."""
    return CatalogIndex.build([])


@pytest.fixture
def catalog_file(tmp_path: Path, catalog_data: List[Dict]) -> Path:
    """Catalog export written to disk."""
    path = tmp_path / "depra.json"
    path.write_text(json.dumps(catalog_data, ensure_ascii=False), encoding="utf-8")
    return path


def make_index(*codes: str) -> CatalogIndex:
    """Build an index with one product per code, in the given order."""
    return CatalogIndex.build(
        ProductRecord(product_code=code, description=f"PRODUCT {code}")
        for code in codes
    )


@pytest.fixture
def index_factory():
    """Factory building small indexes from product codes."""
    return make_index


# ============================================================================
# COMPONENT FIXTURES
# ============================================================================

@pytest.fixture
def decoder(index: CatalogIndex) -> LabelDecoder:
    return LabelDecoder(CodeMatcher(index))


@pytest.fixture
def diagnostics(index: CatalogIndex) -> DiagnosticsGenerator:
    return DiagnosticsGenerator(index)


@pytest.fixture
def settings(catalog_file: Path) -> Settings:
    """Settings pointing at the temporary catalog file."""
    return Settings(_env_file=None, products_file=str(catalog_file))


@pytest.fixture
def service(index: CatalogIndex, settings: Settings) -> InspectorService:
    return InspectorService(index, settings)


# ============================================================================
# OUTPUT FIXTURES
# ============================================================================

@pytest.fixture
def console() -> Console:
    """Recording console that never wraps report lines."""
    return Console(file=io.StringIO(), record=True, width=200, color_system=None)


@pytest.fixture
def printer(console: Console) -> ReportPrinter:
    return ReportPrinter(console=console)
