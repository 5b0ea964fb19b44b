"""
==============================================================================
Product Models Module
==============================================================================

Pydantic models for catalog records and match results.

The catalog file uses the supplier export field names (codigo_produto,
produto, cod_erp, nome_erp, fornecedor); they are mapped to English
attribute names through aliases.

==============================================================================
"""

import enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProductRecord(BaseModel):
    """
    Product record as read from the catalog file.

    Attributes:
        product_code: Supplier product code (always stored as a string)
        description: Product description
        erp_code: Product code in the ERP
        erp_name: Product name in the ERP
        supplier_group: Supplier group (e.g., "LITORAL GROUP")
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
    )

    product_code: str = Field(..., alias="codigo_produto", description="Supplier product code")
    description: str = Field(default="", alias="produto", description="Product description")
    erp_code: str = Field(default="", alias="cod_erp", description="ERP product code")
    erp_name: str = Field(default="", alias="nome_erp", description="ERP product name")
    supplier_group: str = Field(default="", alias="fornecedor", description="Supplier group")

    @field_validator("product_code", mode="before")
    @classmethod
    def coerce_code(cls, value: Any) -> str:
        """Codes may be exported as JSON numbers; keep their literal string form."""
        if value is None:
            raise ValueError("codigo_produto is required")
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)

    @field_validator("description", "erp_code", "erp_name", "supplier_group", mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> str:
        """Null text fields become empty strings."""
        if value is None:
            return ""
        return str(value)


class ProductView(BaseModel):
    """Read-only view of a product stored in the catalog index."""

    model_config = ConfigDict(frozen=True)

    product_code: str
    description: str = ""
    erp_code: str = ""
    erp_name: str = ""
    supplier_group: str = ""

    @classmethod
    def from_record(cls, record: ProductRecord) -> "ProductView":
        """Create view from a catalog record."""
        return cls(
            product_code=record.product_code,
            description=record.description,
            erp_code=record.erp_code,
            erp_name=record.erp_name,
            supplier_group=record.supplier_group,
        )


class MatchMethod(str, enum.Enum):
    """Cascade stage that produced a catalog hit."""

    EXACT = "exact"
    STRIPPED_ZEROS = "stripped_zeros"
    NORMALIZED = "normalized"
    PREFIX_6 = "prefix_6"
    PREFIX_5 = "prefix_5"
    PREFIX_4 = "prefix_4"
    PREFIX_3 = "prefix_3"

    @classmethod
    def prefix(cls, size: int) -> "MatchMethod":
        """Get the prefix method for a prefix length (3..6)."""
        return cls(f"prefix_{size}")


class MatchResult(BaseModel):
    """
    Outcome of resolving a code against the catalog.

    Attributes:
        record: Matched product, None when every stage failed
        method: Stage that matched
        base_used: Normalized form or prefix used by the later stages
    """

    model_config = ConfigDict(frozen=True)

    record: Optional[ProductView] = None
    method: Optional[MatchMethod] = None
    base_used: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.record is not None
