"""
==============================================================================
Label Models Module
==============================================================================

Pydantic models produced by the label decoder, the code matcher and the
diagnostics generator.

==============================================================================
"""

import enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from label_inspector.catalog.models import MatchResult, ProductView


class LabelFormat(str, enum.Enum):
    """Supplier label layouts recognised by the decoder."""

    LITORAL = "LITORAL"
    EUROTEXTIL = "EUROTEXTIL"
    UNKNOWN = "DESCONHECIDO"


class LabelErrorKind(str, enum.Enum):
    """Data-level decode outcomes carried on the label."""

    UNKNOWN_FORMAT = "unknown_format"
    PRODUCT_NOT_FOUND = "product_not_found"


class DecodedLabel(BaseModel):
    """
    Structured view of a scanned label.

    Fields beyond format/length/raw are only filled for the layout that
    defines them: control for LITORAL; po, color and sequence for EUROTEXTIL.
    """

    model_config = ConfigDict(frozen=True)

    format: LabelFormat
    length: int
    raw: str
    code: Optional[str] = None
    quantity: Optional[float] = None
    control: Optional[str] = None
    po: Optional[str] = None
    color: Optional[str] = None
    sequence: Optional[str] = None
    requires_manual_color: Optional[bool] = None
    match: Optional[MatchResult] = None
    error: Optional[str] = None
    error_kind: Optional[LabelErrorKind] = None

    @property
    def product(self) -> Optional[ProductView]:
        """Matched product, if any."""
        return self.match.record if self.match else None

    @property
    def ok(self) -> bool:
        return self.error is None


class Truncation(BaseModel):
    """Code with its last `cut` characters removed, leading zeros stripped."""

    cut: int
    base: str


class SimilarProduct(BaseModel):
    """Catalog entry whose code contains the search base."""

    code: str
    description: str
    erp_code: str
    erp_name: str


class Diagnostics(BaseModel):
    """
    Suggestions for a code that failed every matching stage.

    Attributes:
        code: Code extracted from the label
        stripped: Code without leading zeros
        truncations: Shortened candidates in cut order (2, 3, 4)
        base_search: Substring used to look for similar products
        similar: Similar catalog entries in index order
        similar_found: False when no similar product exists
    """

    code: str
    stripped: str
    truncations: List[Truncation] = Field(default_factory=list)
    base_search: str
    similar: List[SimilarProduct] = Field(default_factory=list)
    similar_found: bool = False
