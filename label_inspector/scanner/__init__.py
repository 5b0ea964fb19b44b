"""
==============================================================================
Scanner Package - Label Decoding
==============================================================================

Decoding of supplier label payloads and failure diagnostics.

Classes:
--------
- LabelDecoder: Positional decoder for LITORAL and EUROTEXTIL labels
- DiagnosticsGenerator: Suggestions for unmatched product codes

==============================================================================
"""

from .models import (
    DecodedLabel,
    Diagnostics,
    LabelErrorKind,
    LabelFormat,
    SimilarProduct,
    Truncation,
)
from .core import LabelDecoder
from .diagnostics import DiagnosticsGenerator
from .samples import SAMPLE_LABELS, SampleLabel

__all__ = [
    "DecodedLabel",
    "Diagnostics",
    "LabelErrorKind",
    "LabelFormat",
    "SimilarProduct",
    "Truncation",
    "LabelDecoder",
    "DiagnosticsGenerator",
    "SAMPLE_LABELS",
    "SampleLabel",
]
