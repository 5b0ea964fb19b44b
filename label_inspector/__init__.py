"""
==============================================================================
Supplier Label Inspector
==============================================================================

Decodes LITORAL and EUROTEXTIL supplier labels, resolves the embedded
product code against the catalog and explains failed matches.

==============================================================================
"""

__version__ = "1.0.0"
