"""
==============================================================================
Core Package
==============================================================================

Exception handling shared by the catalog loader and the command line.

Usage:
------
    from label_inspector.core import AppException
    from label_inspector.core import exceptions

    raise exceptions.catalog_not_found("depra.json")

==============================================================================
"""

from .exceptions import AppException

__all__ = [
    "AppException",
]
