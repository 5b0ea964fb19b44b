"""
==============================================================================
Services Package
==============================================================================

Business logic layer for label inspection.

Classes:
--------
- InspectorService: Decode, diagnose and search against the catalog

Usage:
------
    from label_inspector.services import InspectorService

    service = InspectorService.from_file(settings.products_path)
    label = service.decode(digits)

==============================================================================
"""

from .inspector_service import InspectorService

__all__ = [
    "InspectorService",
]
