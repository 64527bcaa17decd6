"""
Storage package: persistence of the export document.
"""

from .document import DocumentWriter

__all__ = ["DocumentWriter"]
