"""Storage backends for the tools catalog.

This module provides:
- CatalogStorage: Abstract base class for catalog storage
- FileManager: File-based implementation reading and writing JSON files
"""

from src.storage.permanent_storage.base import CatalogStorage
from src.storage.permanent_storage.file_manager import FileManager

__all__ = [
    "CatalogStorage",
    "FileManager",
]
