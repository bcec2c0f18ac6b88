"""Catalog entities persisted through the DAO layer."""

from .publisher import Publisher  # Must be imported before Book due to relationship
from .book import Book, BookStatus, BookTag
from .material import Material

__all__ = ["Book", "BookStatus", "BookTag", "Material", "Publisher"]
