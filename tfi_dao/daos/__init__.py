"""Concrete DAOs for the catalog entities."""

from .book import BookDao
from .book_status import BookStatusDao
from .material import MaterialDao
from .publisher import PublisherDao

__all__ = ["BookDao", "BookStatusDao", "MaterialDao", "PublisherDao"]
