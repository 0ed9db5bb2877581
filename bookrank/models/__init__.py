"""
Database models package
"""

from .base import Base, ModelMixin
from .book import Book
from .sale import Sale

__all__ = ["Base", "ModelMixin", "Book", "Sale"]
