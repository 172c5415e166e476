"""
Book

This package provides the Book record and its data-access repository.
"""

from bookstore.book.model import Book
from bookstore.book.repository import BookRepository

__all__ = ["Book", "BookRepository"]
