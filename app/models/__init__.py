"""
Models package — import every model so SQLAlchemy's Base.metadata
knows about all tables (critical for `create_all` / Alembic).
"""

from app.models.base import Base, IntegerPrimaryKeyMixin, TimestampMixin
from app.models.author import Author
from app.models.book import Book

__all__ = [
    "Base",
    "IntegerPrimaryKeyMixin",
    "TimestampMixin",
    "Author",
    "Book",
]
