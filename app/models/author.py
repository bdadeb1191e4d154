from __future__ import annotations

"""
Author model.

An author owns many books.  The `books` collection is never loaded
implicitly; callers opt in with `selectinload` (see
`app.services.eager_loading`), otherwise touching it raises.
"""

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base, IntegerPrimaryKeyMixin, TimestampMixin

if TYPE_CHECKING:
    from app.models.book import Book


class Author(Base, IntegerPrimaryKeyMixin, TimestampMixin):
    __tablename__ = "authors"

    name: Mapped[str] = mapped_column(String(256), nullable=False)

    # ── Relationships ────────────────────────────────────────────────
    books: Mapped[list["Book"]] = relationship(  # noqa: F821
        back_populates="author",
        order_by="Book.id",
        lazy="raise",
    )

    def __repr__(self) -> str:
        return f"<Author {self.name}>"
