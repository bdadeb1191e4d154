from __future__ import annotations

"""
Book model.

Every book belongs to exactly one author.  `author` is lazy="raise":
listing endpoints must request it through the includes allow-list so
it arrives in one batched SELECT instead of one query per row.
"""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base, IntegerPrimaryKeyMixin, TimestampMixin

if TYPE_CHECKING:
    from app.models.author import Author


class Book(Base, IntegerPrimaryKeyMixin, TimestampMixin):
    __tablename__ = "books"

    title: Mapped[str] = mapped_column(String(512), nullable=False)
    author_id: Mapped[int] = mapped_column(
        ForeignKey("authors.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )

    # ── Relationships ────────────────────────────────────────────────
    author: Mapped["Author"] = relationship(  # noqa: F821
        back_populates="books",
        lazy="raise",
    )

    def __repr__(self) -> str:
        return f"<Book {self.title}>"
