"""
Book service.

Queries accept the permitted includes and eagerly load exactly those
relations.  Nothing here validates relation names; that is the
includes resolver's job.
"""

from collections.abc import Iterable

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.book import Book
from app.services.eager_loading import eager_load_options


async def list_books(
    db: AsyncSession,
    includes: Iterable[str] = (),
) -> list[Book]:
    """List every book, with permitted relations batch-loaded."""
    stmt = select(Book).options(*eager_load_options(Book, includes)).order_by(Book.id)
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def get_book_by_id(
    book_id: int,
    db: AsyncSession,
    includes: Iterable[str] = (),
) -> Book:
    stmt = select(Book).options(*eager_load_options(Book, includes)).where(Book.id == book_id)
    result = await db.execute(stmt)
    book = result.scalar_one_or_none()
    if book is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Book not found")
    return book
