"""
Author service — same shape as the book service, with the `books`
collection as the optional relation.
"""

from collections.abc import Iterable

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.author import Author
from app.services.eager_loading import eager_load_options


async def list_authors(
    db: AsyncSession,
    includes: Iterable[str] = (),
) -> list[Author]:
    stmt = select(Author).options(*eager_load_options(Author, includes)).order_by(Author.id)
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def get_author_by_id(
    author_id: int,
    db: AsyncSession,
    includes: Iterable[str] = (),
) -> Author:
    """Get a single author, 404 when it does not exist."""
    stmt = select(Author).options(*eager_load_options(Author, includes)).where(Author.id == author_id)
    result = await db.execute(stmt)
    author = result.scalar_one_or_none()
    if author is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Author not found")
    return author
