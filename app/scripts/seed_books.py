"""
Demo data seeding script.

Populates a handful of authors, each with one book.  It is IDEMPOTENT —
authors are matched by name and only missing rows are inserted, so it
is safe to re-run (and it does run on every startup when
SEED_ON_STARTUP is enabled).

Usage:
    python -m app.scripts.seed_books
"""

import asyncio
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.core.config import settings
from app.models.author import Author
from app.models.book import Book

logger = logging.getLogger(__name__)

# ────────────────────────────────────────────────────────────────────
# 1.  AUTHOR → BOOK TITLES
# ────────────────────────────────────────────────────────────────────
CATALOGUE: dict[str, list[str]] = {
    "Alexandre Dumas": ["The Three Musketeers"],
    "C.S. Lewis": ["The Lion, the Witch and the Wardrobe"],
    "Robert C. Martin": ["Clean Code"],
}


# ────────────────────────────────────────────────────────────────────
# 2.  SEED FUNCTION (idempotent)
# ────────────────────────────────────────────────────────────────────
async def seed(session: AsyncSession) -> None:
    """Create authors & books if they don't already exist."""
    existing_names = set(
        (await session.execute(select(Author.name))).scalars().all()
    )

    created = 0
    for name, titles in CATALOGUE.items():
        if name in existing_names:
            continue
        author = Author(name=name)
        session.add(author)
        await session.flush()  # ensure author.id is available
        for title in titles:
            session.add(Book(title=title, author_id=author.id))
        created += 1

    await session.commit()
    logger.info("Seeded %d new author(s).", created)


# ────────────────────────────────────────────────────────────────────
# 3.  CLI entrypoint:  python -m app.scripts.seed_books
# ────────────────────────────────────────────────────────────────────
async def main() -> None:
    engine = create_async_engine(settings.DATABASE_URL, echo=False)
    async_session = async_sessionmaker(engine, expire_on_commit=False)
    async with async_session() as session:
        await seed(session)
    await engine.dispose()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
