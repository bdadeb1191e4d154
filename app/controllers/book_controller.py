"""
Book controller — listing & retrieval with opt-in author loading.

`?includes=author` is resolved against the includes allow-list for
("books", <route name>).  Malformed or disallowed values are ignored:
the client simply gets the base fields back.

Controllers are THIN: they resolve includes, delegate to the service,
and render schemas.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.includes import PermittedIncludes, include_permissions
from app.schemas import BookOut
from app.serializers import render_book, render_books
from app.services import book_service

# Route names double as the includes purpose key ("index", "show"), so
# they repeat across routers; look routes up by path, not url_path_for.
router = APIRouter(prefix="/api/v1/books", tags=["Books"])


@router.get(
    "",
    name="index",
    response_model=list[BookOut],
    response_model_exclude_unset=True,
)
async def list_books(
    includes: PermittedIncludes = Depends(include_permissions()),
    db: AsyncSession = Depends(get_db),
):
    """List all books; `?includes=author` nests each book's author."""
    books = await book_service.list_books(db, includes.keys())
    return render_books(books, includes)


@router.get(
    "/{book_id}",
    name="show",
    response_model=BookOut,
    response_model_exclude_unset=True,
)
async def get_book(
    book_id: int,
    includes: PermittedIncludes = Depends(include_permissions()),
    db: AsyncSession = Depends(get_db),
):
    book = await book_service.get_book_by_id(book_id, db, includes.keys())
    return render_book(book, includes)
