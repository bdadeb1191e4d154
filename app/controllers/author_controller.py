"""
Author controller — listing & retrieval with opt-in `books` loading.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.includes import PermittedIncludes, include_permissions
from app.schemas import AuthorOut
from app.serializers import render_author, render_authors
from app.services import author_service

# Route names double as the includes purpose key ("index", "show"), so
# they repeat across routers; look routes up by path, not url_path_for.
router = APIRouter(prefix="/api/v1/authors", tags=["Authors"])


@router.get(
    "",
    name="index",
    response_model=list[AuthorOut],
    response_model_exclude_unset=True,
)
async def list_authors(
    includes: PermittedIncludes = Depends(include_permissions()),
    db: AsyncSession = Depends(get_db),
):
    authors = await author_service.list_authors(db, includes.keys())
    return render_authors(authors, includes)


@router.get(
    "/{author_id}",
    name="show",
    response_model=AuthorOut,
    response_model_exclude_unset=True,
)
async def get_author(
    author_id: int,
    includes: PermittedIncludes = Depends(include_permissions()),
    db: AsyncSession = Depends(get_db),
):
    """Get one author; `?includes=books` nests their books."""
    author = await author_service.get_author_by_id(author_id, db, includes.keys())
    return render_author(author, includes)
