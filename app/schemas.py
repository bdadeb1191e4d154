"""
Pydantic schemas for response serialization.

Kept in a single file for now — split per-domain when it grows.
Schemas are deliberately decoupled from SQLAlchemy models so the
API surface can evolve independently of the DB layer.

Optional relations (`author`, `books`) default to None and are only
set when the relation was permitted; routes render with
`response_model_exclude_unset=True`, so an unset relation is omitted
from the JSON entirely rather than emitted as null.
"""

from __future__ import annotations

from pydantic import BaseModel


# ── Author ───────────────────────────────────────────────────────────
class AuthorOut(BaseModel):
    id: int
    name: str
    books: list[BookOut] | None = None

    model_config = {"from_attributes": True}


# ── Book ─────────────────────────────────────────────────────────────
class BookOut(BaseModel):
    id: int
    title: str
    author: AuthorOut | None = None

    model_config = {"from_attributes": True}


AuthorOut.model_rebuild()
BookOut.model_rebuild()
