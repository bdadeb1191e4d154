"""
Renderers: ORM rows + permitted includes → response schemas.

Base fields are always emitted.  A relation is attached only when its
name is in the permitted includes, and only then is the ORM attribute
touched, since unloaded relations raise on access.
"""

from collections.abc import Mapping
from types import MappingProxyType

from app.models.author import Author
from app.models.book import Book
from app.schemas import AuthorOut, BookOut

NO_INCLUDES: Mapping[str, bool] = MappingProxyType({})


def render_book(book: Book, includes: Mapping[str, bool] = NO_INCLUDES) -> BookOut:
    fields = {"id": book.id, "title": book.title}
    if includes.get("author"):
        fields["author"] = render_author(book.author)
    return BookOut(**fields)


def render_author(author: Author, includes: Mapping[str, bool] = NO_INCLUDES) -> AuthorOut:
    fields = {"id": author.id, "name": author.name}
    if includes.get("books"):
        fields["books"] = [render_book(book) for book in author.books]
    return AuthorOut(**fields)


def render_books(books: list[Book], includes: Mapping[str, bool] = NO_INCLUDES) -> list[BookOut]:
    return [render_book(book, includes) for book in books]


def render_authors(authors: list[Author], includes: Mapping[str, bool] = NO_INCLUDES) -> list[AuthorOut]:
    return [render_author(author, includes) for author in authors]
