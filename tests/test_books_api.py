"""End-to-end tests for the book & author endpoints."""

import httpx
import pytest
from fastapi import Depends, FastAPI, Request
from fastapi.routing import APIRoute

from app.includes import (
    IncludeContext,
    IncludeContextError,
    PermittedIncludes,
    UnregisteredIncludesError,
    include_permissions,
    permitted_relations,
)
from app.main import app as bookshelf_app


class TestListBooks:
    """Tests for GET /api/v1/books."""

    async def test_without_includes(self, client: httpx.AsyncClient) -> None:
        response = await client.get("/api/v1/books")
        assert response.status_code == 200
        assert response.json() == [
            {"id": 1, "title": "The Three Musketeers"},
            {"id": 2, "title": "The Lion, the Witch and the Wardrobe"},
            {"id": 3, "title": "Clean Code"},
        ]

    async def test_with_author(self, client: httpx.AsyncClient) -> None:
        response = await client.get("/api/v1/books", params={"includes": "author"})
        assert response.status_code == 200
        assert response.json()[0] == {
            "id": 1,
            "title": "The Three Musketeers",
            "author": {"id": 1, "name": "Alexandre Dumas"},
        }
        assert all("author" in book for book in response.json())

    @pytest.mark.parametrize("includes", ["", "Author", "author,", "author,,author", "author 1"])
    async def test_malformed_includes_return_base_fields(
        self, client: httpx.AsyncClient, includes: str
    ) -> None:
        response = await client.get("/api/v1/books", params={"includes": includes})
        assert response.status_code == 200
        assert all(set(book) == {"id", "title"} for book in response.json())

    async def test_disallowed_relation_is_dropped(self, client: httpx.AsyncClient) -> None:
        response = await client.get("/api/v1/books", params={"includes": "author,publisher"})
        assert response.status_code == 200
        assert all(set(book) == {"id", "title", "author"} for book in response.json())

    async def test_author_loaded_in_one_bulk_query(self, client, statement_log) -> None:
        statement_log.clear()
        response = await client.get("/api/v1/books", params={"includes": "author"})
        assert response.status_code == 200

        selects = statement_log.selects
        assert len(selects) == 2
        assert "FROM books" in selects[0]
        assert "FROM authors" in selects[1]
        assert " IN " in selects[1]

    async def test_no_author_query_without_includes(self, client, statement_log) -> None:
        statement_log.clear()
        await client.get("/api/v1/books")
        assert len(statement_log.selects) == 1


class TestShowBook:
    """Tests for GET /api/v1/books/{book_id}."""

    async def test_with_author(self, client: httpx.AsyncClient) -> None:
        response = await client.get("/api/v1/books/3", params={"includes": "author"})
        assert response.status_code == 200
        assert response.json() == {
            "id": 3,
            "title": "Clean Code",
            "author": {"id": 3, "name": "Robert C. Martin"},
        }

    async def test_without_author(self, client: httpx.AsyncClient) -> None:
        response = await client.get("/api/v1/books/3")
        assert response.json() == {"id": 3, "title": "Clean Code"}

    async def test_not_found(self, client: httpx.AsyncClient) -> None:
        response = await client.get("/api/v1/books/99", params={"includes": "author"})
        assert response.status_code == 404
        assert response.json() == {"detail": "Book not found"}


class TestAuthors:
    """Tests for the /api/v1/authors endpoints."""

    async def test_list_without_includes(self, client: httpx.AsyncClient) -> None:
        response = await client.get("/api/v1/authors")
        assert response.status_code == 200
        assert response.json()[1] == {"id": 2, "name": "C.S. Lewis"}

    async def test_list_with_books(self, client, statement_log) -> None:
        statement_log.clear()
        response = await client.get("/api/v1/authors", params={"includes": "books"})
        assert response.status_code == 200
        assert response.json()[0] == {
            "id": 1,
            "name": "Alexandre Dumas",
            "books": [{"id": 1, "title": "The Three Musketeers"}],
        }
        assert len(statement_log.selects) == 2

    async def test_author_relation_not_allowed_on_authors(self, client: httpx.AsyncClient) -> None:
        response = await client.get("/api/v1/authors/1", params={"includes": "author"})
        assert response.status_code == 200
        assert response.json() == {"id": 1, "name": "Alexandre Dumas"}

    async def test_show_not_found(self, client: httpx.AsyncClient) -> None:
        response = await client.get("/api/v1/authors/42")
        assert response.status_code == 404


class TestIncludePermissionsDependency:
    """Tests for the FastAPI dependency outside the shipped routers."""

    @staticmethod
    def make_app(**overrides: str) -> FastAPI:
        app = FastAPI()

        @app.get("/api/v1/widgets", name="index")
        async def list_widgets(
            includes: PermittedIncludes = Depends(include_permissions(**overrides)),
        ):
            return includes

        return app

    async def test_unregistered_route_is_a_hard_fault(self) -> None:
        transport = httpx.ASGITransport(app=self.make_app())
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            with pytest.raises(UnregisteredIncludesError):
                await client.get("/api/v1/widgets", params={"includes": "parts"})

    async def test_explicit_keys_override_route(self) -> None:
        app = self.make_app(resources="books", purpose="index")
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/api/v1/widgets", params={"includes": "author,parts"})
        assert response.json() == {"author": True}

    async def test_absent_includes_skip_lookup(self) -> None:
        transport = httpx.ASGITransport(app=self.make_app())
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/api/v1/widgets")
        assert response.status_code == 200
        assert response.json() == {}


class TestIncludeContextFromRequest:
    """Tests for building the include context from a live request."""

    async def test_route_identity(self) -> None:
        app = FastAPI()

        @app.get("/api/v1/books/{book_id}", name="show")
        async def show(request: Request):
            context = IncludeContext.from_request(request)
            return {
                "includes": context.includes,
                "controller": context.controller,
                "action": context.action,
            }

        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            sent = await client.get("/api/v1/books/7?includes=")
            absent = await client.get("/api/v1/books/7")

        assert sent.json() == {"includes": "", "controller": "api/v1/books", "action": "show"}
        assert absent.json()["includes"] is None

    def test_unmatched_request_has_no_identity(self) -> None:
        request = Request({"type": "http", "method": "GET", "path": "/", "query_string": b"", "headers": []})
        context = IncludeContext.from_request(request)
        assert context.includes is None
        assert context.controller is None
        assert context.action is None

        with pytest.raises(IncludeContextError, match="controller"):
            include_permissions()(request)


class TestRouteRegistration:
    """Every shipped route resolves to a registered allow-list."""

    def test_routes_have_allow_lists(self) -> None:
        routes = [
            r for r in bookshelf_app.routes if isinstance(r, APIRoute) and r.path.startswith("/api/v1/")
        ]
        assert {(r.path, r.name) for r in routes} == {
            ("/api/v1/books", "index"),
            ("/api/v1/books/{book_id}", "show"),
            ("/api/v1/authors", "index"),
            ("/api/v1/authors/{author_id}", "show"),
        }
        for route in routes:
            resources = [s for s in route.path.split("/") if s and not s.startswith("{")][-1]
            assert permitted_relations(resources, route.name)
