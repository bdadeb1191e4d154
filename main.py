"""
Bookshelf API entrypoint — serve the books/authors listing app with:
    uvicorn main:app --reload
Run `alembic upgrade head` first; demo data is seeded on startup.
"""

from app.main import app  # noqa: F401

if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
