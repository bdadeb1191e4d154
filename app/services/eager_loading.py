"""
Eager-load options from permitted includes.

Each permitted relation becomes a `selectinload`, i.e. ONE extra
`SELECT ... WHERE key IN (...)` for the whole result set, regardless
of how many rows the primary query returned.  Relations are declared
lazy="raise" on the models, so anything not listed here cannot be
loaded behind the caller's back.
"""

from collections.abc import Iterable

from sqlalchemy.orm import Load, selectinload


def eager_load_options(model: type, relations: Iterable[str]) -> list[Load]:
    """Map relation names (already allow-listed) to loader options."""
    return [selectinload(getattr(model, name)) for name in relations]
