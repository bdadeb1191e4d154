"""
Includes allow-list registry.

Declares, per resource collection and per purpose (the route action),
every relation a client may ask for via `?includes=`.  Anything not
listed here is silently dropped by the resolver.

The registry is frozen at import time and never written afterwards, so
concurrent requests read it without locking.

Adding an endpoint that accepts includes?  Register its
(resource, purpose) pair below.  An unregistered pair is a hard fault,
not an empty allow-list.
"""

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from app.includes.exceptions import UnregisteredIncludesError

Registry = Mapping[str, Mapping[str, frozenset[str]]]


def build_registry(config: Mapping[str, Mapping[str, Iterable[str]]]) -> Registry:
    """Freeze a `{resource: {purpose: [relation, ...]}}` mapping."""
    return MappingProxyType(
        {
            resources: MappingProxyType(
                {purpose: frozenset(relations) for purpose, relations in purposes.items()}
            )
            for resources, purposes in config.items()
        }
    )


# ────────────────────────────────────────────────────────────────────
# RESOURCE → PURPOSE → ALLOWED RELATIONS
# ────────────────────────────────────────────────────────────────────
ALLOWED_INCLUDES: Registry = build_registry(
    {
        "books": {
            "index": ["author"],
            "show": ["author"],
        },
        "authors": {
            "index": ["books"],
            "show": ["books"],
        },
    }
)


def permitted_relations(
    resources: str | None,
    purpose: str | None,
    registry: Registry = ALLOWED_INCLUDES,
) -> frozenset[str]:
    """Return the allow-list for a pair, or raise if it was never registered."""
    try:
        return registry[resources][purpose]
    except KeyError:
        raise UnregisteredIncludesError(resources, purpose) from None
