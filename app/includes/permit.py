"""
Include permission resolver.

Turns an untrusted `?includes=author,publisher` value into the set of
relations this endpoint may actually load:

1. Derive the registry keys (resource, purpose) from the request
   context unless the caller passes them explicitly.
2. Absent parameter → nothing to include.
3. Malformed value → nothing to include (fail closed, never raise).
4. Split on commas and intersect with the allow-list.

The result maps each permitted relation to True.  Its keys drive the
eager loads; the mapping itself gates conditional fields at render
time.
"""

import logging
import re

from app.includes.context import SLASH, IncludeContext
from app.includes.exceptions import IncludeContextError
from app.includes.registry import ALLOWED_INCLUDES, Registry, permitted_relations

logger = logging.getLogger("includes")

COMMA = ","
INCLUDES_FORMAT = re.compile(r"[a-z]+(,[a-z]+)*")

PermittedIncludes = dict[str, bool]


def default_resources_key(context: IncludeContext) -> str:
    if not isinstance(context.controller, str):
        raise IncludeContextError("include context controller must be a string")
    return context.controller.split(SLASH)[-1]


def default_purpose(context: IncludeContext) -> str:
    if not isinstance(context.action, str):
        raise IncludeContextError("include context action must be a string")
    return context.action


def parse_includes(raw: object) -> tuple[str, ...] | None:
    """
    Validate and split a raw includes value.

    Returns the requested relation names in request order (duplicates
    kept), or None when there is nothing to process: the parameter was
    absent, not a string, or not a comma-separated list of lowercase
    words.
    """
    if raw is None:
        return None
    if not isinstance(raw, str) or INCLUDES_FORMAT.fullmatch(raw) is None:
        logger.debug("Ignoring malformed includes value %r", raw)
        return None
    return tuple(raw.split(COMMA))


def permit_includes(
    context: IncludeContext,
    resources: str | None = None,
    purpose: str | None = None,
    registry: Registry = ALLOWED_INCLUDES,
) -> PermittedIncludes:
    if resources is None:
        resources = default_resources_key(context)
    if purpose is None:
        purpose = default_purpose(context)

    requested = parse_includes(context.includes)
    if requested is None:
        return {}

    allowed = permitted_relations(resources, purpose, registry)
    permitted = {name: True for name in requested if name in allowed}

    dropped = set(requested) - allowed
    if dropped:
        logger.debug(
            "Dropped includes not allowed for %s#%s: %s",
            resources,
            purpose,
            sorted(dropped),
        )
    return permitted
