"""
Includes — opt-in loading of related resources via `?includes=`.
"""

from app.includes.context import IncludeContext
from app.includes.dependencies import include_permissions
from app.includes.exceptions import IncludeContextError, UnregisteredIncludesError
from app.includes.permit import PermittedIncludes, parse_includes, permit_includes
from app.includes.registry import ALLOWED_INCLUDES, build_registry, permitted_relations

__all__ = [
    "ALLOWED_INCLUDES",
    "IncludeContext",
    "IncludeContextError",
    "PermittedIncludes",
    "UnregisteredIncludesError",
    "build_registry",
    "include_permissions",
    "parse_includes",
    "permit_includes",
    "permitted_relations",
]
