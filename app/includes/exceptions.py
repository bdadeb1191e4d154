"""
Include-permission faults.

Only *trusted* inputs can raise here: server-side routing metadata and
the compiled-in allow-list.  Untrusted client input (`?includes=...`)
never raises; it degrades to an empty permitted set.
"""


class IncludeContextError(TypeError):
    """The request context lacks a handler identity or action name."""


class UnregisteredIncludesError(LookupError):
    """No allow-list is registered for a (resource, purpose) pair."""

    def __init__(self, resources: str | None, purpose: str | None):
        self.resources = resources
        self.purpose = purpose
        super().__init__(
            f"no includes allow-list registered for resource {resources!r}, purpose {purpose!r}"
        )
