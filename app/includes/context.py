"""
Include context — the typed request boundary of the resolver.

`IncludeContext` carries the three things the resolver ever reads from
a request:

- includes:   raw `?includes=` value; None when the parameter is absent
              (an empty string means "sent, but empty").
- controller: handler identity, e.g. "api/v1/books".
- action:     operation name, e.g. "index".

The last two are used only to derive default registry keys.
"""

from dataclasses import dataclass

from fastapi import Request

SLASH = "/"
INCLUDES_PARAM = "includes"


@dataclass(frozen=True)
class IncludeContext:
    includes: str | None = None
    controller: str | None = None
    action: str | None = None

    @classmethod
    def from_request(cls, request: Request) -> "IncludeContext":
        """
        Build the context from a matched FastAPI request.

        The handler identity is the route path without its leading slash
        and without path-parameter segments, so `/api/v1/books` and
        `/api/v1/books/{book_id}` both identify as "api/v1/books".
        The action is the route name.
        """
        route = request.scope.get("route")
        controller = None
        action = None
        if route is not None:
            segments = [
                segment
                for segment in route.path.strip(SLASH).split(SLASH)
                if not segment.startswith("{")
            ]
            controller = SLASH.join(segments)
            action = route.name

        return cls(
            includes=request.query_params.get(INCLUDES_PARAM),
            controller=controller,
            action=action,
        )
