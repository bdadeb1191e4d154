"""
Includes dependency — wires the resolver into FastAPI routes.

`include_permissions` is a *dependency factory*, used the same way in
every listing/retrieval route:

    @router.get("", name="index")
    async def list_books(
        includes: PermittedIncludes = Depends(include_permissions()),
        ...
    ): ...

By default the registry keys come from the matched route: the last
path segment (ignoring path parameters) is the resource, the route
name is the purpose.  Pass them explicitly when a route's path or name
does not line up with its registry entry.
"""

from fastapi import Request

from app.includes.context import IncludeContext
from app.includes.permit import PermittedIncludes, permit_includes


class include_permissions:
    """
    Dependency factory.

    Can be used as:
        Depends(include_permissions())
        Depends(include_permissions(resources="books", purpose="index"))
    """

    def __init__(self, resources: str | None = None, purpose: str | None = None):
        self.resources = resources
        self.purpose = purpose

    def __call__(self, request: Request) -> PermittedIncludes:
        context = IncludeContext.from_request(request)
        return permit_includes(context, resources=self.resources, purpose=self.purpose)
