"""Request routing: map method + path onto a viewer operation."""

from __future__ import annotations

from enum import Enum

INDEX_ACTION = "/index"
DETAIL_ACTION = "/detail"

READ_METHODS = frozenset({"GET", "HEAD"})


class Route(str, Enum):
    """Operation selected for a request."""

    LIST = "list"
    DETAIL = "detail"
    NOT_FOUND = "not_found"


def route(method: str, path: str, instance_id: str | None = None) -> Route:
    """Select the operation for a request.

    The path is matched case-insensitively after trimming trailing slashes,
    so the viewer works under any base path (``/api/x/index``,
    ``/hub/detail/``). A detail request without an instance id resolves to
    NOT_FOUND, indistinguishable from an unmatched path.

    Args:
        method: HTTP method.
        path: Request path (no query string).
        instance_id: Extracted ``instanceid`` parameter, if any.

    Returns:
        The selected Route.
    """
    if method.upper() not in READ_METHODS:
        return Route.NOT_FOUND

    normalized = path.rstrip("/").lower()

    if INDEX_ACTION in normalized:
        return Route.LIST

    if DETAIL_ACTION in normalized:
        if not instance_id or not instance_id.strip():
            return Route.NOT_FOUND
        return Route.DETAIL

    return Route.NOT_FOUND
