"""Prefix-table route dispatcher."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from newsapi.http.request import Request
from newsapi.http.response import HTTPException, Response

logger = logging.getLogger(__name__)

Handler = Callable[[Request, Any], Awaitable[Response]]


@dataclass(frozen=True)
class Route:
    """A handler bound to a literal "METHOD /path" prefix of the request text."""

    method: str
    path: str
    handler: Handler

    @property
    def prefix(self) -> str:
        return f"{self.method} {self.path}"

    def matches(self, raw: str) -> bool:
        return raw.startswith(self.prefix)


class Router:
    """
    Ordered list of routes; the first whose prefix starts the request wins.

    Registration order is the priority order, so a longer prefix must be
    added before any shorter prefix it extends ("GET /articles/" before
    "GET /articles").
    """

    def __init__(self) -> None:
        self._routes: list[Route] = []

    @property
    def routes(self) -> list[Route]:
        return list(self._routes)

    def add_route(self, method: str, path: str, handler: Handler) -> None:
        self._routes.append(Route(method=method.upper(), path=path, handler=handler))

    def get(self, path: str) -> Callable[[Handler], Handler]:
        return self._decorator("GET", path)

    def post(self, path: str) -> Callable[[Handler], Handler]:
        return self._decorator("POST", path)

    def put(self, path: str) -> Callable[[Handler], Handler]:
        return self._decorator("PUT", path)

    def delete(self, path: str) -> Callable[[Handler], Handler]:
        return self._decorator("DELETE", path)

    def _decorator(self, method: str, path: str) -> Callable[[Handler], Handler]:
        def decorator(handler: Handler) -> Handler:
            self.add_route(method, path, handler)
            return handler

        return decorator

    def include(self, router: "Router") -> None:
        """Append another router's routes, keeping their order."""
        self._routes.extend(router.routes)

    def match(self, raw: str) -> Route | None:
        for route in self._routes:
            if route.matches(raw):
                return route
        return None

    async def dispatch(self, request: Request, state: Any) -> Response:
        """
        Run the matching handler and turn its outcome into a Response.

        HTTPException keeps its status and detail; any other failure (bad id,
        malformed JSON, database error) is logged and answered with a bare 500
        so the cause never reaches the client.
        """
        route = self.match(request.raw)
        if route is None:
            return Response.not_found()

        try:
            return await route.handler(request, state)
        except HTTPException as exc:
            if exc.status_code >= 500:
                logger.error("%s %s failed: %s", request.method, request.path, exc.detail)
            return Response.from_exception(exc)
        except Exception:
            logger.exception("%s %s failed", request.method, request.path)
            return Response.internal_error()
