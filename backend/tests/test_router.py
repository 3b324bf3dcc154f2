"""Unit tests for the prefix router."""

import pytest
from sqlalchemy.exc import SQLAlchemyError

from newsapi.api.router import create_router
from newsapi.http import HTTPException, Request, Response, Router, parse_request


def named_handler(name: str):
    """Handler that answers with its own name."""

    async def handler(request: Request, state: object) -> Response:
        return Response.ok(name)

    return handler


def failing_handler(exc: Exception):
    async def handler(request: Request, state: object) -> Response:
        raise exc

    return handler


async def dispatch(router: Router, raw: str) -> Response:
    return await router.dispatch(parse_request(raw.encode()), state=None)


class TestRouter:
    """Tests for Router matching and dispatch."""

    def test_routes_in_priority_order(self) -> None:
        """The application table lists longer prefixes before shorter ones."""
        prefixes = [route.prefix for route in create_router().routes]

        assert prefixes == [
            "POST /articles",
            "GET /articles/",
            "GET /articles",
            "PUT /articles/",
            "DELETE /articles/",
            "POST /scrape/imdb",
            "DELETE /scrape/source/imdb",
        ]

    async def test_first_match_wins(self) -> None:
        router = Router()
        router.add_route("GET", "/articles/", named_handler("one"))
        router.add_route("GET", "/articles", named_handler("all"))

        one = await dispatch(router, "GET /articles/3 HTTP/1.1\r\n\r\n")
        all_ = await dispatch(router, "GET /articles HTTP/1.1\r\n\r\n")

        assert one.body == "one"
        assert all_.body == "all"

    async def test_shorter_prefix_registered_first_shadows(self) -> None:
        router = Router()
        router.add_route("GET", "/articles", named_handler("all"))
        router.add_route("GET", "/articles/", named_handler("one"))

        response = await dispatch(router, "GET /articles/3 HTTP/1.1\r\n\r\n")

        assert response.body == "all"

    async def test_method_is_part_of_prefix(self) -> None:
        router = Router()
        router.add_route("GET", "/articles", named_handler("all"))

        response = await dispatch(router, "PATCH /articles HTTP/1.1\r\n\r\n")

        assert response.status_code == 404

    async def test_no_match_is_static_404(self) -> None:
        response = await dispatch(create_router(), "GET /unknown HTTP/1.1\r\n\r\n")

        assert response.status_line == "HTTP/1.1 404 NOT FOUND\r\n\r\n"
        assert response.body == "404 Not Found"

    async def test_decorators_register_routes(self) -> None:
        router = Router()

        @router.put("/things/")
        async def put_thing(request: Request, state: object) -> Response:
            return Response.ok("put")

        assert router.routes[0].prefix == "PUT /things/"
        assert (await dispatch(router, "PUT /things/1 HTTP/1.1\r\n\r\n")).body == "put"

    async def test_http_exception_keeps_detail(self) -> None:
        router = Router()
        router.add_route("GET", "/x", failing_handler(HTTPException(404, "Article not found")))

        response = await dispatch(router, "GET /x HTTP/1.1\r\n\r\n")

        assert response.status_code == 404
        assert response.body == "Article not found"

    async def test_value_error_is_generic_500(self) -> None:
        router = Router()
        router.add_route("GET", "/x", failing_handler(ValueError("Invalid article id: 'abc'")))

        response = await dispatch(router, "GET /x HTTP/1.1\r\n\r\n")

        assert response.status_line == "HTTP/1.1 500 INTERNAL SERVER ERROR\r\n\r\n"
        assert response.body == "Error"

    async def test_database_error_is_generic_500(self) -> None:
        router = Router()
        router.add_route("GET", "/x", failing_handler(SQLAlchemyError("connection refused")))

        response = await dispatch(router, "GET /x HTTP/1.1\r\n\r\n")

        assert response.status_code == 500
        assert "connection refused" not in response.body


class TestResponse:
    """Tests for Response wire form."""

    def test_ok_bytes(self) -> None:
        response = Response.ok("Article created")

        assert response.to_bytes() == (
            b"HTTP/1.1 200 OK\r\nContent-Type: application/json\r\n\r\nArticle created"
        )
        assert response.status_code == 200

    def test_not_found_default_body(self) -> None:
        assert Response.not_found().to_bytes() == b"HTTP/1.1 404 NOT FOUND\r\n\r\n404 Not Found"

    def test_unsupported_status_rejected(self) -> None:
        with pytest.raises(ValueError):
            HTTPException(418, "teapot")
