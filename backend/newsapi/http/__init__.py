"""HTTP package - request parsing, responses and routing."""

from newsapi.http.request import Request, parse_article_id, parse_request
from newsapi.http.response import HTTPException, Response
from newsapi.http.router import Route, Router

__all__ = [
    "Request",
    "parse_request",
    "parse_article_id",
    "Response",
    "HTTPException",
    "Route",
    "Router",
]
