"""Textual parsing of a single buffered HTTP request."""

import re
from dataclasses import dataclass

HEADER_SEPARATOR = "\r\n\r\n"

_ARTICLE_ID = re.compile(r"[+-]?[0-9]+")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


@dataclass(frozen=True)
class Request:
    """
    A request as read from the socket.

    Nothing beyond the request line and the blank-line separator is
    interpreted: headers such as Content-Length are never looked at, so a
    request truncated by the read buffer simply yields a truncated body.
    """

    raw: str
    method: str
    path: str
    resource_id: str
    body: str


def parse_request(data: bytes) -> Request:
    """Parse raw request bytes into a Request."""
    raw = data.decode("utf-8", errors="replace")

    request_line = raw.split("\r\n", 1)[0]
    parts = request_line.split(" ")
    method = parts[0] if parts else ""
    path = parts[1] if len(parts) > 1 else ""

    _, separator, body = raw.partition(HEADER_SEPARATOR)

    return Request(
        raw=raw,
        method=method,
        path=path,
        resource_id=extract_resource_id(raw),
        body=body if separator else "",
    )


def extract_resource_id(raw: str) -> str:
    """
    Return the identifier embedded in the path.

    "GET /articles/42 HTTP/1.1" splits on "/" into "GET ", "articles",
    "42 HTTP", ... and the third token cut at whitespace is "42".
    """
    segments = raw.split("/")
    if len(segments) < 3:
        return ""
    words = segments[2].split()
    return words[0] if words else ""


def parse_article_id(text: str) -> int:
    """Parse a path identifier as a 32-bit signed integer."""
    if not _ARTICLE_ID.fullmatch(text):
        raise ValueError(f"Invalid article id: {text!r}")
    value = int(text)
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ValueError(f"Article id out of range: {text!r}")
    return value
