"""Status lines, responses and the handler-facing HTTPException."""

from dataclasses import dataclass

OK_RESPONSE = "HTTP/1.1 200 OK\r\nContent-Type: application/json\r\n\r\n"
NOT_FOUND = "HTTP/1.1 404 NOT FOUND\r\n\r\n"
INTERNAL_SERVER_ERROR = "HTTP/1.1 500 INTERNAL SERVER ERROR\r\n\r\n"

STATUS_LINES: dict[int, str] = {
    200: OK_RESPONSE,
    404: NOT_FOUND,
    500: INTERNAL_SERVER_ERROR,
}


class HTTPException(Exception):
    """Raised by handlers to answer with a 404 or 500 and a plain-text detail."""

    def __init__(self, status_code: int, detail: str):
        if status_code not in STATUS_LINES:
            raise ValueError(f"Unsupported status code: {status_code}")
        super().__init__(detail)
        self.status_code = status_code
        self.detail = detail


@dataclass(frozen=True)
class Response:
    """A status line followed verbatim by the body. No other headers are sent."""

    status_line: str
    body: str

    @classmethod
    def ok(cls, body: str) -> "Response":
        return cls(OK_RESPONSE, body)

    @classmethod
    def not_found(cls, body: str = "404 Not Found") -> "Response":
        return cls(NOT_FOUND, body)

    @classmethod
    def internal_error(cls, body: str = "Error") -> "Response":
        return cls(INTERNAL_SERVER_ERROR, body)

    @classmethod
    def from_exception(cls, exc: HTTPException) -> "Response":
        return cls(STATUS_LINES[exc.status_code], exc.detail)

    @property
    def status_code(self) -> int:
        """Numeric status, e.g. 404."""
        return int(self.status_line.split(" ", 2)[1])

    def to_bytes(self) -> bytes:
        """Wire form of the response."""
        return f"{self.status_line}{self.body}".encode("utf-8")
