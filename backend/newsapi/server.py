"""asyncio TCP server: one read, one response, then close."""

import asyncio
import logging

from newsapi.http import Response, Router, parse_request
from newsapi.state import AppState

logger = logging.getLogger(__name__)


class ArticleServer:
    """
    Accepts connections and answers each with exactly one response.

    Every connection gets a single read of `read_buffer_size` bytes; whatever
    did not arrive in that read is never looked at. Connections run
    concurrently on the event loop, at most `max_connections` at a time.
    """

    def __init__(self, state: AppState, router: Router):
        self.state = state
        self.router = router
        self._slots = asyncio.Semaphore(state.settings.max_connections)
        self._server: asyncio.AbstractServer | None = None

    @property
    def port(self) -> int:
        """Port actually bound (useful when configured with port 0)."""
        if self._server is None:
            raise RuntimeError("Server is not started")
        return self._server.sockets[0].getsockname()[1]

    async def start(self, host: str | None = None, port: int | None = None) -> None:
        settings = self.state.settings
        self._server = await asyncio.start_server(
            self.handle_client,
            host if host is not None else settings.host,
            port if port is not None else settings.port,
        )

    async def serve_forever(self) -> None:
        if self._server is None:
            await self.start()
        async with self._server:
            await self._server.serve_forever()

    async def stop(self) -> None:
        if self._server is not None:
            self._server.close()
            await self._server.wait_closed()
            self._server = None

    async def handle_client(self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        async with self._slots:
            try:
                data = await reader.read(self.state.settings.read_buffer_size)
                if not data:
                    return

                response = await self.respond(data)
                writer.write(response.to_bytes())
                await writer.drain()
            except ConnectionError as e:
                logger.warning("Connection error: %s", e)
            finally:
                writer.close()
                try:
                    await writer.wait_closed()
                except ConnectionError:
                    pass

    async def respond(self, data: bytes) -> Response:
        """Parse raw request bytes and dispatch them."""
        request = parse_request(data)
        response = await self.router.dispatch(request, self.state)
        logger.info("%s %s -> %d", request.method, request.path, response.status_code)
        return response
