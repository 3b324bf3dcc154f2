"""Process entry point: set up the database, then serve until interrupted."""

import asyncio
import logging
import sys

from pydantic import ValidationError

from newsapi.api.router import create_router
from newsapi.config import Settings, get_settings
from newsapi.db import create_engine, create_session_factory, init_db
from newsapi.server import ArticleServer
from newsapi.state import AppState

logger = logging.getLogger(__name__)


class StartupError(Exception):
    """The service cannot start serving (e.g. the table could not be created)."""


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


async def serve(settings: Settings) -> None:
    """Create the table, then accept connections until cancelled."""
    engine = create_engine(settings)
    try:
        try:
            await init_db(engine)
        except Exception as e:
            raise StartupError(f"Database setup failed: {e}") from e
        logger.info("Articles table ready")

        state = AppState(settings=settings, session_factory=create_session_factory(engine))
        server = ArticleServer(state, create_router())
        await server.start()
        logger.info("Server started at port %d", server.port)
        await server.serve_forever()
    finally:
        await engine.dispose()


def run() -> None:
    """Console script entry point."""
    configure_logging()
    try:
        settings = get_settings()
    except ValidationError as e:
        if any(error["loc"] == ("database_url",) and error["type"] == "missing" for error in e.errors()):
            logger.error("DATABASE_URL must be set")
        logger.error("Invalid settings: %s", e)
        sys.exit(1)

    logging.getLogger().setLevel(settings.log_level.upper())

    try:
        asyncio.run(serve(settings))
    except StartupError:
        logger.exception("Startup failed")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Shutting down...")


if __name__ == "__main__":
    run()
