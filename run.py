"""Entry point for the Announcement Board.

Starts the FastAPI application under uvicorn.  Host, port and log
level come from the environment (``HOST``, ``PORT``, ``LOG_LEVEL``);
see ``announcement_board/app/core/config.py`` for every supported
variable.

Usage:
    python run.py
"""
import logging

from uvicorn import Config, Server

from announcement_board.app.core.config import settings


def main() -> None:
    """Serve the application until interrupted."""
    config = Config(
        app="announcement_board.app.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Announcements server starting on port %s", settings.port)
    server.run()


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
