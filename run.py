"""Entry point for the Room Booking API server.

Serves the FastAPI application with uvicorn on the host and port from
the settings (``HOST``/``PORT``, default ``0.0.0.0:3000``).  Other
configuration such as ``SECRET_KEY`` or ``DATA_DIR`` is read from the
environment as well.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from room_booking_api.app.core.config import settings
from room_booking_api.app.main import app


async def main() -> None:
    """Start the API server using Uvicorn."""
    # log_config=None keeps the handlers installed by setup_logging.
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_config=None)
    server = Server(config)
    logging.getLogger(__name__).info("Backend running on port %s", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
