"""Entry point for serving the Event Management API.

Host, port and the store connection string are read from the
environment (or a ``.env`` file next to the process): ``HOST``,
``PORT`` (default ``3000``) and ``DATABASE_URL``.

Usage:
    python run.py
"""
import asyncio
import sys

from uvicorn import Config, Server

from event_management_api.app.core.config import settings
from event_management_api.app.main import app


async def main() -> bool:
    """Serve the API until interrupted.

    Returns ``False`` if the application failed to start, for example
    when the record store cannot be opened.
    """
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level="info")
    server = Server(config)
    await server.serve()
    return server.started


if __name__ == "__main__":
    try:
        started = asyncio.run(main())
    except KeyboardInterrupt:
        started = True
    if not started:
        sys.exit(1)
