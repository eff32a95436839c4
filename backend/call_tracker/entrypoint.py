import asyncio
import logging
import signal

import uvicorn

from call_tracker.core.config import Settings, get_settings
from call_tracker.core.logging import configure_logging
from call_tracker.main import create_app

logger = logging.getLogger(__name__)


def build_server(settings: Settings) -> uvicorn.Server:
    config = uvicorn.Config(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
    return uvicorn.Server(config)


async def serve(server: uvicorn.Server) -> None:
    """Run ``server`` until it stops on its own or SIGINT/SIGTERM arrives."""
    stop_requested = asyncio.Event()
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, stop_requested.set)

    server_task = asyncio.create_task(server.serve())
    stop_task = asyncio.create_task(stop_requested.wait())
    logger.info("Server running at http://localhost:%s", server.config.port)
    await asyncio.wait({server_task, stop_task}, return_when=asyncio.FIRST_COMPLETED)
    if stop_requested.is_set():
        logger.info("Stop requested, shutting down")
        server.should_exit = True
    stop_task.cancel()
    await server_task


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    asyncio.run(serve(build_server(settings)))


if __name__ == "__main__":
    main()
