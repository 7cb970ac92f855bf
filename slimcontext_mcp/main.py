# Copyright (c) 2026 Heureum AI. All rights reserved.

"""Multi-server runner entry point."""

import logging
import sys

import anyio

from slimcontext_mcp.config import settings
from slimcontext_mcp.servers import create_server

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Send logs to stderr; stdout belongs to the stdio transport."""
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


async def main():
    """Start all configured MCP servers concurrently using anyio task groups."""
    servers = []
    for key, cfg in settings.SERVERS.items():
        servers.append((create_server(key), cfg))
        logger.info("Registered %s (%s)", cfg.name, cfg.transport)

    async with anyio.create_task_group() as tg:
        for mcp, cfg in servers:
            match cfg.transport:
                case "stdio":
                    tg.start_soon(mcp.run_stdio_async)
                case "sse":
                    tg.start_soon(mcp.run_sse_async)
                case "streamable-http":
                    tg.start_soon(mcp.run_streamable_http_async)


def run() -> None:
    """Console script entry point."""
    configure_logging()
    try:
        anyio.run(main)
    except KeyboardInterrupt:
        logger.info("Shutdown signal received")


if __name__ == "__main__":
    run()
