# Copyright (c) 2026 Heureum AI. All rights reserved.

"""SlimContext server standalone entry point."""

from slimcontext_mcp.config import settings
from slimcontext_mcp.servers import create_server

mcp = create_server("slimcontext")

if __name__ == "__main__":
    cfg = settings.SERVERS["slimcontext"]
    mcp.run(transport=cfg.transport)
