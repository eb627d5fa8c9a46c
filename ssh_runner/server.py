"""SSH Runner FastMCP server.

This is a thin wrapper that exposes the ssh_run tool over MCP.
All business logic is delegated to the tools/ and services/ modules.
"""

import logging
import sys

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import PlainTextResponse

from ssh_runner.services import get_settings
from ssh_runner.tools import ssh_run
from ssh_runner.utils.console import ColorfulFormatter


def _configure_logging() -> None:
    """Configure colorful logging for the ssh_runner package.

    Called at module load time so loggers are configured however the
    server is started. Logs go to stderr; stdout carries stdio transport.
    """
    settings = get_settings()
    use_colors = settings.log_colors and sys.stderr.isatty()

    runner_logger = logging.getLogger("ssh_runner")
    runner_logger.setLevel(getattr(logging, settings.log_level, logging.INFO))

    # Only add handler if not already configured
    if not runner_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(ColorfulFormatter(use_colors=use_colors))
        runner_logger.addHandler(handler)
        runner_logger.propagate = False

    for noisy_logger in [
        "uvicorn",
        "uvicorn.access",
        "uvicorn.error",
        "httpx",
        "httpcore",
        "fastmcp",
        "starlette",
        "anyio",
    ]:
        logging.getLogger(noisy_logger).setLevel(logging.WARNING)


_configure_logging()

logger = logging.getLogger(__name__)


def create_server() -> FastMCP:
    """Create the MCP server with the ssh_run tool and a health route.

    Returns:
        Configured FastMCP server instance
    """
    server = FastMCP("ssh_runner")

    server.tool()(ssh_run)

    @server.custom_route("/health", methods=["GET"])
    async def health_check(request: Request) -> PlainTextResponse:
        """Health check endpoint."""
        client_host = request.client.host if request.client else "unknown"
        logger.debug("Health check from %s", client_host)
        return PlainTextResponse("OK")

    return server


# Default server instance
mcp = create_server()
