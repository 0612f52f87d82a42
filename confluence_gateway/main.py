import asyncio
import logging
import sys
from typing import Awaitable, Callable, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server

from confluence_gateway.container.container_factory import ContainerFactory
from confluence_gateway.container.simple_container import SimpleContainer
from confluence_gateway.gateway.mcp_server.mcp_server_factory import McpServerFactory
from confluence_gateway.gateway.utilities.confluence.confluence_client import (
    ConfluenceClient,
)
from confluence_gateway.gateway.utilities.confluence.confluence_config import (
    ConfluenceConfig,
)
from confluence_gateway.gateway.utilities.confluence.confluence_errors import (
    ConfluenceConfigError,
)
from confluence_gateway.gateway.utilities.environment_variables import (
    EnvironmentVariables,
)

logger = logging.getLogger(__name__)

ServeFunction = Callable[[Server], Awaitable[None]]


class ServerStartupError(Exception):
    """Raised when the server cannot be configured or stops with an error."""

    pass


async def serve_stdio(server: Server) -> None:
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream, write_stream, server.create_initialization_options()
        )


async def run_async(
    serve: ServeFunction, *, container: Optional[SimpleContainer] = None
) -> None:
    """
    Resolves the configuration, builds the MCP server and hands it to serve.

    :param serve: runs the server until the client disconnects
    :param container: service container, a new one is created when omitted
    """
    container = container or await ContainerFactory().create_container_async()
    try:
        config: ConfluenceConfig = container.resolve(ConfluenceConfig)
    except ConfluenceConfigError as e:
        raise ServerStartupError(f"configuration error: {e}") from e
    logger.info(f"Serving Confluence tools for {config.base_url}")

    server: Server = container.resolve(McpServerFactory).create_server()
    try:
        await serve(server)
    except Exception as e:
        raise ServerStartupError(f"server error: {e}") from e
    finally:
        await container.resolve(ConfluenceClient).aclose()


def main() -> None:
    # stdout carries the MCP stream, so logs go to stderr
    logging.basicConfig(
        level=getattr(logging, EnvironmentVariables().log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    try:
        asyncio.run(run_async(serve_stdio))
    except ServerStartupError as e:
        print(e, file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
