from typing_extensions import override

import httpx
import pytest
from mcp.server import Server

from confluence_gateway.container.simple_container import SimpleContainer
from confluence_gateway.gateway.mcp_server.mcp_server_factory import SERVER_NAME
from confluence_gateway.gateway.utilities.confluence.confluence_client import (
    ConfluenceClient,
)
from confluence_gateway.gateway.utilities.environment_variables import (
    EnvironmentVariables,
)
from confluence_gateway.main import ServerStartupError, main, run_async
from tests.gateway.mocks.mock_environment_variables import MockEnvironmentVariables


class MissingTokenEnvironmentVariables(MockEnvironmentVariables):
    @override
    @property
    def confluence_api_token(self) -> str | None:
        return None


async def test_run_async_serves(test_container: SimpleContainer) -> None:
    served: list[Server] = []

    async def serve(server: Server) -> None:
        served.append(server)

    await run_async(serve, container=test_container)

    assert len(served) == 1
    assert served[0].name == SERVER_NAME


async def test_run_async_configuration_error(test_container: SimpleContainer) -> None:
    test_container.register(
        EnvironmentVariables, lambda c: MissingTokenEnvironmentVariables()
    )

    async def serve(server: Server) -> None:
        raise AssertionError("serve must not be called")

    with pytest.raises(ServerStartupError) as exc_info:
        await run_async(serve, container=test_container)

    assert str(exc_info.value) == (
        "configuration error: CONFLUENCE_API_TOKEN environment variable is required"
    )


async def test_run_async_server_error(test_container: SimpleContainer) -> None:
    async def serve(server: Server) -> None:
        raise OSError("stdin closed")

    with pytest.raises(ServerStartupError, match="server error: stdin closed"):
        await run_async(serve, container=test_container)


def test_main_exits_on_configuration_error(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    for name in (
        "CONFLUENCE_API_TOKEN",
        "CONFLUENCE_BASE_URL",
        "CONFLUENCE_API_BASE_PATH",
        "CONFLUENCE_HOST",
    ):
        monkeypatch.delenv(name, raising=False)

    with pytest.raises(SystemExit) as exc_info:
        main()

    assert exc_info.value.code == 1
    assert "configuration error: CONFLUENCE_API_TOKEN" in capsys.readouterr().err


async def test_run_async_closes_http_client(test_container: SimpleContainer) -> None:
    confluence_client: ConfluenceClient = test_container.resolve(ConfluenceClient)
    opened: list[httpx.AsyncClient] = []

    async def serve(server: Server) -> None:
        opened.append(confluence_client.http_client)

    await run_async(serve, container=test_container)

    assert len(opened) == 1
    assert opened[0].is_closed
