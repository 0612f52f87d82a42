from typing import AsyncGenerator

import httpx
import pytest

from confluence_gateway.container.container_factory import ContainerFactory
from confluence_gateway.container.simple_container import SimpleContainer
from confluence_gateway.gateway.api import create_app
from confluence_gateway.gateway.api_container import get_container_async
from confluence_gateway.gateway.managers.tool_manager import ToolManager
from confluence_gateway.gateway.utilities.confluence.confluence_client import (
    ConfluenceClient,
)
from confluence_gateway.gateway.utilities.environment_variables import (
    EnvironmentVariables,
)
from tests.gateway.mocks.mock_environment_variables import MockEnvironmentVariables


@pytest.fixture
async def test_container() -> SimpleContainer:
    container: SimpleContainer = await ContainerFactory().create_container_async()
    container.register(EnvironmentVariables, lambda c: MockEnvironmentVariables())
    return container


@pytest.fixture
async def tool_manager(
    test_container: SimpleContainer,
) -> AsyncGenerator[ToolManager, None]:
    yield test_container.resolve(ToolManager)
    await test_container.resolve(ConfluenceClient).aclose()


@pytest.fixture
async def async_client(
    test_container: SimpleContainer,
) -> AsyncGenerator[httpx.AsyncClient, None]:
    app = create_app()
    app.dependency_overrides[get_container_async] = lambda: test_container
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app), base_url="http://test"
    ) as client:
        yield client
    await test_container.resolve(ConfluenceClient).aclose()
