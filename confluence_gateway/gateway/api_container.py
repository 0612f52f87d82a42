from typing import Annotated

from fastapi import Depends

from confluence_gateway.container.container_factory import ContainerFactory
from confluence_gateway.container.simple_container import SimpleContainer
from confluence_gateway.gateway.managers.tool_manager import ToolManager
from confluence_gateway.gateway.utilities.cached import cached


@cached  # makes it singleton-like
async def get_container_async() -> SimpleContainer:
    """Create the container"""
    return await ContainerFactory().create_container_async()


def get_tool_manager(
    container: Annotated[SimpleContainer, Depends(get_container_async)]
) -> ToolManager:
    """helper function to get the tool manager"""
    assert isinstance(container, SimpleContainer), type(container)
    return container.resolve(ToolManager)
