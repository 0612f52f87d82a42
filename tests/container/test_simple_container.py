import pytest

from confluence_gateway.container.simple_container import (
    CircularDependencyError,
    ServiceNotFoundError,
    SimpleContainer,
)
from confluence_gateway.gateway.managers.tool_manager import ToolManager
from confluence_gateway.gateway.utilities.confluence.confluence_config import (
    ConfluenceConfig,
)
from tests.gateway.mocks.mock_environment_variables import (
    CONFLUENCE_API_URL,
    CONFLUENCE_BASE_URL,
)


class Greeter:
    def __init__(self, name: str) -> None:
        self.name = name


def test_resolve_returns_same_instance() -> None:
    container = SimpleContainer()
    container.register(Greeter, lambda c: Greeter("a"))

    assert container.resolve(Greeter) is container.resolve(Greeter)


def test_register_replaces_resolved_instance() -> None:
    container = SimpleContainer()
    container.register(Greeter, lambda c: Greeter("a"))
    assert container.resolve(Greeter).name == "a"

    container.register(Greeter, lambda c: Greeter("b"))

    assert container.resolve(Greeter).name == "b"


def test_singleton() -> None:
    container = SimpleContainer()
    greeter = Greeter("c")
    container.singleton(Greeter, greeter)

    assert container.resolve(Greeter) is greeter


def test_unregistered_service() -> None:
    with pytest.raises(ServiceNotFoundError):
        SimpleContainer().resolve(Greeter)


def test_factory_must_be_callable() -> None:
    with pytest.raises(ValueError):
        SimpleContainer().register(Greeter, "not callable")  # type: ignore[arg-type]


async def test_container_factory_wiring(test_container: SimpleContainer) -> None:
    config = test_container.resolve(ConfluenceConfig)

    assert config.base_url == CONFLUENCE_API_URL
    assert config.base_url.startswith(CONFLUENCE_BASE_URL)
    assert len(test_container.resolve(ToolManager).get_tools()) == 5


def test_singleton_replaces_factory() -> None:
    container = SimpleContainer()
    container.register(Greeter, lambda c: Greeter("factory"))
    container.singleton(Greeter, Greeter("instance"))

    assert container.is_registered(Greeter)
    assert container.resolve(Greeter).name == "instance"


def test_circular_dependency() -> None:
    class Other:
        pass

    container = SimpleContainer()
    container.register(Greeter, lambda c: Greeter(str(c.resolve(Other))))
    container.register(Other, lambda c: c.resolve(Greeter))  # type: ignore[arg-type,return-value]

    with pytest.raises(CircularDependencyError, match="Greeter -> Other -> Greeter"):
        container.resolve(Greeter)

    assert not container.is_registered(int)
