from typing import Any, Callable, Dict, List, TypeAlias, TypeVar, cast

T = TypeVar("T")

ServiceFactory: TypeAlias = Callable[["SimpleContainer"], T]


class ContainerError(Exception):
    """Base exception for container errors"""


class ServiceNotFoundError(ContainerError):
    """Raised when nothing is registered for the requested type"""


class CircularDependencyError(ContainerError):
    """Raised when a factory needs, directly or not, the service it creates"""

    def __init__(self, chain: List[type[Any]]) -> None:
        super().__init__(
            "Circular dependency: " + " -> ".join(t.__name__ for t in chain)
        )
        self.chain = chain


class SimpleContainer:
    """
    Lazily creates one instance per registered type.

    Factories receive the container so they can resolve their own
    dependencies. Registering a type again replaces both the factory and
    any instance already created from the old one.
    """

    def __init__(self) -> None:
        self._instances: Dict[type[Any], Any] = {}
        self._factories: Dict[type[Any], ServiceFactory[Any]] = {}
        self._resolving: List[type[Any]] = []

    def register(
        self, service_type: type[T], factory: ServiceFactory[T]
    ) -> "SimpleContainer":
        if not callable(factory):
            raise ValueError(f"Factory for {service_type} must be callable")

        self._factories[service_type] = factory
        self._instances.pop(service_type, None)
        return self

    def singleton(self, service_type: type[T], instance: T) -> "SimpleContainer":
        """Use an existing object for service_type"""
        self._factories.pop(service_type, None)
        self._instances[service_type] = instance
        return self

    def is_registered(self, service_type: type[Any]) -> bool:
        return service_type in self._instances or service_type in self._factories

    def resolve(self, service_type: type[T]) -> T:
        if service_type in self._instances:
            return cast(T, self._instances[service_type])

        factory = self._factories.get(service_type)
        if factory is None:
            raise ServiceNotFoundError(f"No factory registered for {service_type}")
        if service_type in self._resolving:
            raise CircularDependencyError(self._resolving + [service_type])

        self._resolving.append(service_type)
        try:
            instance = factory(self)
        finally:
            self._resolving.pop()

        self._instances[service_type] = instance
        return cast(T, instance)
