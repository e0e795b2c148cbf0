"""Dependency injection container.

The application is composed here rather than through module-level
singletons: the storage adapter and the list service are registered
against their types and resolved lazily.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

T = TypeVar("T")

Factory = Callable[["Container"], Any]


class Container:
    """
    Minimal registry of singletons and lazily built factories.

    A factory runs at most once; its product is cached and returned by
    every later ``resolve`` for the same key.
    """

    def __init__(self) -> None:
        self._factories: dict[type, Factory] = {}
        self._instances: dict[type, Any] = {}

    def register_singleton(self, interface: type[T], instance: T) -> None:
        """
        Register an already built instance.

        Args:
            interface: The type to register under
            instance: The instance returned by ``resolve``
        """
        self._factories.pop(interface, None)
        self._instances[interface] = instance

    def register_factory(
        self,
        interface: type[T],
        factory: Callable[[Container], T],
    ) -> None:
        """
        Register a factory for lazy instantiation.

        Re-registering drops any instance the previous factory produced.

        Args:
            interface: The type to register under
            factory: Called with the container on first resolve
        """
        self._instances.pop(interface, None)
        self._factories[interface] = factory

    def resolve(self, interface: type[T]) -> T:
        """
        Resolve a dependency.

        Raises:
            KeyError: If nothing is registered for the interface
        """
        if interface in self._instances:
            return self._instances[interface]

        factory = self._factories.get(interface)
        if factory is None:
            raise KeyError(f"No registration found for {interface}")

        instance = factory(self)
        self._instances[interface] = instance
        return instance

    def has(self, interface: type) -> bool:
        """Check if an interface is registered."""
        return interface in self._instances or interface in self._factories

    def clear(self) -> None:
        """Clear all registrations and instances."""
        self._factories.clear()
        self._instances.clear()


_container: Container | None = None


def get_container() -> Container:
    """Get the global container instance."""
    global _container
    if _container is None:
        _container = Container()
    return _container


def reset_container() -> None:
    """Reset the global container (useful for testing)."""
    global _container
    if _container is not None:
        _container.clear()
    _container = None
