"""
hiera.utils.component_registry
==============================

Explicit backend registration table and the live instance cache.

* Register:   ``@backends.register("yaml")``
* Discover:   ``factory = backends.get("yaml")``
* Enumerate:  ``backends.available()  ->  ("json", "yaml")``

Backend names map to factories through an ordinary dictionary, so a name
nobody registered is a plain miss the dispatcher can skip.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, Tuple

logger = logging.getLogger(__name__)


class BackendRegistry:
    """Name → factory table for backend implementations."""

    def __init__(self) -> None:
        self._factories: Dict[str, Callable[..., Any]] = {}

    # ------------------------------------------------------------------ #
    # Public API                                                         #
    # ------------------------------------------------------------------ #
    def register(self, name: str):
        """
        Decorator for registering a backend factory under *name*.

        Example
        -------
        ```python
        @backends.register("yaml")
        class YamlBackend(FileBackend):
            ...
        ```
        """

        def decorator(factory: Callable[..., Any]):
            self._factories[name] = factory
            logger.debug("Registered backend %s", name)
            return factory

        return decorator

    def add(self, name: str, factory: Callable[..., Any]) -> None:
        """Register *factory* under *name* without the decorator form."""
        self.register(name)(factory)

    def get(self, name: str) -> Callable[..., Any]:
        """Return the **class or factory** registered as *name*."""
        if name not in self._factories:
            raise KeyError(f"No backend named {name!r} available.")
        return self._factories[name]

    def available(self) -> Tuple[str, ...]:
        """Return the sorted, frozen list of registered backend names."""
        return tuple(sorted(self._factories))

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def copy(self) -> "BackendRegistry":
        """Return an independent registry holding the same factories."""
        clone = BackendRegistry()
        clone._factories = dict(self._factories)
        return clone


class BackendCache:
    """
    Process-wide store of live backend instances.

    At most one instance exists per backend name. Instances are created on
    first use and never evicted; :meth:`reset` exists for test isolation.
    """

    def __init__(self) -> None:
        self._instances: Dict[str, Any] = {}
        self._lock = threading.Lock()

    def get_or_create(self, name: str, create: Callable[[], Any]) -> Any:
        """Return the cached instance for *name*, calling *create* once if absent."""
        instance = self._instances.get(name)
        if instance is not None:
            return instance
        with self._lock:
            instance = self._instances.get(name)
            if instance is None:
                instance = create()
                self._instances[name] = instance
                logger.debug("Created %s backend instance", name)
        return instance

    def __contains__(self, name: object) -> bool:
        return name in self._instances

    def __len__(self) -> int:
        return len(self._instances)

    def reset(self) -> None:
        with self._lock:
            self._instances.clear()


# Process defaults, populated by ``hiera.backend`` on import.
backends = BackendRegistry()
instances = BackendCache()


def register(name: str):
    """Register a backend factory in the process-default registry."""
    return backends.register(name)


def available() -> Tuple[str, ...]:
    return backends.available()
