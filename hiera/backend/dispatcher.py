"""
hiera.backend.dispatcher
========================

Calls out to the configured backends in the order they were specified; the
first one to answer wins.

Layering backends lets e.g. module-provided default data sit behind user
data: put the defaults backend last and anything earlier overrides it.

Backend instances are cached for the life of the :class:`BackendCache`, so a
backend that needs a database connection should open it in its constructor;
later lookups reuse the same instance.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Mapping, Optional

from hiera.backend.base import BaseBackend, ResolutionType, is_answer
from hiera.backend.hierarchy import datasources as build_datasources
from hiera.backend.interpolation import parse_answer, parse_string
from hiera.config.defaults import DEFAULT_DATADIR
from hiera.config.settings import HieraConfig
from hiera.utils import component_registry
from hiera.utils.component_registry import BackendCache, BackendRegistry

logger = logging.getLogger(__name__)


class Backend:
    """
    Backend dispatcher bound to one configuration.

    The registry maps backend names to factories and the cache holds the
    live instances; both default to the process-wide objects in
    :mod:`hiera.utils.component_registry` and can be injected for tests.
    """

    def __init__(
        self,
        config: HieraConfig,
        registry: BackendRegistry | None = None,
        cache: BackendCache | None = None,
    ) -> None:
        self.config = config
        self.registry = registry if registry is not None else component_registry.backends
        self.cache = cache if cache is not None else component_registry.instances

    # ------------------------------------------------------------------ #
    # Public API                                                         #
    # ------------------------------------------------------------------ #
    def datadir(self, backend: str, scope: Any) -> Any:
        """
        Return the data directory for *backend*.

        Data lives in ``/var/lib/hiera`` unless the backend's settings supply
        a ``datadir``; either way the path is interpolated against *scope*.
        """
        template = self.config.backend_settings(backend).get("datadir")
        if template is None:
            template = DEFAULT_DATADIR
        return parse_string(template, scope)

    def datasources(
        self,
        scope: Any,
        override: Any = None,
        hierarchy: Any = None,
        on_each: Optional[Callable[[str], Any]] = None,
    ) -> List[str]:
        """Interpolated data source names for *scope*, highest precedence first."""
        return build_datasources(self.config, scope, override, hierarchy, on_each)

    @staticmethod
    def parse_string(data: Any, scope: Any, extra_data: Optional[Mapping[str, Any]] = None) -> Any:
        return parse_string(data, scope, extra_data)

    @staticmethod
    def parse_answer(data: Any, scope: Any, extra_data: Optional[Mapping[str, Any]] = None) -> Any:
        return parse_answer(data, scope, extra_data)

    def lookup(
        self,
        key: str,
        default: Any,
        scope: Any,
        order_override: Any = None,
        resolution_type: Any = ResolutionType.PRIORITY,
    ) -> Any:
        """
        Ask each configured backend for *key* until one answers.

        Backend names without a registered implementation are skipped.
        Exceptions raised by a backend propagate to the caller. When no
        backend answers, *default* is interpolated against *scope* and
        returned (``None`` stays ``None``).
        """
        answer = None

        for name in self.config.backends:
            if name not in self.registry:
                continue

            instance = self._instance(name)
            answer = instance.lookup(key, scope, order_override, resolution_type)

            if is_answer(answer):
                logger.debug("Found %s in %s backend", key, name)
                return answer

        return parse_string(default, scope, {})

    # ------------------------------------------------------------------ #
    # Internal helpers                                                   #
    # ------------------------------------------------------------------ #
    def _instance(self, name: str) -> Any:
        factory = self.registry.get(name)

        def create() -> Any:
            logger.debug("Instantiating %s backend", name)
            if isinstance(factory, type) and issubclass(factory, BaseBackend):
                return factory(self)
            return factory()

        instance = self.cache.get_or_create(name, create)
        # Cached instances read the config of the dispatcher doing the lookup
        if isinstance(instance, BaseBackend) and instance.backend is not self:
            instance.backend = self
        return instance


# --------------------------------------------------------------------------- #
# Module-level convenience API bound to a default dispatcher                  #
# --------------------------------------------------------------------------- #
_default: Backend | None = None


def configure(config: HieraConfig, **kwargs: Any) -> Backend:
    """Bind the module-level functions to a dispatcher for *config*."""
    global _default
    _default = Backend(config, **kwargs)
    return _default


def _dispatcher() -> Backend:
    global _default
    if _default is None:
        _default = Backend(HieraConfig())
    return _default


def lookup(key, default, scope, order_override=None, resolution_type=ResolutionType.PRIORITY):
    return _dispatcher().lookup(key, default, scope, order_override, resolution_type)


def datasources(scope, override=None, hierarchy=None, on_each=None):
    return _dispatcher().datasources(scope, override, hierarchy, on_each)


def datadir(backend, scope):
    return _dispatcher().datadir(backend, scope)
