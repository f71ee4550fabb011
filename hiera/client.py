"""
hiera.client
============

High level entry point tying configuration, logging and the dispatcher
together::

    hiera = Hiera("/etc/hiera.yaml")
    hiera.lookup("ntpserver", None, {"environment": "production"})
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from hiera.backend.base import ResolutionType
from hiera.backend.dispatcher import Backend
from hiera.config.settings import ConfigSource, load_config
from hiera.utils.component_registry import BackendCache, BackendRegistry
from hiera.utils.logging import apply_logger_setting

logger = logging.getLogger(__name__)


class Hiera:
    """
    Lookup façade for one configuration.

    Each instance owns its own backend instance cache, so backends created
    for one configuration never serve another.
    """

    def __init__(
        self,
        config: ConfigSource = None,
        overrides: Optional[Mapping[str, Any]] = None,
        registry: BackendRegistry | None = None,
    ) -> None:
        self.config = load_config(config, overrides)
        apply_logger_setting(self.config.logger, self.config.log_level.upper())
        self.backend = Backend(self.config, registry=registry, cache=BackendCache())
        logger.debug("Hiera initialized with backends %s", self.config.backends)

    def lookup(
        self,
        key: str,
        default: Any = None,
        scope: Any = None,
        order_override: Any = None,
        resolution_type: Any = ResolutionType.PRIORITY,
    ) -> Any:
        """Look *key* up, returning the interpolated *default* if nothing answers."""
        return self.backend.lookup(
            key, default, scope if scope is not None else {}, order_override, resolution_type
        )
