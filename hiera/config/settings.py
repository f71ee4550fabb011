# hiera/config/settings.py
"""
Typed, read-only configuration store.

* Loads defaults from `hiera.config.defaults.DEFAULT_CONFIG`
* Overrides with values read from a YAML file (``$HIERA_CONFIG`` or
  ``/etc/hiera.yaml`` unless a source is given)
* Allows optional in-memory overrides (useful for tests)
* Exposes values through a frozen Pydantic model called `HieraConfig`
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from hiera.config.defaults import DEFAULT_CONFIG, DEFAULT_CONFIG_FILE
from hiera.utils.exceptions import ConfigurationError

# Load environment variables (HIERA_CONFIG) from a .env file if present
load_dotenv()

logger = logging.getLogger(__name__)

ConfigSource = Union[str, os.PathLike, Mapping[str, Any], "HieraConfig", None]

# --------------------------------------------------------------------------- #
# Helpers                                                                     #
# --------------------------------------------------------------------------- #


def _load_yaml(path: Path) -> Dict[str, Any]:
    """Load a YAML config file; raise ``ConfigurationError`` if unusable."""
    if not path.exists():
        raise ConfigurationError(f"Config file {path} not found")
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse YAML {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping")
    return data


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursively merge *override* into *base* (override wins)."""
    result: Dict[str, Any] = {**base}
    for k, v in override.items():
        if (
            k in result
            and isinstance(result[k], dict)
            and isinstance(v, dict)
        ):
            result[k] = deep_merge(result[k], v)
        else:
            result[k] = v
    return result


def _default_config_path() -> Path:
    return Path(os.environ.get("HIERA_CONFIG") or DEFAULT_CONFIG_FILE)


# --------------------------------------------------------------------------- #
# Pydantic model                                                              #
# --------------------------------------------------------------------------- #


class HieraConfig(BaseModel):
    # Per-backend settings bags (``yaml: {datadir: ...}``) arrive as extras
    model_config = ConfigDict(extra="allow", frozen=True)

    backends: List[str] = Field(default_factory=lambda: list(DEFAULT_CONFIG["backends"]))
    hierarchy: Optional[Union[str, List[Any]]] = None
    logger: str = Field(default=DEFAULT_CONFIG["logger"])
    log_level: str = Field(default=DEFAULT_CONFIG["log_level"])

    @field_validator("backends", mode="before")
    @classmethod
    def _listify_backends(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value

    # ---- dict-like read helpers ------------------------------------------ #
    def _raw(self, item: str) -> Any:
        if item in type(self).model_fields:
            return getattr(self, item)
        return (self.model_extra or {}).get(item)

    def __getitem__(self, item: str) -> Any:  # noqa: Dunder
        value = self._raw(item)
        if value is None:
            raise KeyError(item)
        return value

    def get(self, item: str, default: Any | None = None) -> Any:  # noqa: A003
        value = self._raw(item)
        return default if value is None else value

    def include(self, item: str) -> bool:
        """True if *item* is set to something other than ``None``."""
        return self._raw(item) is not None

    def __contains__(self, item: object) -> bool:  # noqa: Dunder
        return self.include(str(item))

    def backend_settings(self, name: str) -> Dict[str, Any]:
        """Return the settings bag for backend *name* (empty if unset)."""
        value = self._raw(name)
        return value if isinstance(value, dict) else {}


# --------------------------------------------------------------------------- #
# Public loader                                                               #
# --------------------------------------------------------------------------- #


def load_config(
    source: ConfigSource = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> HieraConfig:
    """
    Build a ``HieraConfig`` by merging:

    1.  ``DEFAULT_CONFIG``                          (hard-coded defaults)
    2.  *source*: a mapping, a ``HieraConfig`` or a YAML file path;
        ``None`` reads ``$HIERA_CONFIG`` or ``/etc/hiera.yaml``
    3.  *overrides* dict passed in programmatically (tests / cli flags)

    Later items win on conflict.
    """
    if isinstance(source, HieraConfig):
        loaded: Dict[str, Any] = source.model_dump()
    elif isinstance(source, Mapping):
        loaded = dict(source)
    else:
        path = Path(source) if source is not None else _default_config_path()
        logger.debug("Loading config from %s", path)
        loaded = _load_yaml(path)

    merged = deep_merge(DEFAULT_CONFIG, loaded)
    if overrides:
        merged = deep_merge(merged, overrides)
    try:
        return HieraConfig.model_validate(merged)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc
