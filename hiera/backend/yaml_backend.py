"""
hiera/backend/yaml_backend.py

Backend reading one YAML document per data source.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from hiera.backend.file_backend import FileBackend
from hiera.utils.component_registry import register
from hiera.utils.exceptions import BackendError


@register("yaml")
class YamlBackend(FileBackend):
    """Look keys up in ``<datadir>/<source>.yaml``."""
    NAME = "yaml"
    EXTENSION = "yaml"

    def load(self, path: Path) -> Optional[Dict[str, Any]]:
        try:
            with path.open("r", encoding="utf-8") as fh:
                data = yaml.safe_load(fh)
        except yaml.YAMLError as exc:
            raise BackendError(f"Failed to parse YAML {path}: {exc}") from exc
        if data is not None and not isinstance(data, dict):
            raise BackendError(f"Data file {path} must contain a mapping")
        return data
