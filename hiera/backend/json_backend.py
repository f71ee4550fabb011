"""
hiera/backend/json_backend.py

Backend reading one JSON object per data source.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

from hiera.backend.file_backend import FileBackend
from hiera.utils.component_registry import register
from hiera.utils.exceptions import BackendError


@register("json")
class JsonBackend(FileBackend):
    """Look keys up in ``<datadir>/<source>.json``."""
    NAME = "json"
    EXTENSION = "json"

    def load(self, path: Path) -> Optional[Dict[str, Any]]:
        text = path.read_text(encoding="utf-8")
        if not text.strip():
            return None
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise BackendError(f"Failed to parse JSON {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise BackendError(f"Data file {path} must contain an object")
        return data
