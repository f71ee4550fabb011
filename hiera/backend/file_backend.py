"""
hiera/backend/file_backend.py

Shared search logic for backends that keep one data file per source under
the backend's datadir (``<datadir>/<source>.<extension>``).
"""
from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional

from hiera.backend.base import BaseBackend, ResolutionType, empty_answer
from hiera.utils.exceptions import BackendError

logger = logging.getLogger(__name__)


class FileBackend(BaseBackend):
    """
    Search ``<datadir>/<source>.<EXTENSION>`` for every data source.

    ``priority`` lookups stop at the first file holding the key. ``array``
    lookups collect the values from every file, ``hash`` lookups merge them
    with earlier sources winning.
    """
    NAME = ""
    EXTENSION = ""

    @abstractmethod
    def load(self, path: Path) -> Optional[Dict[str, Any]]:
        """Parse *path* and return its top-level mapping."""
        ...

    def datafile(self, source: str, scope: Any) -> Optional[Path]:
        """Return the data file for *source*, or ``None`` if it does not exist."""
        datadir = self.backend.datadir(self.NAME, scope)
        path = Path(datadir) / f"{source}.{self.EXTENSION}"
        if not path.is_file():
            logger.debug("Cannot find datafile %s, skipping", path)
            return None
        return path

    def lookup(self, key, scope, order_override, resolution_type):
        answer = empty_answer(resolution_type)
        logger.debug("Looking up %s in %s backend", key, self.NAME)

        for source in self.backend.datasources(scope, order_override):
            path = self.datafile(source, scope)
            if path is None:
                continue

            logger.debug("Looking for data source %s", source)
            data = self.load(path)
            if not data or key not in data:
                continue

            # Extra logging that we found the key, so it's easier to spot
            # sources that are shadowed by a higher priority one.
            logger.debug("Found %s in %s", key, source)
            new_answer = self.backend.parse_answer(data[key], scope)

            if resolution_type == ResolutionType.ARRAY:
                answer = self._append(answer, new_answer, key, path)
            elif resolution_type == ResolutionType.HASH:
                answer = self._merge(answer, new_answer, key, path)
            else:
                answer = new_answer
                break

        return answer

    # ------------------------------------------------------------------ #
    # Internal helpers                                                   #
    # ------------------------------------------------------------------ #
    @staticmethod
    def _append(answer: list, value: Any, key: str, path: Path) -> list:
        if isinstance(value, list):
            return answer + value
        if isinstance(value, str):
            return answer + [value]
        raise BackendError(
            f"Hiera type mismatch for {key} in {path}: expected Array or String"
            f" and got {type(value).__name__}"
        )

    @staticmethod
    def _merge(answer: dict, value: Any, key: str, path: Path) -> dict:
        if not isinstance(value, dict):
            raise BackendError(
                f"Hiera type mismatch for {key} in {path}: expected Hash"
                f" and got {type(value).__name__}"
            )
        return {**value, **answer}
