"""
hiera/backend/base.py

Abstract base class for backends and the resolution types they understand.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from hiera.backend.dispatcher import Backend


class ResolutionType(str, Enum):
    """How a single backend combines the matches it finds for one key."""

    PRIORITY = "priority"
    ARRAY = "array"
    HASH = "hash"


def empty_answer(resolution_type: Any) -> Any:
    """Return the "nothing found" value for *resolution_type*."""
    if resolution_type == ResolutionType.ARRAY:
        return []
    if resolution_type == ResolutionType.HASH:
        return {}
    return None


def is_answer(value: Any) -> bool:
    """
    True if *value* counts as an answer for the dispatcher.

    ``None`` and empty strings, lists and dicts do not; ``False`` and ``0``
    do.
    """
    if value is None:
        return False
    if isinstance(value, (str, list, tuple, dict)) and len(value) == 0:
        return False
    return True


class BaseBackend(ABC):
    """
    Abstract base class for all backends.

    Subclasses are constructed once per process by the dispatcher, so
    expensive setup (opening files, connecting) belongs in ``__init__``.
    The dispatcher passes itself as *backend* so implementations can reach
    ``datasources``, ``datadir`` and the interpolation helpers.
    """

    def __init__(self, backend: Optional["Backend"] = None) -> None:
        self.backend = backend

    @abstractmethod
    def lookup(
        self,
        key: str,
        scope: Any,
        order_override: Any,
        resolution_type: Any,
    ) -> Any:
        """
        Answer *key* for *scope*, or return ``None``/an empty container.

        Parameters
        ----------
        key : str
            The key being looked up.
        scope : Mapping
            Caller variables used for interpolation.
        order_override : str | list | None
            Source(s) to search before the hierarchy.
        resolution_type : ResolutionType | str
            How to combine matches found in several sources.
        """
        ...
