"""
hiera/backend/__init__.py

Backend dispatch, data source construction and interpolation.
Bundled backends register themselves in the process-default registry on
import.
"""

from hiera.backend.base import BaseBackend, ResolutionType, empty_answer, is_answer
from hiera.backend.dispatcher import (
    Backend,
    configure,
    datadir,
    datasources,
    lookup,
)
from hiera.backend.hierarchy import iter_datasources
from hiera.backend.interpolation import MAX_INTERPOLATION_PASSES, parse_answer, parse_string
from hiera.backend.file_backend import FileBackend
# Auto-register concrete implementations on import:
from hiera.backend.yaml_backend import YamlBackend  # noqa: F401
from hiera.backend.json_backend import JsonBackend  # noqa: F401

__all__ = [
    "Backend",
    "BaseBackend",
    "FileBackend",
    "JsonBackend",
    "MAX_INTERPOLATION_PASSES",
    "ResolutionType",
    "YamlBackend",
    "configure",
    "datadir",
    "datasources",
    "empty_answer",
    "is_answer",
    "iter_datasources",
    "lookup",
    "parse_answer",
    "parse_string",
]
