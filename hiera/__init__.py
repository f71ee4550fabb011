"""
hiera package initialization.

Hierarchical key/value lookup over pluggable backends.
"""
import logging

__version__ = "1.0.0"

logger = logging.getLogger(__name__)

# --------------------------------------------------------------------------- #
# Config components                                                           #
# --------------------------------------------------------------------------- #
from hiera.config import HieraConfig, load_config

# --------------------------------------------------------------------------- #
# Backend dispatch and interpolation                                          #
# --------------------------------------------------------------------------- #
from hiera.backend import (
    Backend,
    BaseBackend,
    ResolutionType,
    datadir,
    datasources,
    lookup,
    parse_string,
)
from hiera.client import Hiera

# --------------------------------------------------------------------------- #
# Backend registration system                                                 #
# --------------------------------------------------------------------------- #
from hiera.utils.component_registry import register, available
from hiera.utils.exceptions import HieraError, ConfigurationError, BackendError
