"""
Utility functions and classes.

This package provides the backend registry, exceptions, logging helpers and
regex patterns shared across hiera.
"""

from hiera.utils.component_registry import (
    BackendCache, BackendRegistry, register, available
)
from hiera.utils.exceptions import HieraError, ConfigurationError, BackendError

__all__ = [
    'BackendCache',
    'BackendRegistry',
    'register',
    'available',
    'HieraError',
    'ConfigurationError',
    'BackendError',
]
