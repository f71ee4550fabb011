"""
hiera.utils.exceptions
======================

Custom exceptions for configuration lookup and the bundled backends.
"""

class HieraError(Exception):
    """Base exception for all hiera errors."""
    pass

class ConfigurationError(HieraError):
    """Error loading or validating the hiera configuration."""
    pass

class BackendError(HieraError):
    """Error raised by a backend while answering a lookup."""
    pass
