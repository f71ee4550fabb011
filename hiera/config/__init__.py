"""
Configuration handling for hiera.

The configuration is a read-only key/value store holding the ordered backend
list, the hierarchy template(s) and one settings bag per backend:

    backends: [yaml, json]
    hierarchy:
      - "%{environment}"
      - common
    yaml:
      datadir: /etc/puppet/hieradata
"""

from hiera.config.settings import HieraConfig, load_config, deep_merge
from hiera.config.defaults import (
    DEFAULT_CONFIG,
    DEFAULT_CONFIG_FILE,
    DEFAULT_DATADIR,
    DEFAULT_HIERARCHY,
)

__all__ = [
    'HieraConfig',
    'load_config',
    'deep_merge',
    'DEFAULT_CONFIG',
    'DEFAULT_CONFIG_FILE',
    'DEFAULT_DATADIR',
    'DEFAULT_HIERARCHY',
]
