"""Default configuration values for hiera.

These defaults are overridden by the YAML config file and by in-memory
overrides at load time.
"""

# Where ``load_config()`` looks when neither a source nor $HIERA_CONFIG is given
DEFAULT_CONFIG_FILE = "/etc/hiera.yaml"

# Data lives here unless a backend's settings supply a ``datadir``
DEFAULT_DATADIR = "/var/lib/hiera"

# Source searched when no hierarchy is configured
DEFAULT_HIERARCHY = ["common"]

# Default configuration dictionary
DEFAULT_CONFIG = {
    # -------------------------------------------------------------------------
    # Backends, searched in order; the first to answer wins
    # -------------------------------------------------------------------------
    "backends": ["yaml"],

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    "logger": "console",   # Options: console, noop
    "log_level": "WARNING",

    # "hierarchy" is deliberately absent: lookups fall back to DEFAULT_HIERARCHY
}
