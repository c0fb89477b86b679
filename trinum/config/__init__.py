"""
trinum Configuration

Defaults, YAML overrides and logging setup.
"""

from .defaults import DEFAULTS, CONFIG_FILENAME, CONFIG_ENV_VAR
from .loader import (
    load_config,
    get_config,
    reset_config,
    get_config_path,
    configure_logging,
)

__all__ = [
    'DEFAULTS',
    'CONFIG_FILENAME',
    'CONFIG_ENV_VAR',
    'load_config',
    'get_config',
    'reset_config',
    'get_config_path',
    'configure_logging',
]
