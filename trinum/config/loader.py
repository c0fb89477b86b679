"""
trinum Configuration Loader
===========================

Load library defaults from trinum.yaml.

Lookup order:
    1. explicit path passed to load_config()
    2. $TRINUM_CONFIG
    3. ./trinum.yaml

Usage:
    from trinum.config import get_config, configure_logging

    config = get_config()                  # cached, defaults merged
    width = config['indexer']['width']     # 'int32' unless overridden
    configure_logging()                    # attach a handler at logging.level
"""

import copy
import logging
import os
import warnings
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .defaults import DEFAULTS, CONFIG_FILENAME, CONFIG_ENV_VAR

logger = logging.getLogger(__name__)

_config: Optional[Dict[str, Any]] = None


def get_config_path() -> Optional[Path]:
    """Resolve the config file location, or None when no file exists."""
    candidates = []

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        candidates.append(Path(env_path))
    candidates.append(Path.cwd() / CONFIG_FILENAME)

    for path in candidates:
        if path.is_file():
            return path

    return None


def _merge(defaults: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Merge override sections over defaults, one level deep."""
    merged = copy.deepcopy(defaults)

    for section, values in overrides.items():
        if section not in merged:
            warnings.warn(
                f"trinum config: unknown section '{section}' ignored",
                RuntimeWarning,
                stacklevel=3,
            )
            continue
        if not isinstance(values, dict):
            raise ValueError(
                f"trinum config: section '{section}' must be a mapping, "
                f"got {type(values).__name__}"
            )
        merged[section].update(values)

    return merged


def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load configuration from YAML and merge it over DEFAULTS.

    Args:
        path: Explicit config file. If None, $TRINUM_CONFIG then
              ./trinum.yaml are tried; with neither present the defaults
              are returned.

    Returns:
        Configuration dict with sections 'triangular', 'indexer', 'logging'

    Raises:
        FileNotFoundError: if an explicit path does not exist
    """
    if path is not None:
        config_file = Path(path)
        if not config_file.is_file():
            raise FileNotFoundError(f"No trinum config at {config_file}")
    else:
        config_file = get_config_path()

    if config_file is None:
        logger.debug("No %s found, using defaults", CONFIG_FILENAME)
        return copy.deepcopy(DEFAULTS)

    with open(config_file) as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"trinum config {config_file} must be a mapping at top level")

    logger.debug("Loaded config from %s", config_file)
    return _merge(DEFAULTS, raw)


def get_config() -> Dict[str, Any]:
    """Return the process-wide config, loading it on first use."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Forget the cached config so the next get_config() reloads it."""
    global _config
    _config = None


def configure_logging(level: Optional[Union[str, int]] = None) -> logging.Logger:
    """
    Attach a stream handler to the 'trinum' logger.

    Args:
        level: Logging level name or number. Defaults to logging.level
               from the config.

    Returns:
        The configured 'trinum' logger
    """
    settings = get_config()['logging']
    if level is None:
        level = settings['level']
    if isinstance(level, str):
        level = level.upper()

    root = logging.getLogger('trinum')
    root.setLevel(level)

    if not any(getattr(h, '_trinum_handler', False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(settings['format']))
        handler._trinum_handler = True
        root.addHandler(handler)

    return root
