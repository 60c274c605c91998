"""Default parameters of the scoring system and overrides on top of them."""

import logging
import os
from copy import deepcopy

import yaml

from bezierscore.exceptions import ConfigError, UnknownConfigKeyError

logger = logging.getLogger()

DEFAULT_CONFIG_PATH = os.path.join(
    os.path.dirname(__file__), "constants", "default.yaml"
)


def load_default_config(path: str = DEFAULT_CONFIG_PATH) -> dict:
    """Read the default config shipped with the package."""
    logger.debug(f"loading default config from {path}")
    with open(path) as f:
        return yaml.safe_load(f)


def load_config(overrides: dict | None = None) -> dict:
    """Default config with `overrides` merged on top.

    Parameters
    ----------

    overrides : dict, optional
        Nested dict using the keys of the default config.

    Returns
    -------
    dict
        The merged config, the default config file is not modified.

    Raises
    ------
    UnknownConfigKeyError
        if `overrides` holds a key the default config does not know
    """
    config = load_default_config()
    if overrides:
        merge(config, deepcopy(overrides))
    return config


def merge(target: dict, overrides: dict, parent_key: str = "") -> None:
    """Merge `overrides` into `target` in place, nested sections are merged key by key."""
    for key, value in overrides.items():
        full_key = f"{parent_key}.{key}" if parent_key else key

        if key not in target:
            raise UnknownConfigKeyError(full_key)

        if isinstance(target[key], dict):
            if not isinstance(value, dict):
                raise ConfigError(f"'{full_key}' is a section, got {value!r}")
            merge(target[key], value, parent_key=full_key)
            continue

        logger.info(f"config {full_key}: {target[key]} -> {value}")
        target[key] = value
