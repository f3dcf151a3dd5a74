"""
Package configuration.

Defaults ship with the package in `config.yaml`. Values can be overridden by a
file with the same name in the user config folder for the package.
"""

# std
from pathlib import Path

# third-party
import yaml
from loguru import logger
from platformdirs import user_config_path


# ---------------------------------------------------------------------------- #
PACKAGE = 'prettyformat'
FILENAME = 'config.yaml'
DEFAULTS = Path(__file__).parent / FILENAME

CACHE = {}

# ---------------------------------------------------------------------------- #


class ConfigNode(dict):
    """
    Nested dict with attribute lookup for keys.

    Examples
    --------
    >>> node = ConfigNode({'render': {'detect_cycles': True}})
    >>> node.render.detect_cycles
    True
    """

    def __init__(self, *args, **kws):
        super().__init__(*args, **kws)
        for key, val in self.items():
            if isinstance(val, dict) and not isinstance(val, ConfigNode):
                self[key] = type(self)(val)

    def __getattr__(self, key):
        try:
            return self[key]
        except KeyError:
            raise AttributeError(
                f'{type(self).__name__!r} has no attribute or key {key!r}.'
            ) from None


# Load
# ---------------------------------------------------------------------------- #

def load_yaml(filename):
    with Path(filename).open('r') as file:
        return yaml.safe_load(file) or {}


def load(filename):
    if filename not in CACHE:
        if not (path := Path(filename)).exists():
            raise FileNotFoundError(f"Non-existent file: '{filename!s}'")

        logger.debug('Loading config file: {!s}.', path)
        CACHE[filename] = load_yaml(path)

    return CACHE[filename]


def merge(defaults, overrides):
    """Recursively update (a copy of) `defaults` with `overrides`."""
    merged = dict(defaults)
    for key, val in overrides.items():
        if isinstance(val, dict) and isinstance(merged.get(key), dict):
            val = merge(merged[key], val)
        merged[key] = val
    return merged


def user_config_file():
    return user_config_path(PACKAGE) / FILENAME


def load_config(filename=None, user=True):
    """
    Load the package defaults, updated with values from `filename` (if given)
    or the user config file (if `user` is true and the file exists).
    """
    config = load(DEFAULTS)

    if filename is None and user and (path := user_config_file()).exists():
        logger.info('Found user config for {}: {!s}.', PACKAGE, path)
        filename = path

    if filename is not None:
        config = merge(config, load(filename))

    return ConfigNode(config)


# ---------------------------------------------------------------------------- #
CONFIG = load_config()
