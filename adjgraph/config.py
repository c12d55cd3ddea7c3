"""
Configuration loading for adjgraph
"""

import copy
from pathlib import Path

import yaml

from adjgraph.exceptions import ConfigError

DEFAULT_CONFIG = {
    'topology_path': None,
    'nodes': 25,
    'attach_edges': 2,
    'seed': 42,
    'weight_range': [1.0, 10.0],
    'num_queries': 20,
    'log_level': 'INFO',
    'plot': False,
}


def load_config(path=None):
    """
    Load a YAML config and merge it over DEFAULT_CONFIG.

    Unknown keys are kept as-is. With no path the defaults are returned.

    Raises:
        ConfigError: if the file does not hold a mapping
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path is None:
        return config

    with open(Path(path)) as f:
        loaded = yaml.safe_load(f)
    if loaded is None:
        return config
    if not isinstance(loaded, dict):
        raise ConfigError(f"{path}: expected a mapping at top level, got {type(loaded).__name__}")
    config.update(loaded)
    return config
