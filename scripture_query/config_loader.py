# scripture_query/config_loader.py
"""
Scripture Query Configuration Loader

Loads optional settings (currently: extra book aliases) from a YAML file.
The file path comes from SCRIPTURE_QUERY_CONFIG, which may be set in a .env
file; without a file the built-in defaults apply.
"""

import os
import logging
import yaml
from typing import Dict, List, Any
from functools import lru_cache

from dotenv import load_dotenv

# Load .env
load_dotenv()

logger = logging.getLogger(__name__)

# Relative to the working directory, so it works for installed packages too
DEFAULT_CONFIG_PATH = os.path.join('config', 'scripture_query.yml')


def get_config_path() -> str:
    """Return the configured YAML path (env override or ./config default)."""
    return os.path.abspath(os.getenv("SCRIPTURE_QUERY_CONFIG", DEFAULT_CONFIG_PATH))


@lru_cache(maxsize=1)
def load_config() -> Dict[str, Any]:
    """Load settings from YAML config."""
    path = get_config_path()
    if not os.path.exists(path):
        logger.debug(f"No config at {path}, using defaults")
        return get_default_config()

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    logger.info(f"Loaded scripture query config from {path}")
    return data or get_default_config()


def get_default_config() -> Dict[str, Any]:
    """Return default settings if config file missing."""
    return {
        'version': '1.0',
        'extra_aliases': {},
    }


def reload_config():
    """Clear cache and reload config."""
    load_config.cache_clear()
    return load_config()


def get_extra_aliases() -> Dict[str, List[str]]:
    """Get extra aliases keyed by canonical book name."""
    config = load_config()
    aliases = config.get('extra_aliases') or {}
    return {name: list(values or []) for name, values in aliases.items()}
