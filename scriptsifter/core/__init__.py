"""
Shared configuration and logging.
"""

from .config import Config, FetchConfig, SecretHeuristicConfig, get_default_config
from .logger import logger, set_silent, set_verbose

__all__ = [
    "Config", "FetchConfig", "SecretHeuristicConfig", "get_default_config",
    "logger", "set_silent", "set_verbose",
]
