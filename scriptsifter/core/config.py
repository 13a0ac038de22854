"""
Runtime configuration.
Defaults can be overridden through SCRIPTSIFTER_* environment variables.
"""

import os
from dataclasses import dataclass, field


@dataclass
class SecretHeuristicConfig:
    min_length: int = 10
    min_secret_length: int = 16
    min_char_classes: int = 3


@dataclass
class FetchConfig:
    timeout: int = 30
    max_source_size: int = 5 * 1024 * 1024
    user_agent: str = 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36'


@dataclass
class Config:
    output_dir: str = "scan_output"
    save_results: bool = True
    # URL literals skip the secret heuristic unless this is set
    check_url_literals_for_secrets: bool = False
    secrets: SecretHeuristicConfig = field(default_factory=SecretHeuristicConfig)
    fetch: FetchConfig = field(default_factory=FetchConfig)


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def get_default_config() -> Config:
    config = Config()
    config.output_dir = os.environ.get('SCRIPTSIFTER_OUTPUT_DIR', config.output_dir)
    config.fetch.timeout = _env_int('SCRIPTSIFTER_TIMEOUT', config.fetch.timeout)
    config.fetch.max_source_size = _env_int('SCRIPTSIFTER_MAX_SIZE', config.fetch.max_source_size)
    return config
