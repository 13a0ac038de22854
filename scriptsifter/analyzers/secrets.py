"""
Length and character-class heuristic for secret-like strings.

Approximates the complexity of generated tokens without computing entropy.
"""

import re
from typing import Optional

from scriptsifter.core.config import SecretHeuristicConfig

_WHITESPACE_ONLY = re.compile(r'\s*')
_DIGITS_ONLY = re.compile(r'[0-9]+')

CHAR_CLASSES = (
    re.compile(r'[a-z]'),
    re.compile(r'[A-Z]'),
    re.compile(r'[0-9]'),
    re.compile(r'[^a-zA-Z0-9]'),
)


def count_char_classes(value: str) -> int:
    return sum(1 for pattern in CHAR_CLASSES if pattern.search(value))


def looks_like_secret(value: str, config: Optional[SecretHeuristicConfig] = None) -> bool:
    config = config or SecretHeuristicConfig()

    if len(value) < config.min_length:
        return False
    if _WHITESPACE_ONLY.fullmatch(value):
        return False
    if _DIGITS_ONLY.fullmatch(value):
        return False

    classes = count_char_classes(value)

    return classes >= config.min_char_classes and len(value) >= config.min_secret_length
