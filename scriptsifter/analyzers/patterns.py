"""
URL, domain and path recognizers.

Each matcher wraps one compiled expression and reports non-overlapping matches
left to right. They are applied both to the whole source text and to the
content of single literals.
"""

import re
from dataclasses import dataclass
from typing import List, Pattern


@dataclass(frozen=True)
class Match:
    start: int
    end: int
    value: str


class PatternMatcher:

    def __init__(self, name: str, pattern: Pattern):
        self.name = name
        self.pattern = pattern

    def match(self, text: str) -> List[Match]:
        if not text:
            return []
        return [Match(m.start(), m.end(), m.group(0)) for m in self.pattern.finditer(text)]

    def values(self, text: str) -> List[str]:
        return [m.value for m in self.match(text)]

    def __repr__(self) -> str:
        return f"PatternMatcher({self.name!r})"


# Case-insensitive over ASCII letters only. The lookbehind stands in for a
# leading ASCII word boundary
_SCHEME = r'[hH][tT][tT][pP][sS]?://'

URL_PATTERN = re.compile(r'(?<![A-Za-z0-9_])' + _SCHEME + r'[^\s"\'`]+')

DOMAIN_PATTERN = re.compile(r'\b(?:[a-zA-Z0-9-]+\.)+[a-zA-Z]{2,}\b', re.ASCII)

PATH_PATTERN = re.compile(r'/[a-zA-Z0-9_\-/.]+')

URL_PREFIX_PATTERN = re.compile(_SCHEME)

URL_MATCHER = PatternMatcher("url", URL_PATTERN)
DOMAIN_MATCHER = PatternMatcher("domain", DOMAIN_PATTERN)
PATH_MATCHER = PatternMatcher("path", PATH_PATTERN)


def is_url_literal(value: str) -> bool:
    return URL_PREFIX_PATTERN.match(value) is not None
