"""
Extraction and classification engine.
"""

from .code_analyzer import CodeAnalyzer, analyze_code
from .classifier import ParsedUrl, UrlParseError, parse_url, scan_literals
from .raw_scanner import scan_raw
from .aggregator import merge
from .secrets import looks_like_secret
from .tokenizer import Literals, iter_literals

__all__ = [
    "CodeAnalyzer", "analyze_code",
    "ParsedUrl", "UrlParseError", "parse_url", "scan_literals",
    "scan_raw", "merge", "looks_like_secret",
    "Literals", "iter_literals",
]
