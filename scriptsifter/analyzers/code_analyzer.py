"""
Static extraction engine.
Scans script source for URLs, domains, paths and secret-like string literals
without executing or parsing it.
"""

from typing import Optional

from scriptsifter.analyzers.aggregator import merge
from scriptsifter.analyzers.classifier import scan_literals
from scriptsifter.analyzers.raw_scanner import scan_raw
from scriptsifter.core.config import Config
from scriptsifter.models import AnalysisResult


class CodeAnalyzer:

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()

    def analyze(self, source: Optional[str]) -> AnalysisResult:
        if not source:
            return AnalysisResult()

        raw = scan_raw(source)
        literal = scan_literals(source, self.config)

        return merge(raw, literal)


def analyze_code(source: Optional[str], config: Optional[Config] = None) -> AnalysisResult:
    return CodeAnalyzer(config).analyze(source)
