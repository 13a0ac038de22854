"""
ScriptSifter - static extraction of URLs, domains, paths and secret-like
strings from script source.
"""

__version__ = "1.0.0"

from .analyzers import CodeAnalyzer, analyze_code
from .models import AnalysisResult, SecretFinding
from .output import JSONExporter, build_text_report

__all__ = [
    "CodeAnalyzer", "analyze_code", "AnalysisResult", "SecretFinding",
    "JSONExporter", "build_text_report",
]
