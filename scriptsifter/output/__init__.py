"""
Report rendering and structured export.
"""

from .json_exporter import JSONExporter
from .text_report import build_text_report

__all__ = ["JSONExporter", "build_text_report"]
