"""
Pipelines that wrap the extraction engine with I/O.
"""

from .scan import ScanRunner

__all__ = ["ScanRunner"]
