"""
Scan pipeline - acquire source, analyze, persist.
"""

from .runner import ScanRunner

__all__ = ["ScanRunner"]
