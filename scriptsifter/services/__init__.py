"""
Persistence and source acquisition services.
"""

from .datastore import DataStore
from .fetcher import download_source, fetch_source, read_source_file

__all__ = ["DataStore", "download_source", "fetch_source", "read_source_file"]
