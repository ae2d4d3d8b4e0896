"""
Persistence adapters.

Services depend on RecordStore rather than touching the JSON files directly.
"""

from .json_storage import ParseError, RecordStore, StoreError

__all__ = ["ParseError", "RecordStore", "StoreError"]
