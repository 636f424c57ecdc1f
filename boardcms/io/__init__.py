"""Persistence components for boardcms.

This package contains the content store protocol and its file and memory
implementations used by the access layer.
"""

from .storage import ContentStore, JsonContentStore, MemoryContentStore

__all__ = ["ContentStore", "JsonContentStore", "MemoryContentStore"]
