"""
Key-value storage backends used for persisting list state.
"""

from .kv_store import KeyValueStore, MemoryStore, JsonFileStore

__all__ = ['KeyValueStore', 'MemoryStore', 'JsonFileStore']
