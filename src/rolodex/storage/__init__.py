"""Built-in contact store implementations."""

from .json_file_store import JsonFileContactStore
from .memory_store import InMemoryContactStore

__all__ = [
    "InMemoryContactStore",
    "JsonFileContactStore",
]
