"""Protocol definitions for rolodex's pluggable collaborators."""

from .storage import ContactStore

__all__ = ["ContactStore"]
