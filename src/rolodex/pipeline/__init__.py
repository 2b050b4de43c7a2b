"""The field pipeline: collect, sort and process a record's fields."""

from .callbacks import RenderCallback
from .collect import collect
from .process import process_fields
from .sort import sort_fields

__all__ = [
    "RenderCallback",
    "collect",
    "process_fields",
    "sort_fields",
]
