from .entry import ConfStrEntry
from .library import ConfStrLibrary

__all__ = [
    "ConfStrEntry",
    "ConfStrLibrary",
]
