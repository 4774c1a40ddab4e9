from .api import advance, begin_iteration, get, parse, release, service
from .handle import ConfStrHandle
from .iterator import PairIterator
from .resource import HandleReleasedError, OwnedResource

__all__ = [
    # Operations
    "parse",
    "service",
    "get",
    "begin_iteration",
    "advance",
    "release",
    # Types
    "ConfStrHandle",
    "PairIterator",
    "OwnedResource",
    # Errors
    "HandleReleasedError",
]
