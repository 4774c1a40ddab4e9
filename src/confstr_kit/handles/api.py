# handles/api.py

"""Boundary operations over parsed configuration strings.

Every object handed out here is owned by the caller and must be released
exactly once, either with ``release`` or by using it as a context manager.

Example:
    >>> with parse("http::host=localhost;port=9000;") as handle:
    ...     with begin_iteration(handle) as it:
    ...         while advance(it):
    ...             print(it.key, it.value)
    host localhost
    port 9000
"""

from confstr_kit.observability.base import MetricsHook, NoOpMetricsHook
from confstr_kit.parsers.parser import ConfStrParser

from .handle import ConfStrHandle
from .iterator import PairIterator
from .resource import OwnedResource


def parse(
    raw: str | bytes,
    *,
    strict: bool = False,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> ConfStrHandle:
    """Parse ``raw`` into an owned handle. Raises ParseError on bad input."""
    parser = ConfStrParser(strict=strict, metrics_hook=metrics_hook)
    return ConfStrHandle(parser.parse(raw))


def service(handle: ConfStrHandle) -> str:
    return handle.service()


def get(handle: ConfStrHandle, key: str) -> str | None:
    return handle.get(key)


def begin_iteration(handle: ConfStrHandle) -> PairIterator:
    return handle.iterate()


def advance(iterator: PairIterator) -> bool:
    return iterator.advance()


def release(resource: OwnedResource) -> None:
    resource.release()
