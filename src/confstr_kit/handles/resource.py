# handles/resource.py

import logging
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

R = TypeVar("R", bound="OwnedResource")


class HandleReleasedError(RuntimeError):
    """An owned object was used, or released, after it had been released."""


class OwnedResource:
    """
    Base for boundary objects that must be released exactly once.

    - ``release()`` a second time raises HandleReleasedError
    - any checked access after release raises HandleReleasedError
    - ``with`` blocks release on exit unless already released
    - copies are refused, so ownership can never be duplicated
    """

    def __init__(self) -> None:
        self._released = False

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        if self._released:
            raise HandleReleasedError(f"{type(self).__name__} already released")
        self._released = True
        self._on_release()
        logger.debug("Released %s", type(self).__name__)

    def _on_release(self) -> None:
        return None

    def _check_live(self) -> None:
        if self._released:
            raise HandleReleasedError(f"{type(self).__name__} used after release")

    def __enter__(self: R) -> R:
        self._check_live()
        return self

    def __exit__(self, *exc_info: Any) -> None:
        if not self._released:
            self.release()

    def __copy__(self) -> None:
        raise TypeError(f"{type(self).__name__} cannot be copied")

    def __deepcopy__(self, memo: dict) -> None:
        raise TypeError(f"{type(self).__name__} cannot be copied")
