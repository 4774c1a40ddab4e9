# handles/handle.py

from confstr_kit.parsers.models import ConfStr

from .iterator import PairIterator
from .resource import OwnedResource


class ConfStrHandle(OwnedResource):
    """
    Opaque, owned handle to a parsed configuration string.

    Strings returned by ``service``, ``get`` and the pair iterators belong to
    the handle's configuration; the handle refuses access once released.
    """

    def __init__(self, conf_str: ConfStr) -> None:
        super().__init__()
        self._conf_str: ConfStr | None = conf_str

    @property
    def conf_str(self) -> ConfStr:
        self._check_live()
        assert self._conf_str is not None
        return self._conf_str

    def service(self) -> str:
        return self.conf_str.service

    def get(self, key: str) -> str | None:
        return self.conf_str.get(key)

    def iterate(self) -> PairIterator:
        """Fresh cursor positioned before the first pair."""
        return PairIterator(self)

    def _on_release(self) -> None:
        self._conf_str = None

    def __repr__(self) -> str:
        if self.released:
            return "ConfStrHandle(<released>)"
        return f"ConfStrHandle({self._conf_str!r})"
