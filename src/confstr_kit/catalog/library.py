import logging
from pathlib import Path
from time import monotonic

import yaml

from confstr_kit.observability import names
from confstr_kit.observability.base import MetricsHook, NoOpMetricsHook
from confstr_kit.parsers.models import ConfStr
from confstr_kit.parsers.parser import ConfStrParser

from .entry import ConfStrEntry

logger = logging.getLogger(__name__)


class ConfStrLibrary:
    """
    Named configuration strings loaded from a directory of YAML files.

    Each ``*.yaml`` file holds one entry. Every entry is parsed while
    loading, so a malformed configuration string fails the whole load.
    """

    def __init__(
        self,
        directory: str | Path,
        parser: ConfStrParser | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._parser = parser or ConfStrParser(metrics_hook=metrics_hook)
        self.metrics_hook = metrics_hook
        self._entries: dict[str, ConfStrEntry] = {}
        self._parsed: dict[str, ConfStr] = {}

        start = monotonic()
        logger.info("Initializing ConfStrLibrary from directory: %s", directory)
        self._load_all(Path(directory))
        logger.info("Loaded %d configuration strings", len(self._entries))

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(
            names.CONFSTR_CATALOG_LOAD_DURATION, elapsed_ms
        )
        self.metrics_hook.record_gauge(
            names.CONFSTR_CATALOG_ENTRIES, len(self._entries)
        )

    def get(self, name: str) -> ConfStr:
        logger.debug("Getting configuration string: name=%s", name)
        try:
            return self._parsed[name]
        except KeyError:
            logger.error("Configuration string not found: name=%s", name)
            raise KeyError(f"Configuration string '{name}' not found")

    def entry(self, name: str) -> ConfStrEntry:
        try:
            return self._entries[name]
        except KeyError:
            logger.error("Configuration string not found: name=%s", name)
            raise KeyError(f"Configuration string '{name}' not found")

    def list(self) -> list[str]:
        return sorted(self._entries)

    def _load_all(self, directory: Path) -> None:
        for file_path in sorted(directory.glob("*.yaml")):
            entry = self._load_entry(file_path)
            if entry.name in self._entries:
                raise ValueError(
                    f"Configuration string '{entry.name}' already defined"
                    f" (duplicate in {file_path.name})"
                )
            self._parsed[entry.name] = self._parser.parse(entry.conf_str)
            self._entries[entry.name] = entry
            logger.debug(
                "Loaded configuration string: %s from %s", entry.name, file_path
            )

    def _load_entry(self, file_path: Path) -> ConfStrEntry:
        with open(file_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return ConfStrEntry.model_validate(data)
