"""State container backing a host's reporter."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Dict, Mapping, Optional

from base_reporter.core.kvstore import KeyPath, KeyValueStore

if TYPE_CHECKING:
    from base_reporter.host import Host

ReportFunction = Callable[["ReporterStore", Dict[str, Any]], Any]


class ReporterStore:
    """Options, registered reports and accumulated state for one host.

    Accumulated properties live in a private key/value namespace, separate
    from the host's own store.
    """

    def __init__(self, host: "Host", options: Optional[Mapping[str, Any]] = None) -> None:
        self.host = host
        self.options: Dict[str, Any] = dict(options or {})
        self.reporters: Dict[str, ReportFunction] = {}
        self.data = KeyValueStore()

    def get(self, path: KeyPath, default: Any = None) -> Any:
        return self.data.get(path, default)

    def has(self, path: KeyPath) -> bool:
        return self.data.has(path)

    def set(self, path: KeyPath, value: Any) -> "ReporterStore":
        self.data.set(path, value)
        return self

    def union(self, path: KeyPath, value: Any) -> "ReporterStore":
        """Append `value` to the accumulation at `path` (see KeyValueStore.union)."""
        self.data.union(path, value)
        return self

    def set_option(self, key: str, value: Any) -> "ReporterStore":
        self.options[key] = value
        return self

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(options={self.options!r}, "
            f"reporters={sorted(self.reporters)!r})"
        )
