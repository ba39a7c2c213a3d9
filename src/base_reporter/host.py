"""Host application that reporter plugins are installed into."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional, Protocol, Set

from base_reporter.core.errors import InvalidArgumentError
from base_reporter.core.kvstore import KeyPath, KeyValueStore
from base_reporter.core.logging import get_logger

LOGGER = get_logger(__name__)

PLUGIN_EVENT = "plugin"


class Host(Protocol):
    """Installation contract a host must provide to receive a reporter."""

    def is_equipped_with(self, name: str) -> bool: ...

    def mark_equipped(self, name: str) -> None: ...

    def attach(self, name: str, value: Any) -> None: ...


class App:
    """Minimal extensible application instance.

    Provides the installation contract, a small event emitter and a
    key/value store of its own.
    """

    def __init__(self, options: Optional[Mapping[str, Any]] = None) -> None:
        self.options: Dict[str, Any] = dict(options or {})
        self.cache = KeyValueStore()
        self._equipped: Set[str] = set()
        self._listeners: Dict[str, List[Callable[..., Any]]] = {}

    def is_equipped_with(self, name: str) -> bool:
        return name in self._equipped

    def mark_equipped(self, name: str) -> None:
        self._equipped.add(name)
        LOGGER.debug(f"Equipped app with '{name}'")
        self.emit(PLUGIN_EVENT, name)

    def attach(self, name: str, value: Any) -> None:
        """Expose `value` as an attribute of the app.

        Raises:
            InvalidArgumentError: If `name` would shadow an App method.
        """
        if callable(getattr(type(self), name, None)):
            raise InvalidArgumentError(f"Cannot attach '{name}': it is an App method")
        setattr(self, name, value)

    def use(self, plugin: Callable[["App"], Any]) -> "App":
        """Run `plugin` against this app and return the app."""
        if not callable(plugin):
            raise InvalidArgumentError("expected plugin to be a function")
        plugin(self)
        return self

    def on(self, event: str, handler: Callable[..., Any]) -> "App":
        self._listeners.setdefault(event, []).append(handler)
        return self

    def emit(self, event: str, *args: Any) -> bool:
        """Call every handler registered for `event`. Returns True if any ran."""
        handlers = list(self._listeners.get(event, []))
        for handler in handlers:
            handler(*args)
        return bool(handlers)

    def get(self, path: KeyPath, default: Any = None) -> Any:
        return self.cache.get(path, default)

    def set(self, path: KeyPath, value: Any) -> "App":
        self.cache.set(path, value)
        return self

    def union(self, path: KeyPath, value: Any) -> "App":
        self.cache.union(path, value)
        return self
