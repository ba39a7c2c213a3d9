"""Public reporter object attached to a host."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional

from base_reporter.config.loader import merge_options
from base_reporter.core.errors import InvalidArgumentError, NotFoundError
from base_reporter.core.logging import get_logger
from base_reporter.middleware import Middleware, build_middleware, to_spec
from base_reporter.plugins.discovery import REPORTER_ENTRY_POINT_GROUP, discover_reporters
from base_reporter.store import ReportFunction, ReporterStore

LOGGER = get_logger(__name__)


class ReporterFacade:
    """Registry and runner for report functions.

    Calling the facade with a function runs it against the store:

        files = app.reporter(lambda store: store.get("files"))

    Report functions receive `(store, options)`, where options are the
    install-time options overridden by those given to `report()`.
    """

    def __init__(self, store: ReporterStore) -> None:
        self._store = store

    def __call__(self, fn: Callable[[ReporterStore], Any]) -> Any:
        if not callable(fn):
            raise InvalidArgumentError("expected a function")
        return fn(self._store)

    @property
    def cache(self) -> ReporterStore:
        return self._store

    @property
    def reporters(self) -> Dict[str, ReportFunction]:
        return self._store.reporters

    def add(self, name: str, fn: ReportFunction) -> "ReporterFacade":
        """Register `fn` as the report called `name`.

        An existing report with the same name is replaced.

        Raises:
            InvalidArgumentError: If `name` is empty or `fn` is not callable.
        """
        if not isinstance(name, str) or not name:
            raise InvalidArgumentError("expected reporter name to be a non-empty string")
        if not callable(fn):
            raise InvalidArgumentError(f'expected reporter "{name}" to be a function')

        if name in self._store.reporters:
            LOGGER.debug(f"Replacing reporter '{name}'")
        self._store.reporters[name] = fn
        return self

    def has(self, name: str) -> bool:
        return isinstance(name, str) and callable(self._store.reporters.get(name))

    def names(self) -> List[str]:
        return list(self._store.reporters)

    def report(self, name: str, options: Optional[Mapping[str, Any]] = None) -> "ReporterFacade":
        """Run the report registered as `name`.

        Raises:
            InvalidArgumentError: If `name` is not a string.
            NotFoundError: If no callable report is registered under `name`.
        """
        if not isinstance(name, str):
            raise InvalidArgumentError("expected reporter name to be a string")
        fn = self._store.reporters.get(name)
        if not callable(fn):
            raise NotFoundError(name)

        opts = merge_options(self._store.options, options)
        LOGGER.debug(f"Running reporter '{name}'")
        fn(self._store, opts)
        return self

    def middleware(self, arg: Any = None) -> Middleware:
        """Create a pipeline middleware that records items on the store.

        Args:
            arg: None to accumulate item paths onto "files", a property
                name to accumulate onto, or a function taking the store and
                returning a middleware.
        """
        spec = to_spec(arg)
        LOGGER.debug(f"Creating middleware from {spec!r}")
        return build_middleware(spec, self._store)

    def load_plugins(self, group: str = REPORTER_ENTRY_POINT_GROUP) -> "ReporterFacade":
        """Register every report function discovered in the entry point group."""
        for name, fn in discover_reporters(group).items():
            self.add(name, fn)
        return self

    def __repr__(self) -> str:
        return f"{type(self).__name__}(reporters={self.names()!r})"
