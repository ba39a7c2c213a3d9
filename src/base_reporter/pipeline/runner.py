"""Runs items through a chain of middleware."""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

from base_reporter.core.errors import InvalidArgumentError, PipelineError
from base_reporter.core.logging import get_logger
from base_reporter.middleware import Middleware

LOGGER = get_logger(__name__)


class Pipeline:
    """Sequential middleware pipeline.

    Each middleware receives `(item, continuation)`. The next middleware runs
    only once the continuation is called; a middleware that never calls it
    stops processing of that item.
    """

    def __init__(self, middleware: Optional[Iterable[Middleware]] = None) -> None:
        self._middleware: List[Middleware] = []
        for fn in middleware or []:
            self.use(fn)

    def use(self, fn: Middleware) -> "Pipeline":
        if not callable(fn):
            raise InvalidArgumentError("expected middleware to be a function")
        self._middleware.append(fn)
        return self

    def process(self, item: Any) -> bool:
        """Pass `item` through every middleware.

        Returns:
            True if every middleware called its continuation.

        Raises:
            PipelineError: If a middleware calls its continuation twice.
        """
        for fn in self._middleware:
            step = _Step(fn)
            fn(item, step.continue_)
            if step.calls == 0:
                LOGGER.warning(f"Middleware {step.label!r} did not continue, stopping item")
                return False
        return True

    def run(self, items: Iterable[Any]) -> int:
        """Process every item. Returns the number that completed the chain."""
        completed = 0
        for item in items:
            if self.process(item):
                completed += 1
        LOGGER.debug(f"Pipeline processed {completed} item(s)")
        return completed


class _Step:
    """Continuation state for one middleware call."""

    def __init__(self, fn: Middleware) -> None:
        self.label = getattr(fn, "__name__", repr(fn))
        self.calls = 0

    def continue_(self, *_args: Any) -> None:
        self.calls += 1
        if self.calls > 1:
            raise PipelineError(f"Middleware {self.label!r} called its continuation twice")
