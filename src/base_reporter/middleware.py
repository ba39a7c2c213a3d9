"""Middleware construction for file pipelines.

A middleware has the shape `(item, continuation) -> None` and must call
`continuation()` exactly once. Three kinds can be requested from a reporter:

- FromFactory(fn): `fn(store)` returns the middleware
- FromProperty(name): items are accumulated onto `name`
- Default(): items are accumulated onto "files"
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath
from typing import TYPE_CHECKING, Any, Callable, Mapping, Union

from base_reporter.core.errors import InvalidArgumentError
from base_reporter.core.logging import get_logger

if TYPE_CHECKING:
    from base_reporter.store import ReporterStore

LOGGER = get_logger(__name__)

DEFAULT_PROPERTY = "files"

Continuation = Callable[..., Any]
Middleware = Callable[[Any, Continuation], None]
MiddlewareFactory = Callable[["ReporterStore"], Middleware]


@dataclass(frozen=True)
class FromFactory:
    factory: MiddlewareFactory


@dataclass(frozen=True)
class FromProperty:
    name: str


@dataclass(frozen=True)
class Default:
    name: str = DEFAULT_PROPERTY


MiddlewareSpec = Union[FromFactory, FromProperty, Default]


def to_spec(arg: Any = None) -> MiddlewareSpec:
    """Convert the argument given to `reporter.middleware()` into a spec.

    Raises:
        InvalidArgumentError: If `arg` is not None, a non-empty string,
            a callable or a spec.
    """
    if isinstance(arg, (FromFactory, FromProperty, Default)):
        return arg
    if arg is None:
        return Default()
    if isinstance(arg, str):
        if not arg:
            raise InvalidArgumentError("expected middleware property name to be a non-empty string")
        return FromProperty(arg)
    if callable(arg):
        return FromFactory(arg)
    raise InvalidArgumentError(
        f"expected middleware argument to be a function or a property name, got {type(arg).__name__}"
    )


def item_identity(item: Any) -> Any:
    """Return the identifying path/value of a pipeline item.

    Uses the item's `path` attribute or mapping key when present, converting
    path objects to strings; otherwise the item itself.
    """
    if isinstance(item, PurePath):
        return str(item)
    if isinstance(item, Mapping):
        value = item.get("path", item)
    else:
        value = getattr(item, "path", item)
    if isinstance(value, PurePath):
        return str(value)
    return value


def build_middleware(spec: MiddlewareSpec, store: "ReporterStore") -> Middleware:
    """Create the middleware described by `spec`, bound to `store`.

    Raises:
        InvalidArgumentError: If a factory returns something that is not callable.
    """
    if isinstance(spec, FromFactory):
        middleware = spec.factory(store)
        if not callable(middleware):
            raise InvalidArgumentError("expected middleware factory to return a function")
        return middleware

    return _accumulator(store, spec.name)


def _accumulator(store: "ReporterStore", name: str) -> Middleware:
    def accumulate(item: Any, continuation: Continuation) -> None:
        try:
            store.union(name, item_identity(item))
        except Exception as e:
            LOGGER.warning(f"Failed to record item on '{name}': {e}")
        continuation()

    accumulate.__name__ = f"accumulate_{name}"
    return accumulate
