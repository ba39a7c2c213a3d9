"""Nested key/value storage with union-style accumulation.

Paths may be given as:
- a single key ("files")
- a dotted string ("stats.count")
- a sequence of keys (["stats", "count"])
"""

from __future__ import annotations

import copy
import threading
from typing import Any, Dict, List, Sequence, Tuple, Union

from base_reporter.core.errors import InvalidArgumentError

KeyPath = Union[str, Sequence[str]]

_MISSING = object()


def split_path(path: KeyPath) -> Tuple[str, ...]:
    """Normalize a key path into a tuple of keys.

    Raises:
        InvalidArgumentError: If the path is empty or contains non-string keys.
    """
    if isinstance(path, str):
        keys = tuple(path.split("."))
    else:
        keys = tuple(path)

    if not keys or any(not isinstance(k, str) or not k for k in keys):
        raise InvalidArgumentError(f"Invalid key path: {path!r}")
    return keys


class KeyValueStore:
    """Thread-safe nested key/value store.

    `union` never overwrites: it creates a list when nothing is stored at
    the path and appends to it otherwise, skipping values already present.
    """

    def __init__(self, initial: Dict[str, Any] | None = None) -> None:
        self._data: Dict[str, Any] = dict(initial or {})
        self._lock = threading.RLock()

    def get(self, path: KeyPath, default: Any = None) -> Any:
        """Return the value stored at `path`, or `default`."""
        with self._lock:
            node: Any = self._data
            for key in split_path(path):
                if not isinstance(node, dict) or key not in node:
                    return default
                node = node[key]
            return node

    def has(self, path: KeyPath) -> bool:
        return self.get(path, _MISSING) is not _MISSING

    def set(self, path: KeyPath, value: Any) -> "KeyValueStore":
        """Store `value` at `path`, creating intermediate mappings.

        Raises:
            InvalidArgumentError: If a key along the path holds a non-mapping value.
        """
        with self._lock:
            parent, key = self._parent(path)
            parent[key] = value
        return self

    def delete(self, path: KeyPath) -> bool:
        """Remove the value at `path`. Returns True if something was removed."""
        keys = split_path(path)
        with self._lock:
            node: Any = self._data
            for key in keys[:-1]:
                if not isinstance(node, dict) or key not in node:
                    return False
                node = node[key]
            if isinstance(node, dict) and keys[-1] in node:
                del node[keys[-1]]
                return True
            return False

    def union(self, path: KeyPath, value: Any) -> "KeyValueStore":
        """Append `value` to the list at `path`, creating it if absent.

        Lists and tuples are flattened into the stored list. Values equal to
        one already stored are not appended twice. A scalar already stored at
        `path` is kept as the first element of the new list.

        Raises:
            InvalidArgumentError: If a key along the path holds a non-mapping value.
        """
        values = list(value) if isinstance(value, (list, tuple)) else [value]
        with self._lock:
            parent, key = self._parent(path)
            current = parent.get(key, _MISSING)
            if current is _MISSING or current is None:
                items: List[Any] = []
            elif isinstance(current, list):
                items = current
            else:
                items = [current]
            for item in values:
                if item not in items:
                    items.append(item)
            parent[key] = items
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Return a deep copy of the stored data."""
        with self._lock:
            return copy.deepcopy(self._data)

    def _parent(self, path: KeyPath) -> Tuple[Dict[str, Any], str]:
        keys = split_path(path)
        node = self._data
        for depth, key in enumerate(keys[:-1]):
            child = node.get(key, _MISSING)
            if child is _MISSING or child is None:
                child = {}
                node[key] = child
            elif not isinstance(child, dict):
                prefix = ".".join(keys[: depth + 1])
                raise InvalidArgumentError(
                    f"Cannot write {'.'.join(keys)!r}: {prefix!r} holds a {type(child).__name__}"
                )
            node = child
        return node, keys[-1]

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and self.has(path)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"
