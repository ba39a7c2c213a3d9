"""File items and directory walking with gitignore-style exclusion.

Uses the pathspec library for gitignore-compliant matching, including
`**` globbing, `!` negation and `#` comments.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

import pathspec

from base_reporter.core.logging import get_logger

LOGGER = get_logger(__name__)


@dataclass
class FileItem:
    """A file flowing through the pipeline."""

    path: Path
    root: Optional[Path] = None

    @property
    def relative_path(self) -> Path:
        if self.root is None:
            return self.path
        try:
            return self.path.relative_to(self.root)
        except ValueError:
            return self.path


def build_spec(patterns: Iterable[str]) -> pathspec.PathSpec:
    clean_patterns: List[str] = [
        p for p in patterns if p.strip() and not p.strip().startswith("#")
    ]
    return pathspec.PathSpec.from_lines(
        "gitwildmatch",
        clean_patterns,
    )


def iter_files(root: Path, ignore: Optional[Iterable[str]] = None) -> Iterator[FileItem]:
    """Yield a FileItem for every file under `root`, in sorted order.

    Args:
        root: Directory to walk.
        ignore: Gitignore-style patterns, matched against paths relative to root.
    """
    root = Path(root)
    spec = build_spec(ignore or [])

    for dirpath, dirnames, filenames in os.walk(root):
        rel_dir = Path(dirpath).relative_to(root)
        dirnames[:] = sorted(
            d for d in dirnames
            if not spec.match_file((rel_dir / d).as_posix() + "/")
        )
        for filename in sorted(filenames):
            rel = (rel_dir / filename).as_posix()
            if spec.match_file(rel):
                LOGGER.debug(f"Ignoring {rel}")
                continue
            yield FileItem(path=Path(dirpath) / filename, root=root)
