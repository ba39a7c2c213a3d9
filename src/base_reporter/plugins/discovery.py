"""Report function discovery via Python entry points."""

from __future__ import annotations

from importlib.metadata import entry_points
from typing import Callable, Dict, List

from base_reporter.core.logging import get_logger

LOGGER = get_logger(__name__)

REPORTER_ENTRY_POINT_GROUP = "base_reporter.reporters"


def discover_reporters(group: str = REPORTER_ENTRY_POINT_GROUP) -> Dict[str, Callable]:
    """Discover all installed report functions for an entry point group.

    Packages register report functions in their pyproject.toml:

        [project.entry-points."base_reporter.reporters"]
        summary = "mypackage.reports:summary"

    Args:
        group: Entry point group name.

    Returns:
        Dictionary mapping report names to report functions.
    """
    reporters: Dict[str, Callable] = {}

    for ep in entry_points(group=group):
        try:
            fn = ep.load()
        except Exception as e:
            LOGGER.warning(f"Failed to load reporter '{ep.name}': {e}")
            continue
        if not callable(fn):
            LOGGER.warning(f"Reporter '{ep.name}' is not callable, skipping")
            continue
        reporters[ep.name] = fn
        LOGGER.debug(f"Discovered reporter: {ep.name} (group: {group})")

    return reporters


def list_available_reporters(group: str = REPORTER_ENTRY_POINT_GROUP) -> List[str]:
    """List names of all discoverable report functions in a group."""
    return list(discover_reporters(group).keys())
