"""Report functions contributed by installed packages.

Packages register report functions via Python entry points
(base_reporter.reporters group).
"""

from base_reporter.plugins.discovery import (
    REPORTER_ENTRY_POINT_GROUP,
    discover_reporters,
    list_available_reporters,
)

__all__ = [
    "REPORTER_ENTRY_POINT_GROUP",
    "discover_reporters",
    "list_available_reporters",
]
