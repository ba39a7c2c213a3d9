"""Logger access for base_reporter modules.

The package only emits records; configuring handlers and levels is left to
the embedding application.
"""

from __future__ import annotations

import logging
from typing import Optional


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-level logger."""

    return logging.getLogger(name if name is not None else __name__)
