"""Reporter options handling."""

from base_reporter.config.loader import (
    expand_env_vars,
    load_options,
    merge_options,
    resolve_options,
)

__all__ = [
    "expand_env_vars",
    "load_options",
    "merge_options",
    "resolve_options",
]
