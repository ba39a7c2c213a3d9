"""Reporter options loading and merging.

Options may be supplied as:
- a mapping passed directly to `install`
- a YAML file containing a mapping
Environment variables in YAML string values are expanded (${VAR}, ${VAR:-default}).
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from base_reporter.core.errors import ConfigError
from base_reporter.core.logging import get_logger

LOGGER = get_logger(__name__)

# Environment variable pattern: ${VAR} or ${VAR:-default}
ENV_VAR_PATTERN = re.compile(r"\$\{([^}:]+)(?::-([^}]*))?\}")

OptionsSource = Union[None, Mapping[str, Any], str, Path]


def resolve_options(config: OptionsSource) -> Dict[str, Any]:
    """Turn an options source into a fresh dict.

    Args:
        config: None, a mapping (shallow-copied) or a path to a YAML file.

    Returns:
        New options dictionary.

    Raises:
        ConfigError: If a file cannot be loaded or the source has the wrong type.
    """
    if config is None:
        return {}
    if isinstance(config, (str, Path)):
        return load_options(Path(config))
    if isinstance(config, Mapping):
        return dict(config)
    raise ConfigError(f"Reporter options must be a mapping or a path, got {type(config).__name__}")


def load_options(path: Path) -> Dict[str, Any]:
    """Load reporter options from a YAML file.

    Raises:
        ConfigError: If the file is missing, is invalid YAML or is not a mapping.
    """
    if not path.exists():
        raise ConfigError(f"Options file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigError(f"Options file must be a YAML mapping, got {type(data).__name__}")

    LOGGER.debug(f"Loaded reporter options from {path}")
    return expand_env_vars(data)


def expand_env_vars(data: Any) -> Any:
    """Substitute ${VAR} references inside a loaded reporter options mapping.

    Mapping keys are left alone; strings nested in lists and mappings are
    rewritten. Unset variables without a default become empty strings.
    """
    if isinstance(data, dict):
        return {k: expand_env_vars(v) for k, v in data.items()}
    elif isinstance(data, list):
        return [expand_env_vars(item) for item in data]
    elif isinstance(data, str):
        return ENV_VAR_PATTERN.sub(_env_var_replacer, data)
    else:
        return data


def _env_var_replacer(match: re.Match[str]) -> str:
    """Resolve one ${VAR} or ${VAR:-default} reference for an option value."""
    var_name = match.group(1)
    default_value = match.group(2)

    value = os.environ.get(var_name)
    if value is not None:
        return value
    if default_value is not None:
        return default_value

    LOGGER.warning(f"Environment variable ${var_name} is not set and has no default")
    return ""


def merge_options(
    base: Mapping[str, Any],
    overlay: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """Shallow merge two option mappings, with overlay taking precedence.

    Nested mappings are replaced, not merged. Neither input is modified.
    """
    result = dict(base)
    if overlay:
        result.update(overlay)
    return result
