"""Install a reporter on a host application."""

from __future__ import annotations

from typing import Callable

from base_reporter.config.loader import OptionsSource, resolve_options
from base_reporter.core.logging import get_logger
from base_reporter.facade import ReporterFacade
from base_reporter.host import Host
from base_reporter.store import ReporterStore

LOGGER = get_logger(__name__)

CAPABILITY_NAME = "base-reporter"
PROPERTY_NAME = "reporter"


def install(host: Host, config: OptionsSource = None) -> None:
    """Equip `host` with a reporter, exposed as `host.reporter`.

    Installing again on an equipped host does nothing.

    Args:
        host: Application instance to equip.
        config: Base options for every report, as a mapping or a YAML file path.
    """
    if host.is_equipped_with(CAPABILITY_NAME):
        LOGGER.debug(f"Host already equipped with '{CAPABILITY_NAME}', skipping")
        return

    store = ReporterStore(host, resolve_options(config))
    host.mark_equipped(CAPABILITY_NAME)
    host.attach(PROPERTY_NAME, ReporterFacade(store))
    LOGGER.debug(f"Installed '{CAPABILITY_NAME}' as '{PROPERTY_NAME}'")


def reporter(config: OptionsSource = None) -> Callable[[Host], None]:
    """Return a plugin that installs a reporter, for use with `App.use`."""

    def plugin(host: Host) -> None:
        install(host, config)

    return plugin
