"""Exceptions raised by base_reporter."""

from __future__ import annotations


class ReporterError(Exception):
    """Base class for all reporter errors."""

    pass


class InvalidArgumentError(ReporterError, TypeError):
    """A required argument has the wrong type (e.g. is not callable)."""

    pass


class NotFoundError(ReporterError, LookupError):
    """No callable reporter is registered under the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'Unable to find reporter "{name}"')


class ConfigError(ReporterError):
    """Reporter options could not be loaded or parsed."""

    pass


class PipelineError(ReporterError):
    """A middleware broke the pipeline's continuation contract."""

    pass
