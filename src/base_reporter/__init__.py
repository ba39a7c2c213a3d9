"""base_reporter - named reports and accumulating middleware for host applications.

Install the reporter on an application, register report functions and
collect state from a file pipeline:

    app = App()
    app.use(reporter({"title": "Files"}))
    pipeline = Pipeline([app.reporter.middleware()])
    pipeline.run(iter_files(Path("src")))
    app.reporter.add("list", lambda store, options: print(store.get("files")))
    app.reporter.report("list")
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from base_reporter.core.errors import (
    ConfigError,
    InvalidArgumentError,
    NotFoundError,
    PipelineError,
    ReporterError,
)
from base_reporter.facade import ReporterFacade
from base_reporter.host import App, Host
from base_reporter.middleware import Default, FromFactory, FromProperty
from base_reporter.pipeline import FileItem, Pipeline, iter_files
from base_reporter.plugin import CAPABILITY_NAME, PROPERTY_NAME, install, reporter
from base_reporter.store import ReporterStore

try:
    __version__ = version("base-reporter")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "App",
    "CAPABILITY_NAME",
    "ConfigError",
    "Default",
    "FileItem",
    "FromFactory",
    "FromProperty",
    "Host",
    "InvalidArgumentError",
    "NotFoundError",
    "PROPERTY_NAME",
    "Pipeline",
    "PipelineError",
    "ReporterError",
    "ReporterFacade",
    "ReporterStore",
    "install",
    "iter_files",
    "reporter",
]
