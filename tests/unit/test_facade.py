"""Tests for the reporter facade."""

from __future__ import annotations

from typing import Any, Dict, List
from unittest.mock import MagicMock, patch

import pytest

from base_reporter import App, InvalidArgumentError, NotFoundError, ReporterStore, reporter


class TestAdd:
    """Tests for ReporterFacade.add."""

    def test_adds_reporter_to_cache(self, equipped_app: App) -> None:
        """Test that add() registers the function by name."""
        equipped_app.reporter.add("foo", lambda store, options: None)
        assert callable(equipped_app.reporter.reporters["foo"])

    def test_is_chainable(self, equipped_app: App) -> None:
        """Test that add() returns the facade."""
        facade = equipped_app.reporter
        assert facade.add("foo", lambda store, options: None) is facade

    def test_overwrites_existing_name(self, equipped_app: App) -> None:
        """Test that re-adding a name replaces the function."""
        calls: List[str] = []
        equipped_app.reporter.add("foo", lambda store, options: calls.append("first"))
        equipped_app.reporter.add("foo", lambda store, options: calls.append("second"))

        equipped_app.reporter.report("foo")

        assert calls == ["second"]
        assert equipped_app.reporter.names() == ["foo"]

    def test_rejects_non_callable(self, equipped_app: App) -> None:
        """Test that a non-callable reporter raises InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            equipped_app.reporter.add("foo", "not a function")  # type: ignore[arg-type]

    @pytest.mark.parametrize("name", ["", None, 42])
    def test_rejects_invalid_name(self, equipped_app: App, name: Any) -> None:
        """Test that names must be non-empty strings."""
        with pytest.raises(InvalidArgumentError):
            equipped_app.reporter.add(name, lambda store, options: None)


class TestReport:
    """Tests for ReporterFacade.report."""

    def test_runs_registered_reporter(self, equipped_app: App) -> None:
        """Test that report() invokes the function exactly once."""
        fn = MagicMock()
        equipped_app.reporter.add("foo", fn)

        equipped_app.reporter.report("foo")

        fn.assert_called_once()
        store, options = fn.call_args.args
        assert store is equipped_app.reporter.cache
        assert options == {}

    def test_is_chainable(self, equipped_app: App) -> None:
        """Test that report() returns the facade."""
        facade = equipped_app.reporter.add("foo", lambda store, options: None)
        assert facade.report("foo") is facade

    def test_raises_for_unregistered_reporter(self, equipped_app: App) -> None:
        """Test that an unknown name raises NotFoundError."""
        fn = MagicMock()
        equipped_app.reporter.add("foo", fn)

        with pytest.raises(NotFoundError) as exc_info:
            equipped_app.reporter.report("bar")

        assert str(exc_info.value) == 'Unable to find reporter "bar"'
        assert exc_info.value.name == "bar"
        fn.assert_not_called()

    def test_raises_for_non_callable_entry(self, equipped_app: App) -> None:
        """Test that an entry replaced with a non-callable is not run."""
        equipped_app.reporter.reporters["foo"] = None  # type: ignore[assignment]
        assert not equipped_app.reporter.has("foo")
        with pytest.raises(NotFoundError):
            equipped_app.reporter.report("foo")

    @pytest.mark.parametrize("name", [["foo"], None, 42])
    def test_rejects_non_string_name(self, equipped_app: App, name: Any) -> None:
        """Test that an unusable name raises InvalidArgumentError, not a raw TypeError."""
        fn = MagicMock()
        equipped_app.reporter.add("foo", fn)

        with pytest.raises(InvalidArgumentError):
            equipped_app.reporter.report(name)

        assert not equipped_app.reporter.has(name)
        fn.assert_not_called()

    def test_merges_options(self, app: App) -> None:
        """Test that call options override install options key by key."""
        app.use(reporter({"foo": "bar", "bar": "qux"}))
        received: List[Dict[str, Any]] = []
        app.reporter.add("foo", lambda store, options: received.append(options))

        app.reporter.report("foo", {"foo": "baz", "beep": "boop"})

        assert received == [{"foo": "baz", "bar": "qux", "beep": "boop"}]

    def test_merge_does_not_change_store_options(self, app: App) -> None:
        """Test that per-call options never leak into the base options."""
        app.use(reporter({"foo": "bar"}))
        app.reporter.add("foo", lambda store, options: None)

        app.reporter.report("foo", {"foo": "baz"})

        assert app.reporter.cache.options == {"foo": "bar"}

    def test_errors_propagate_and_store_survives(self, equipped_app: App) -> None:
        """Test that reporter errors reach the caller and later reports still run."""

        def broken(store: ReporterStore, options: Dict[str, Any]) -> None:
            raise RuntimeError("boom")

        fn = MagicMock()
        equipped_app.reporter.add("broken", broken).add("ok", fn)

        with pytest.raises(RuntimeError, match="boom"):
            equipped_app.reporter.report("broken")

        equipped_app.reporter.report("ok")
        fn.assert_called_once()


class TestDirectCall:
    """Tests for calling the facade directly."""

    def test_returns_function_result(self, equipped_app: App) -> None:
        """Test that the facade returns fn(store)."""
        equipped_app.reporter.cache.set("count", 2)
        result = equipped_app.reporter(lambda store: store.get("count") * 10)
        assert result == 20

    def test_passes_store(self, equipped_app: App) -> None:
        """Test that fn receives the store."""
        assert equipped_app.reporter(lambda store: store) is equipped_app.reporter.cache

    def test_rejects_non_callable(self, equipped_app: App) -> None:
        """Test that a non-callable argument raises InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            equipped_app.reporter("foo")  # type: ignore[arg-type]


class TestLoadPlugins:
    """Tests for registering entry point reporters."""

    def test_registers_discovered_reporters(self, equipped_app: App) -> None:
        """Test that discovered functions are added by name."""
        fn = MagicMock()
        with patch(
            "base_reporter.facade.discover_reporters", return_value={"summary": fn}
        ) as mock_discover:
            result = equipped_app.reporter.load_plugins()

        assert result is equipped_app.reporter
        mock_discover.assert_called_once_with("base_reporter.reporters")
        equipped_app.reporter.report("summary")
        fn.assert_called_once()
