"""Tests for debug mode functionality."""

import importlib

from relgraph.diagnostics import debug_context, is_debug_enabled, set_debug_enabled


def test_debug_mode_toggle_and_context() -> None:
    """Test debug mode toggling and context manager."""
    original = is_debug_enabled()

    try:
        set_debug_enabled(False)
        assert not is_debug_enabled()

        with debug_context(True):
            assert is_debug_enabled()

        assert not is_debug_enabled()

        set_debug_enabled(True)
        assert is_debug_enabled()

        with debug_context(False):
            assert not is_debug_enabled()

        assert is_debug_enabled()
    finally:
        set_debug_enabled(original)


def test_debug_context_nested() -> None:
    """Test nested debug contexts."""
    original = is_debug_enabled()

    try:
        set_debug_enabled(False)

        with debug_context(True):
            assert is_debug_enabled()

            with debug_context(False):
                assert not is_debug_enabled()

            assert is_debug_enabled()

        assert not is_debug_enabled()
    finally:
        set_debug_enabled(original)


def test_debug_env_var(monkeypatch) -> None:
    """Test that RELGRAPH_DEBUG seeds debug mode at import."""
    from relgraph.diagnostics import debug_mode

    try:
        monkeypatch.setenv("RELGRAPH_DEBUG", "yes")
        assert importlib.reload(debug_mode).is_debug_enabled()

        monkeypatch.setenv("RELGRAPH_DEBUG", "0")
        assert not importlib.reload(debug_mode).is_debug_enabled()
    finally:
        monkeypatch.delenv("RELGRAPH_DEBUG", raising=False)
        importlib.reload(debug_mode)


def test_debug_env_var_values(monkeypatch) -> None:
    """Test which RELGRAPH_DEBUG values switch debug mode on."""
    from relgraph.diagnostics import debug_mode

    try:
        for value, expected in [(" On ", True), ("TRUE", True), ("", False), ("off", False)]:
            monkeypatch.setenv(debug_mode.ENV_VAR, value)
            assert importlib.reload(debug_mode).is_debug_enabled() is expected
    finally:
        monkeypatch.delenv(debug_mode.ENV_VAR, raising=False)
        importlib.reload(debug_mode)
