"""
Root Pytest Fixtures.

Shared fixtures available to all test types.

Config Isolation:
    Every test gets its own empty config home through VESPA_CLI_HOME, so
    no test reads or writes the developer's ~/.vespa. Cached settings are
    cleared before and after each test.
"""

import logging
import logging.handlers
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog

from vespa_cli.core.config import clear_config_cache


# =============================================================================
# Config Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    """
    Point the CLI at an empty, per-test config home.

    Usage:
        def test_reads_target(config_home: Path):
            (config_home / "config.yaml").write_text("target: http://host:8080\\n")
    """
    home = tmp_path / "vespa-home"
    home.mkdir()
    monkeypatch.setenv("VESPA_CLI_HOME", str(home))
    monkeypatch.delenv("VESPA_CLI_TARGET", raising=False)
    monkeypatch.delenv("VESPA_CLI_TIMEOUT", raising=False)
    # Rich treats these as a terminal, which would turn on spinners.
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("TTY_COMPATIBLE", raising=False)
    clear_config_cache()
    yield home
    clear_config_cache()


# =============================================================================
# Logging Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None, None, None]:
    """Undo setup_logging() so handlers bound to captured streams do not leak."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if type(handler) in (logging.StreamHandler, logging.handlers.RotatingFileHandler):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)
    structlog.reset_defaults()
