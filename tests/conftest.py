"""Shared pytest fixtures and test helpers for fieldctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from fieldctl.config.settings import FieldctlSettings
from fieldctl.domain.fields import FIELD_REGISTRY


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_field_registry() -> Generator[None]:
    """Undo field types registered by a test (config sections, plugins)."""
    snapshot = dict(FIELD_REGISTRY)
    yield
    FIELD_REGISTRY.clear()
    FIELD_REGISTRY.update(snapshot)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after CLI invocations reconfigure it."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    fieldctl_logger = logging.getLogger("fieldctl")
    fieldctl_level = fieldctl_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    fieldctl_logger.setLevel(fieldctl_level)


@pytest.fixture
def project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary project directory with no config file in effect."""
    monkeypatch.delenv("FIELDCTL_CONFIG", raising=False)
    return tmp_path


@pytest.fixture
def settings(project_root: Path) -> FieldctlSettings:
    """Default settings rooted at a temporary project directory."""
    return FieldctlSettings.from_cli(project_root=project_root)


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp project root so the CLI sees no stray config.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command test
    classes. Tests that need the path can also request ``tmp_path`` directly
    (pytest deduplicates — it's the same directory).
    """
    monkeypatch.chdir(project_root)
