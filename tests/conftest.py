# tests/conftest.py

"""Shared pytest fixtures for all storefront tests."""

import logging
from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest

from src.config.settings import Settings


@pytest.fixture(autouse=True)
def isolated_logs_dir(tmp_path: Path) -> Generator[Path, None, None]:
    """Send per-run log files to a temp ``logs/`` dir and drop handlers."""
    logs_dir = tmp_path / "logs"
    with patch.object(Settings, "LOGS_DIR", logs_dir):
        yield logs_dir
    root_logger = logging.getLogger("storefront")
    for handler in list(root_logger.handlers):
        handler.close()
        root_logger.removeHandler(handler)
