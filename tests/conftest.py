"""
Pytest configuration and fixtures for avpath tests.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator
from unittest.mock import patch

import pytest

from avpath.config import Settings, clear_settings_cache, get_settings


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    """Provide a temporary directory for test outputs."""
    return tmp_path


@pytest.fixture
def mock_env_vars(temp_dir: Path) -> Generator[dict[str, str], None, None]:
    """Provide a complete AVPATH_* environment pointing into temp_dir."""
    env_vars = {
        "AVPATH_AUTHORITY_STYLE": "unc",
        "AVPATH_SUBPATH_MAX_LENGTH": "32",
        "AVPATH_APP_NAME": "testapp",
        "AVPATH_DATA_DIR": str(temp_dir / "data"),
        "AVPATH_DOCUMENTS_DIR": str(temp_dir / "documents"),
        "AVPATH_TEMP_DIR": str(temp_dir / "tmp"),
        "AVPATH_LOG_LEVEL": "DEBUG",
    }

    with patch.dict(os.environ, env_vars, clear=False):
        clear_settings_cache()
        yield env_vars


@pytest.fixture
def mock_settings(mock_env_vars: dict[str, str]) -> Generator[Settings, None, None]:
    """Provide the Settings instance built from mock_env_vars."""
    settings = get_settings()
    yield settings
    clear_settings_cache()


@pytest.fixture
def clean_env() -> Generator[None, None, None]:
    """Remove every AVPATH_* variable so defaults apply."""
    env = {k: v for k, v in os.environ.items() if not k.startswith("AVPATH_")}
    with patch.dict(os.environ, env, clear=True):
        clear_settings_cache()
        yield


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Automatically reset settings cache before and after each test."""
    clear_settings_cache()
    yield
    clear_settings_cache()
