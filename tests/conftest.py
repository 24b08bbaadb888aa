"""Shared test fixtures for the domain-agent test suite."""

from collections.abc import Callable, Generator
from pathlib import Path

import pytest
import structlog


@pytest.fixture
def test_config_dir(tmp_path: Path) -> Path:
    """Create a temporary config directory for testing."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def mock_toml_files(test_config_dir: Path) -> Callable[[dict[str, str]], None]:
    """Factory fixture to create TOML files in the test config directory.

    Usage:
        def test_something(mock_toml_files):
            mock_toml_files({
                "default.toml": "app_name = 'test'",
                "test.toml": "app_name = 'override'",
            })
    """

    def _create_toml_files(files: dict[str, str]) -> None:
        for filename, content in files.items():
            (test_config_dir / filename).write_text(content)

    return _create_toml_files


@pytest.fixture
def isolated_config(
    test_config_dir: Path, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Point configuration loading at an empty temporary directory."""
    monkeypatch.setenv("DOMAIN_AGENT_CONFIG_DIR", str(test_config_dir))
    monkeypatch.setenv("DOMAIN_AGENT_ENV", "test")
    return test_config_dir


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Clear the settings cache before and after each test.

    This ensures test isolation for configuration tests.
    """
    from domain_agent.config import get_settings
    from domain_agent.config.settings import set_toml_config

    get_settings.cache_clear()
    set_toml_config({})
    yield
    get_settings.cache_clear()
    set_toml_config({})


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Restore structlog defaults so no test inherits another's output stream."""
    yield
    structlog.reset_defaults()
