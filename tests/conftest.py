"""Shared pytest fixtures for the create-my-react-app test suite.

Provides reusable fixtures for:
- Output directories and run configuration
- The default template catalog and content renderer
- Mock subprocess helpers for the install and git steps
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from react_starter.config import Config
from react_starter.scaffolder import ContentRenderer, TemplateCatalog, build_default_catalog


# ---------------------------------------------------------------------------
# Paths & configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Parent directory for generated projects (auto-cleanup)."""
    out = tmp_path / "output"
    out.mkdir()
    return out


@pytest.fixture
def config(output_dir: Path) -> Config:
    """Configuration that generates into ``output_dir`` without git."""
    return Config(output_dir=output_dir, install_command=["npm", "install"])


# ---------------------------------------------------------------------------
# Scaffolder collaborators
# ---------------------------------------------------------------------------

@pytest.fixture
def catalog() -> TemplateCatalog:
    """The built-in template catalog."""
    return build_default_catalog()


@pytest.fixture
def renderer() -> ContentRenderer:
    """Content renderer over the bundled templates."""
    return ContentRenderer()


# ---------------------------------------------------------------------------
# Mock Subprocess (generic)
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_subprocess():
    """Mock asyncio subprocess for testing command execution.

    Returns a factory that creates mock subprocess instances with configurable
    stderr and return codes.

    Usage:
        def test_command(mock_subprocess):
            proc = mock_subprocess(returncode=0)
            with patch("asyncio.create_subprocess_exec", return_value=proc):
                ...
    """
    def factory(
        stdout: str = "",
        stderr: str = "",
        returncode: int = 0,
    ) -> AsyncMock:
        mock_proc = AsyncMock()
        mock_proc.communicate = AsyncMock(
            return_value=(stdout.encode("utf-8"), stderr.encode("utf-8"))
        )
        mock_proc.returncode = returncode
        mock_proc.pid = 99999
        mock_proc.kill = MagicMock()
        mock_proc.wait = AsyncMock(return_value=returncode)
        return mock_proc

    return factory


@pytest.fixture
def successful_installer() -> MagicMock:
    """A ``DependencyInstaller`` stand-in whose install always succeeds."""
    installer = MagicMock()
    installer.install = AsyncMock(return_value=None)
    return installer
