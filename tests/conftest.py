"""Shared pytest fixtures for the template-setup test suite.

Provides reusable fixtures for:
- A temporary copy of the project template (package.json + README)
- A recording Rich console with scripted answers
- Mock subprocess helpers
"""

from __future__ import annotations

import asyncio
import io
import json
from pathlib import Path
from typing import Any, Callable
from unittest.mock import AsyncMock, MagicMock

import pytest
from rich.console import Console

from template_setup.config import ProjectConfig, SetupConfig, TechStack


# ---------------------------------------------------------------------------
# Template fixtures
# ---------------------------------------------------------------------------

TEMPLATE_MANIFEST: dict[str, Any] = {
    "name": "ai-project-template",
    "version": "1.0.0",
    "description": "A comprehensive template for AI-powered projects with modern development practices",
    "author": "Your Name <your.email@example.com>",
    "license": "MIT",
    "scripts": {
        "dev": "concurrently \"npm run dev:frontend\" \"npm run dev:backend\"",
        "dev:frontend": "vite",
        "dev:backend": "nodemon src/server.js",
        "build:frontend": "vite build",
        "test": "jest",
    },
}


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """A freshly cloned template: package.json and the stock README."""
    root = tmp_path / "ai-project-template"
    root.mkdir()
    (root / "package.json").write_text(
        json.dumps(TEMPLATE_MANIFEST, indent=2) + "\n", encoding="utf-8"
    )
    (root / "README.md").write_text("# AI Project Template\n\nStock README.\n", encoding="utf-8")
    return root


@pytest.fixture
def settings(template_dir: Path) -> SetupConfig:
    """Settings pointing at ``template_dir`` with git disabled."""
    return SetupConfig(project_dir=template_dir, init_git=False)


@pytest.fixture
def widget_project() -> ProjectConfig:
    return ProjectConfig(
        name="widget-ai",
        description="Widgets, but smarter",
        author_name="Ada Lovelace",
        author_email="ada@example.com",
        tech_stack=TechStack.PYTHON,
    )


# ---------------------------------------------------------------------------
# Console fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def recording_console(monkeypatch: pytest.MonkeyPatch) -> Console:
    """A Console writing to memory, installed wherever output is printed.

    Read the output with ``recording_console.file.getvalue()``.
    """
    rec = Console(file=io.StringIO(), force_terminal=False, color_system=None, width=200)
    monkeypatch.setattr("template_setup.utils.console", rec)
    monkeypatch.setattr("template_setup.cli.console", rec)
    return rec


@pytest.fixture
def answer(recording_console: Console) -> Callable[..., MagicMock]:
    """Script the answers returned by ``console.input``.

    Usage:
        def test_prompt(answer, recording_console):
            answer("widget-ai", "", "2")
    """
    def factory(*answers: str | BaseException) -> MagicMock:
        mock_input = MagicMock(side_effect=list(answers))
        recording_console.input = mock_input
        return mock_input

    return factory


# ---------------------------------------------------------------------------
# Subprocess fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_subprocess():
    """Mock asyncio subprocess for testing command execution.

    Returns a factory that creates mock subprocess instances with configurable
    stdout, stderr, and return codes.

    Usage:
        def test_command(mock_subprocess):
            proc = mock_subprocess(stdout="output", returncode=0)
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
def timing_out_wait_for():
    """Stand-in for ``asyncio.wait_for`` that always times out.

    The awaitable is closed so no coroutine is left un-awaited.
    """
    async def _wait_for(awaitable, timeout=None):
        awaitable.close()
        raise asyncio.TimeoutError

    return _wait_for
