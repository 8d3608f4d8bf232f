"""Template setup configuration.

Typed configuration for the customiser. ``ProjectConfig`` is the metadata the
user supplies; ``SetupConfig`` holds tool-level settings (file names, the
directory list, external binaries). Both are Pydantic v2 models so they are
validated at construction time.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Defaults offered at each prompt
# ---------------------------------------------------------------------------

DEFAULT_PROJECT_NAME = "my-ai-project"
DEFAULT_DESCRIPTION = "An AI-powered application built with modern development practices"
DEFAULT_AUTHOR = "Your Name"
DEFAULT_EMAIL = "your.email@example.com"

DEFAULT_DIRECTORIES: list[str] = [
    "src/components",
    "src/services",
    "src/utils",
    "src/types",
    "data/raw",
    "data/processed",
    "models",
    "config",
]


class TechStack(str, Enum):
    """Technology stack presets offered by the setup menu."""

    NODE = "node"
    PYTHON = "python"
    NODE_API = "node-api"
    PYTHON_ONLY = "python-only"
    CUSTOM = "custom"


DEFAULT_TECH_STACK = TechStack.NODE


class ProjectConfig(BaseModel):
    """Project metadata collected before anything is written.

    Frozen: built once by the prompts (or CLI flags) and handed to every
    rendering step unchanged.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(default=DEFAULT_PROJECT_NAME)
    description: str = Field(default=DEFAULT_DESCRIPTION)
    author_name: str = Field(default=DEFAULT_AUTHOR)
    author_email: str = Field(default=DEFAULT_EMAIL)
    tech_stack: TechStack = Field(default=DEFAULT_TECH_STACK)

    @property
    def author(self) -> str:
        """Author in ``package.json`` form: ``Name <email>``."""
        return f"{self.author_name} <{self.author_email}>"

    def as_context(self) -> dict[str, Any]:
        """Return the Jinja2 context used by the file templates."""
        return {
            "project_name": self.name,
            "description": self.description,
            "author_name": self.author_name,
            "author_email": self.author_email,
            "author": self.author,
            "tech_stack": self.tech_stack.value,
        }


class SetupConfig(BaseModel):
    """Tool-level settings for a setup run."""

    project_dir: Path = Field(default=Path("."))
    manifest_file: str = Field(default="package.json")
    readme_file: str = Field(default="README.md")
    requirements_file: str = Field(default="requirements.txt")
    directories: list[str] = Field(default_factory=lambda: list(DEFAULT_DIRECTORIES))
    jq_binary: str = Field(default="jq")
    init_git: bool = Field(default=True)
    git_timeout: int = Field(default=60, ge=1, description="Per git command timeout in seconds")

    # ------------------------------------------------------------------
    # Derived paths
    # ------------------------------------------------------------------

    @property
    def manifest_path(self) -> Path:
        """Path to the dependency manifest (``package.json``)."""
        return self.project_dir / self.manifest_file

    @property
    def readme_path(self) -> Path:
        return self.project_dir / self.readme_file

    @property
    def requirements_path(self) -> Path:
        """Path of the requirements file written by the python preset."""
        return self.project_dir / self.requirements_file

    @classmethod
    def from_env(cls) -> "SetupConfig":
        """Build a ``SetupConfig`` from environment variables.

        Recognised variables (all optional):
            TEMPLATE_SETUP_DIR, TEMPLATE_SETUP_JQ, TEMPLATE_SETUP_NO_GIT,
            TEMPLATE_SETUP_GIT_TIMEOUT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("TEMPLATE_SETUP_DIR"):
            kwargs["project_dir"] = Path(os.environ["TEMPLATE_SETUP_DIR"])
        if os.environ.get("TEMPLATE_SETUP_JQ"):
            kwargs["jq_binary"] = os.environ["TEMPLATE_SETUP_JQ"]
        if os.environ.get("TEMPLATE_SETUP_NO_GIT", "").lower() in ("1", "true", "yes"):
            kwargs["init_git"] = False
        if os.environ.get("TEMPLATE_SETUP_GIT_TIMEOUT"):
            kwargs["git_timeout"] = int(os.environ["TEMPLATE_SETUP_GIT_TIMEOUT"])
        return cls(**kwargs)
