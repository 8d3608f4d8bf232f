"""Applies a ``ProjectConfig`` to a cloned project template.

Steps run strictly in order: manifest, README, directories, stack extras,
git.  Every file-system failure surfaces as a ``SetupError`` naming the step
that failed.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from pathlib import Path

from template_setup.config import ProjectConfig, SetupConfig, TechStack
from template_setup.customizer.git import initialize_repository
from template_setup.customizer.manifest import ManifestWriter, select_manifest_writer
from template_setup.customizer.stacks import PYTHON_REQUIREMENTS, get_preset
from template_setup.customizer.templates import TemplateRenderer
from template_setup.errors import SetupError
from template_setup.utils import ensure_dir, print_step


@dataclass
class SetupResult:
    """What a setup run changed."""

    manifest_strategy: str = ""
    written_files: list[Path] = field(default_factory=list)
    directories: list[Path] = field(default_factory=list)
    git_initialized: bool = False
    warnings: list[str] = field(default_factory=list)


class TemplateCustomizer:
    """Rewrites template files from a ``ProjectConfig``.

    The README and requirements file are regenerated wholesale on every run;
    nothing from their previous contents is kept.
    """

    def __init__(
        self,
        project: ProjectConfig,
        settings: SetupConfig | None = None,
        manifest_writer: ManifestWriter | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.project = project
        self.settings = settings or SetupConfig()
        self.manifest_writer = manifest_writer or select_manifest_writer(
            self.settings.jq_binary
        )
        self.renderer = renderer or TemplateRenderer()

    # -- Public API --------------------------------------------------------

    async def apply(self) -> SetupResult:
        """Run every setup step and return what changed."""
        result = SetupResult(manifest_strategy=self.manifest_writer.name)

        await self.render_manifest(result)
        await self.render_readme(result)
        await self.ensure_directories(result)
        await self.apply_tech_stack_extras(result)
        if self.settings.init_git:
            await self.initialize_repository(result)

        return result

    # -- Steps -------------------------------------------------------------

    async def render_manifest(self, result: SetupResult) -> None:
        """Write name, description and author into ``package.json``."""
        path = self.settings.manifest_path
        print_step(f"Updating {self.settings.manifest_file}...")
        changed = await self.manifest_writer.update_metadata(path, self.project)
        if changed == 0:
            result.warnings.append(
                f"{path} has none of the template placeholders; metadata left unchanged"
            )
        else:
            result.written_files.append(path)

    async def render_readme(self, result: SetupResult) -> None:
        """Overwrite the README from the template."""
        path = self.settings.readme_path
        print_step(f"Updating {self.settings.readme_file}...")
        written = await self._render("README.md.j2", path, self.project.as_context(), "readme")
        result.written_files.append(written)

    async def ensure_directories(self, result: SetupResult) -> None:
        """Create the configured directories; existing ones are left alone."""
        print_step("Creating project directories...")
        root = self.settings.project_dir
        for rel in self.settings.directories:
            try:
                path = await asyncio.to_thread(ensure_dir, root / rel)
            except OSError as exc:
                raise SetupError("directories", f"Cannot create {root / rel}: {exc}") from exc
            result.directories.append(path)

    async def apply_tech_stack_extras(self, result: SetupResult) -> None:
        """Write the python requirements file or trim node-api scripts."""
        preset = get_preset(self.project.tech_stack)

        if preset.writes_requirements:
            print_step("Setting up Python stack...")
            path = self.settings.requirements_path
            written = await self._render(
                "requirements.txt.j2",
                path,
                {"requirements": PYTHON_REQUIREMENTS},
                "stack",
            )
            result.written_files.append(written)

        if preset.removed_scripts:
            print_step("Setting up Node.js API stack...")
            removed = await self.manifest_writer.remove_scripts(
                self.settings.manifest_path, preset.removed_scripts
            )
            if not removed:
                result.warnings.append(
                    "jq is not installed; frontend scripts were left in "
                    f"{self.settings.manifest_file}"
                )

    async def initialize_repository(self, result: SetupResult) -> None:
        """Initialise git with a first commit unless a repository exists."""
        print_step("Setting up Git repository...")
        result.git_initialized = await initialize_repository(
            self.settings.project_dir,
            self.project.name,
            timeout=self.settings.git_timeout,
        )

    # -- Helpers -----------------------------------------------------------

    async def _render(
        self, template: str, path: Path, context: dict, step: str
    ) -> Path:
        try:
            return await self.renderer.render_to_file(template, path, context)
        except OSError as exc:
            raise SetupError(step, f"Cannot write {path}: {exc}") from exc


def next_steps(stack: TechStack) -> list[str]:
    """Follow-up instructions printed after a successful run."""
    install = "npm install"
    if stack in (TechStack.PYTHON, TechStack.PYTHON_ONLY):
        install = "npm install (and pip install -r requirements.txt for Python code)"
    return [
        "Edit .env file with your configuration",
        "Update the repository URL in package.json",
        f"Install dependencies: {install}",
        "Start development: npm run dev",
        "Begin building your AI project!",
    ]
