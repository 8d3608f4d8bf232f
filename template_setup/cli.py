"""Command-line entry point for the template customiser.

Usage::

    template-setup
    template-setup --project-name widget-ai --tech-stack python --yes
    python -m template_setup --dir ./my-clone
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Any

from template_setup.config import ProjectConfig, SetupConfig, TechStack
from template_setup.customizer.customizer import TemplateCustomizer, next_steps
from template_setup.customizer.prompts import collect_project_config, prompt_confirm
from template_setup.errors import SetupCancelled, SetupError
from template_setup.utils import (
    console,
    print_error,
    print_header,
    print_section,
    print_success,
    print_summary_table,
    print_warning,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="template-setup",
        description="Customise the AI project template for your project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  template-setup\n"
            "  template-setup --project-name widget-ai --tech-stack python\n"
            "  template-setup --project-name api --tech-stack node-api --yes --no-git\n"
        ),
    )
    parser.add_argument("--project-name", default=None, help="Project name")
    parser.add_argument("--description", default=None, help="Project description")
    parser.add_argument("--author", default=None, help="Author name")
    parser.add_argument("--email", default=None, help="Author email")
    parser.add_argument(
        "--tech-stack",
        default=None,
        choices=[s.value for s in TechStack],
        help="Technology stack preset",
    )
    parser.add_argument(
        "--dir",
        default=None,
        help="Template directory to customise (default: current directory)",
    )
    parser.add_argument(
        "--yes", "-y",
        action="store_true",
        help="Skip the confirmation prompt",
    )
    parser.add_argument(
        "--no-git",
        action="store_true",
        help="Do not initialise a git repository",
    )
    return parser


def _overrides(args: argparse.Namespace) -> dict[str, Any]:
    return {
        "name": args.project_name,
        "description": args.description,
        "author_name": args.author,
        "author_email": args.email,
        "tech_stack": args.tech_stack,
    }


def _settings(args: argparse.Namespace) -> SetupConfig:
    settings = SetupConfig.from_env()
    updates: dict[str, Any] = {}
    if args.dir:
        updates["project_dir"] = Path(args.dir)
    if args.no_git:
        updates["init_git"] = False
    return settings.model_copy(update=updates)


def _print_summary(project: ProjectConfig) -> None:
    console.print()
    print_section("Configuration")
    print_summary_table(
        {
            "Name": project.name,
            "Description": project.description,
            "Author": project.author,
            "Tech Stack": project.tech_stack.value,
        },
        title="Your project configuration",
    )


def run(args: argparse.Namespace) -> int:
    """Execute a setup run and return the process exit code."""
    try:
        settings = _settings(args)
    except ValueError as exc:
        print_error(f"Error: invalid configuration: {exc}")
        return 1
    if not settings.project_dir.is_dir():
        print_error(f"Error: directory not found: {settings.project_dir}")
        return 1

    print_header("AI Project Template Setup")

    try:
        project = collect_project_config(console, _overrides(args))
        _print_summary(project)
        if not args.yes and not prompt_confirm(console):
            raise SetupCancelled()
    except (SetupCancelled, KeyboardInterrupt, EOFError):
        console.print()
        print_error("Setup cancelled.")
        return 1

    console.print()
    print_section("Setting up your project...")
    customizer = TemplateCustomizer(project, settings)
    try:
        result = asyncio.run(customizer.apply())
    except SetupError as exc:
        print_error(f"Setup failed: {exc}")
        return 1

    for warning in result.warnings:
        print_warning(f"Warning: {warning}")

    console.print()
    print_success("Setup completed successfully!")
    console.print()
    console.print("[bold blue]Next Steps:[/bold blue]")
    for i, step in enumerate(next_steps(project.tech_stack), start=1):
        console.print(f"{i}. {step}")
    console.print()
    print_success("Happy coding!")
    return 0


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``template-setup`` and ``python -m template_setup``."""
    args = build_parser().parse_args(argv)
    sys.exit(run(args))


if __name__ == "__main__":
    main()
