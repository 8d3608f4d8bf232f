"""Interactive prompts used to collect a ``ProjectConfig``.

Input is read with ``Console.input`` rather than ``rich.prompt.Prompt``
because answers must be used verbatim: ``Prompt`` strips whitespace.
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.markup import escape

from template_setup.config import (
    DEFAULT_AUTHOR,
    DEFAULT_DESCRIPTION,
    DEFAULT_EMAIL,
    DEFAULT_PROJECT_NAME,
    ProjectConfig,
    TechStack,
)
from template_setup.customizer.stacks import STACK_PRESETS, select_tech_stack

_AFFIRMATIVE = {"y", "yes"}


def prompt_with_default(console: Console, label: str, default: str) -> str:
    """Ask for a value, returning *default* when the answer is empty."""
    answer = console.input(
        f"[yellow]{escape(label)}[/yellow] (default: {escape(default)}): "
    )
    if answer == "":
        return default
    return answer


def prompt_tech_stack(console: Console) -> TechStack:
    """Show the stack menu and return the selected stack."""
    console.print()
    console.print("[bold green]Technology Stack[/bold green]")
    console.print("Select your technology stack:")
    for preset in STACK_PRESETS:
        console.print(f"{preset.choice}) {escape(preset.label)}")
    console.print()
    answer = console.input("[yellow]Choose option (1-5):[/yellow] ")
    return select_tech_stack(answer)


def is_affirmative(answer: str) -> bool:
    """Return ``True`` only for ``y``/``yes`` in any letter case."""
    return answer.lower() in _AFFIRMATIVE


def prompt_confirm(console: Console, question: str = "Continue with setup?") -> bool:
    """Ask a yes/no question where anything but yes declines."""
    answer = console.input(f"[yellow]{escape(question)} (y/N):[/yellow] ")
    return is_affirmative(answer)


def collect_project_config(
    console: Console,
    overrides: dict[str, Any] | None = None,
) -> ProjectConfig:
    """Prompt for every field not present in *overrides*.

    Args:
        console: Console used for output and input.
        overrides: Field values that were given up front (e.g. CLI flags).
            Keys are ``ProjectConfig`` field names; ``None`` values are
            treated as missing.

    Returns:
        The finished, immutable ``ProjectConfig``.
    """
    given = {k: v for k, v in (overrides or {}).items() if v is not None}
    fields = [
        ("name", "Project name", DEFAULT_PROJECT_NAME),
        ("description", "Project description", DEFAULT_DESCRIPTION),
        ("author_name", "Author name", DEFAULT_AUTHOR),
        ("author_email", "Author email", DEFAULT_EMAIL),
    ]

    values: dict[str, Any] = {}
    if any(key not in given for key, _, _ in fields):
        console.print("[bold green]Project Information[/bold green]")
        console.print("Please provide information about your project:")
        console.print()
    for key, label, default in fields:
        if key in given:
            values[key] = given[key]
        else:
            values[key] = prompt_with_default(console, label, default)

    if "tech_stack" in given:
        values["tech_stack"] = TechStack(given["tech_stack"])
    else:
        values["tech_stack"] = prompt_tech_stack(console)

    return ProjectConfig(**values)
