"""Technology stack presets and menu selection."""

from __future__ import annotations

from dataclasses import dataclass, field

from template_setup.config import DEFAULT_TECH_STACK, TechStack


@dataclass(frozen=True)
class StackPreset:
    """One entry of the tech-stack menu."""

    choice: str
    stack: TechStack
    label: str
    writes_requirements: bool = False
    removed_scripts: tuple[str, ...] = field(default_factory=tuple)


STACK_PRESETS: tuple[StackPreset, ...] = (
    StackPreset("1", TechStack.NODE, "Node.js + React (default)"),
    StackPreset("2", TechStack.PYTHON, "Python + FastAPI", writes_requirements=True),
    StackPreset(
        "3",
        TechStack.NODE_API,
        "Node.js only (API)",
        removed_scripts=("dev:frontend", "build:frontend"),
    ),
    StackPreset("4", TechStack.PYTHON_ONLY, "Python only"),
    StackPreset("5", TechStack.CUSTOM, "Custom (manual setup)"),
)

_BY_CHOICE: dict[str, StackPreset] = {p.choice: p for p in STACK_PRESETS}
_BY_STACK: dict[TechStack, StackPreset] = {p.stack: p for p in STACK_PRESETS}


def select_tech_stack(choice: str) -> TechStack:
    """Map a menu answer to a stack.

    ``"1"`` to ``"5"`` select a preset; anything else falls back to the
    default stack without complaint.
    """
    preset = _BY_CHOICE.get(choice)
    if preset is None:
        return DEFAULT_TECH_STACK
    return preset.stack


def get_preset(stack: TechStack) -> StackPreset:
    """Return the preset definition for *stack*."""
    return _BY_STACK[stack]


# Written verbatim to requirements.txt by the python preset.
PYTHON_REQUIREMENTS: list[tuple[str, list[str]]] = [
    ("Web Framework", ["fastapi==0.104.1", "uvicorn[standard]==0.24.0"]),
    ("Database", ["sqlalchemy==2.0.23", "alembic==1.13.1"]),
    (
        "AI/ML Libraries",
        [
            "torch==2.1.1",
            "transformers==4.35.2",
            "scikit-learn==1.3.2",
            "pandas==2.1.3",
            "numpy==1.24.4",
        ],
    ),
    ("Development", ["pytest==7.4.3", "black==23.11.0", "flake8==6.1.0", "mypy==1.7.1"]),
    ("Utilities", ["python-dotenv==1.0.0", "pydantic==2.5.0", "requests==2.31.0"]),
]
