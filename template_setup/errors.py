"""Exceptions raised by the template customiser."""

from __future__ import annotations


class SetupError(Exception):
    """Raised when a setup step fails irrecoverably."""

    def __init__(self, step: str, message: str) -> None:
        self.step = step
        super().__init__(f"{step}: {message}")


class SetupCancelled(SetupError):
    """Raised when the user declines the confirmation prompt."""

    def __init__(self, message: str = "Setup cancelled.") -> None:
        super().__init__("confirm", message)


class ManifestError(SetupError):
    """Raised when ``package.json`` cannot be read or rewritten."""

    def __init__(self, message: str, command: str = "", stderr: str = "") -> None:
        self.command = command
        self.stderr = stderr
        super().__init__("manifest", message)


class GitError(SetupError):
    """Raised when a git command fails."""

    def __init__(self, message: str, command: str = "", stderr: str = "") -> None:
        self.command = command
        self.stderr = stderr
        super().__init__("git", message)
