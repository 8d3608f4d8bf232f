"""Git repository initialisation for the customised project."""

from __future__ import annotations

import asyncio
from pathlib import Path

from template_setup.errors import GitError


def commit_message(project_name: str) -> str:
    return f"Initial commit: Set up {project_name} from AI project template"


async def _run_git(
    *args: str,
    cwd: str | Path | None = None,
    timeout: float = 60.0,
) -> tuple[str, str]:
    """Run a git command asynchronously and return (stdout, stderr).

    Raises GitError if git is missing, times out, or exits non-zero.
    """
    cmd = ["git"] + list(args)
    cmd_str = " ".join(cmd)

    try:
        process = await asyncio.create_subprocess_exec(
            *cmd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            cwd=str(cwd) if cwd else None,
        )
    except FileNotFoundError as exc:
        raise GitError("git executable not found on PATH", command=cmd_str) from exc

    try:
        stdout_bytes, stderr_bytes = await asyncio.wait_for(
            process.communicate(), timeout=timeout
        )
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        raise GitError(
            f"Git command timed out after {timeout}s: {cmd_str}",
            command=cmd_str,
        )

    stdout = stdout_bytes.decode("utf-8", errors="replace").strip()
    stderr = stderr_bytes.decode("utf-8", errors="replace").strip()

    if process.returncode != 0:
        raise GitError(
            f"Git command failed (exit {process.returncode}): {cmd_str}\n{stderr}",
            command=cmd_str,
            stderr=stderr,
        )

    return stdout, stderr


async def _has_commits(root: Path, timeout: float) -> bool:
    """Return ``True`` if the repository at *root* has a ``HEAD`` commit."""
    try:
        await _run_git("rev-parse", "--verify", "--quiet", "HEAD", cwd=root, timeout=timeout)
    except GitError:
        return False
    return True


async def initialize_repository(
    project_dir: str | Path,
    project_name: str,
    timeout: float = 60.0,
) -> bool:
    """Create a repository with a first commit of the current tree.

    Does nothing when the repository already has a commit.  A ``.git`` left
    behind by an earlier run whose commit failed gets its first commit now.

    Returns:
        ``True`` if a first commit was made.
    """
    root = Path(project_dir)
    if (root / ".git").exists():
        if await _has_commits(root, timeout):
            return False
    else:
        await _run_git("init", cwd=root, timeout=timeout)

    await _run_git("add", ".", cwd=root, timeout=timeout)
    await _run_git("commit", "-m", commit_message(project_name), cwd=root, timeout=timeout)
    return True
