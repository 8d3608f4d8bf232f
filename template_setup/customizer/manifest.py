"""Rewriting ``package.json`` with project metadata.

Two interchangeable writers exist.  ``JqManifestWriter`` performs a structured
edit with the host's ``jq``; ``TextManifestWriter`` is the fallback when
``jq`` is not installed and substitutes the template's known placeholder
strings line by line.  ``select_manifest_writer`` looks ``jq`` up on
``PATH`` once and picks one.
"""

from __future__ import annotations

import asyncio
import json
import os
import re
import shutil
from abc import ABC, abstractmethod
from pathlib import Path

from template_setup.config import ProjectConfig
from template_setup.errors import ManifestError
from template_setup.utils import run_command

_METADATA_FILTER = ".name = $name | .description = $desc | .author = $author"


class ManifestWriter(ABC):
    """Edits the dependency manifest in place."""

    name: str = "base"

    @abstractmethod
    async def update_metadata(self, path: Path, project: ProjectConfig) -> int:
        """Write name, description and author into the manifest.

        Returns:
            Number of fields changed.  ``0`` means nothing matched.
        """

    @abstractmethod
    async def remove_scripts(self, path: Path, scripts: tuple[str, ...]) -> bool:
        """Delete entries from ``scripts``.

        Returns:
            ``False`` if this writer cannot perform the edit.
        """


# ---------------------------------------------------------------------------
# jq strategy
# ---------------------------------------------------------------------------


class JqManifestWriter(ManifestWriter):
    """Structured manifest edits through the ``jq`` executable."""

    name = "jq"

    def __init__(self, binary: str = "jq", timeout: float = 30) -> None:
        self.binary = binary
        self.timeout = timeout

    async def update_metadata(self, path: Path, project: ProjectConfig) -> int:
        await self._apply(
            path,
            [
                "--arg", "name", project.name,
                "--arg", "desc", project.description,
                "--arg", "author", project.author,
                _METADATA_FILTER,
            ],
        )
        return 3

    async def remove_scripts(self, path: Path, scripts: tuple[str, ...]) -> bool:
        if not scripts:
            return True
        expr = " | ".join(f"del(.scripts[{json.dumps(s)}])" for s in scripts)
        await self._apply(path, [expr])
        return True

    async def _apply(self, path: Path, args: list[str]) -> None:
        """Run jq over *path* and replace it with the output on success."""
        _require_manifest(path)
        cmd = [self.binary, *args, str(path)]
        cmd_str = " ".join(cmd)
        try:
            code, stdout, stderr = await run_command(cmd, timeout=self.timeout)
        except OSError as exc:
            raise ManifestError(f"Cannot run {self.binary}: {exc}", command=cmd_str) from exc
        if code != 0:
            raise ManifestError(
                f"jq failed (exit {code}) on {path}\n{stderr}",
                command=cmd_str,
                stderr=stderr,
            )
        tmp = path.with_name(path.name + ".tmp")
        try:
            await asyncio.to_thread(_replace_file, tmp, path, stdout)
        except OSError as exc:
            raise ManifestError(f"Cannot write {path}: {exc}") from exc


# ---------------------------------------------------------------------------
# Text substitution fallback
# ---------------------------------------------------------------------------


class TextManifestWriter(ManifestWriter):
    """Line-oriented substitution of the template's placeholder values.

    Only the first match on each line is replaced.  Placeholders that are
    missing from the file are left alone and simply not counted.
    """

    name = "text"

    NAME_PATTERN = re.compile(r'"ai-project-template"')
    DESCRIPTION_PATTERN = re.compile(r'"A comprehensive template.*"')
    AUTHOR_PATTERN = re.compile(re.escape('"Your Name <your.email@example.com>"'))

    async def update_metadata(self, path: Path, project: ProjectConfig) -> int:
        _require_manifest(path)
        try:
            original = await asyncio.to_thread(path.read_text, encoding="utf-8")
        except OSError as exc:
            raise ManifestError(f"Cannot read {path}: {exc}") from exc

        rewritten, count = substitute_metadata(original, project)
        if count:
            try:
                await asyncio.to_thread(path.write_text, rewritten, encoding="utf-8")
            except OSError as exc:
                raise ManifestError(f"Cannot write {path}: {exc}") from exc
        return count

    async def remove_scripts(self, path: Path, scripts: tuple[str, ...]) -> bool:
        return False


def substitute_metadata(text: str, project: ProjectConfig) -> tuple[str, int]:
    """Replace the placeholder name, description and author in *text*.

    Replacement values are JSON-encoded so the result stays valid JSON.  A
    line rewritten for one field is not searched again for the others, so
    user values that look like placeholders are never replaced.

    Returns:
        ``(new_text, substitutions)``.
    """
    replacements = [
        (TextManifestWriter.NAME_PATTERN, _json_string(project.name)),
        (TextManifestWriter.DESCRIPTION_PATTERN, _json_string(project.description)),
        (TextManifestWriter.AUTHOR_PATTERN, _json_string(project.author)),
    ]
    total = 0
    lines = text.splitlines(keepends=True)
    rewritten: set[int] = set()
    for pattern, value in replacements:
        for i, line in enumerate(lines):
            if i in rewritten:
                continue
            new_line, n = pattern.subn(lambda _m, v=value: v, line, count=1)
            if n:
                lines[i] = new_line
                rewritten.add(i)
                total += n
    return "".join(lines), total


# ---------------------------------------------------------------------------
# Strategy selection
# ---------------------------------------------------------------------------


def select_manifest_writer(jq_binary: str = "jq") -> ManifestWriter:
    """Return the jq writer when *jq_binary* is on ``PATH``, else the text writer."""
    resolved = shutil.which(jq_binary)
    if resolved:
        return JqManifestWriter(resolved)
    return TextManifestWriter()


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _require_manifest(path: Path) -> None:
    if not path.is_file():
        raise ManifestError(f"Manifest not found: {path}")


def _json_string(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def _replace_file(tmp: Path, target: Path, content: str) -> None:
    """Write *content* to *tmp* then move it over *target*."""
    tmp.write_text(content, encoding="utf-8")
    os.replace(tmp, target)
