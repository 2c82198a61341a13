"""Project materializer -- turns a structure plan into files on disk.

All directories of a plan are created before the first file is written.  The
first filesystem error stops the run and is raised as
``MaterializationFailed``; whatever was already written stays on disk.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from .content import ContentResolver
from .errors import MaterializationFailed
from .manifest import MANIFEST_FILENAME, ProjectManifest
from .planner import StructurePlan


async def materialize(
    root: str | Path,
    structure: StructurePlan,
    resolve_fn: ContentResolver,
) -> list[Path]:
    """Create the directories and files of *structure* under *root*.

    Args:
        root: Project root directory.  Created if missing.
        structure: The plan to materialize.
        resolve_fn: Maps a path relative to *root* to its file content.

    Returns:
        The written file paths, in plan order.

    Raises:
        MaterializationFailed: On the first directory or file that cannot be
            written.  Earlier writes are not rolled back.
    """
    root_path = Path(root)

    for directory in [root_path, *(root_path / d for d in structure.directories())]:
        try:
            await asyncio.to_thread(_make_dir, directory)
        except OSError as exc:
            raise MaterializationFailed(directory, exc) from exc

    written: list[Path] = []
    for relative_path in structure.relative_paths():
        target = root_path / relative_path
        content = resolve_fn(relative_path)
        try:
            await asyncio.to_thread(_write_file, target, content)
        except OSError as exc:
            raise MaterializationFailed(target, exc) from exc
        written.append(target)

    return written


async def write_manifest(root: str | Path, manifest: ProjectManifest) -> Path:
    """Persist *manifest* as ``package.json`` in *root*.

    Raises:
        MaterializationFailed: If the file cannot be written.
    """
    target = Path(root) / MANIFEST_FILENAME
    try:
        await asyncio.to_thread(_write_file, target, manifest.to_json())
    except OSError as exc:
        raise MaterializationFailed(target, exc) from exc
    return target


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _make_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _write_file(path: Path, content: str) -> None:
    path.write_text(content, encoding="utf-8")
