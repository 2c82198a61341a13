"""Optional git repository initialisation for freshly generated projects.

A failure here never fails the run: the project is usable without a
repository, so problems are reported as a warning.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from react_starter.utils import print_success, print_warning


async def _run_git(*args: str, cwd: Path) -> tuple[int, str]:
    """Run ``git <args>`` in *cwd* and return ``(returncode, stderr)``."""
    process = await asyncio.create_subprocess_exec(
        "git",
        *args,
        cwd=str(cwd),
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    _, stderr_bytes = await process.communicate()
    stderr = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
    return (process.returncode if process.returncode is not None else -1, stderr)


async def initialize_repository(
    project_path: str | Path,
    message: str = "Initial commit",
) -> bool:
    """Run ``git init``, ``git add .`` and an initial commit in *project_path*.

    Returns:
        ``True`` if every step succeeded, ``False`` otherwise.
    """
    cwd = Path(project_path)
    steps = [("init",), ("add", "."), ("commit", "-m", message)]

    for step in steps:
        try:
            returncode, stderr = await _run_git(*step, cwd=cwd)
        except OSError as exc:
            print_warning(f"Git initialization failed: {exc}")
            return False
        if returncode != 0:
            detail = f": {stderr}" if stderr else ""
            print_warning(f"Git initialization failed at 'git {step[0]}'{detail}")
            return False

    print_success("Git repository initialized")
    return True
