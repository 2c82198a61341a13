"""Installation invoker -- runs the package manager in the generated project."""

from __future__ import annotations

import asyncio
from pathlib import Path

from react_starter.utils import console

from .errors import InstallationFailed


DEFAULT_INSTALL_COMMAND: tuple[str, ...] = ("npm", "install")


class DependencyInstaller:
    """Runs one install command inside a project directory.

    The child process inherits stdin/stdout/stderr so the package manager's
    own progress output reaches the user.  There is no timeout and no retry.
    """

    def __init__(self, command: list[str] | tuple[str, ...] | None = None) -> None:
        self.command = list(DEFAULT_INSTALL_COMMAND if command is None else command)
        if not self.command:
            raise ValueError("Install command must not be empty")

    async def install(self, working_dir: str | Path) -> None:
        """Run the install command in *working_dir*.

        Raises:
            InstallationFailed: If the command cannot be started or exits
                with a non-zero status.
        """
        cmd_str = " ".join(self.command)
        console.print(f"[blue]Installing dependencies ({cmd_str})...[/blue]")

        try:
            process = await asyncio.create_subprocess_exec(
                *self.command,
                cwd=str(working_dir),
            )
        except OSError as exc:
            raise InstallationFailed(f"could not run {cmd_str!r}: {exc}") from exc

        returncode = await process.wait()
        if returncode != 0:
            raise InstallationFailed(
                f"{cmd_str!r} exited with status {returncode}",
                exit_code=returncode,
            )
