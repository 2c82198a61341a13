"""create-my-react-app configuration.

Typed settings for a generation run.  The CLI takes no flags, so anything
tunable is read from ``REACT_STARTER_*`` environment variables.
"""

from __future__ import annotations

import os
import shlex
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from react_starter.scaffolder.installer import DEFAULT_INSTALL_COMMAND

_TRUTHY = {"1", "true", "yes", "on"}


class Config(BaseModel):
    """Settings shared by every stage of a generation run."""

    output_dir: Path = Field(
        default=Path("."), description="Parent directory for generated projects"
    )
    install_command: list[str] = Field(
        default_factory=lambda: list(DEFAULT_INSTALL_COMMAND),
        description="Command run in the new project to install dependencies",
    )
    init_git: bool = Field(
        default=False, description="Initialise a git repository after installing"
    )
    git_commit_message: str = Field(default="Initial commit")

    @field_validator("install_command")
    @classmethod
    def _command_not_empty(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("install_command must contain at least the executable")
        return value

    def project_path(self, project_name: str) -> Path:
        """Absolute path of the directory generated for *project_name*."""
        return (self.output_dir / project_name).resolve()

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            REACT_STARTER_OUTPUT_DIR, REACT_STARTER_INSTALL_COMMAND,
            REACT_STARTER_INIT_GIT, REACT_STARTER_GIT_MESSAGE.
        """
        kwargs: dict[str, object] = {}
        if os.environ.get("REACT_STARTER_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["REACT_STARTER_OUTPUT_DIR"])
        if os.environ.get("REACT_STARTER_INSTALL_COMMAND"):
            kwargs["install_command"] = shlex.split(
                os.environ["REACT_STARTER_INSTALL_COMMAND"]
            )
        if os.environ.get("REACT_STARTER_INIT_GIT"):
            kwargs["init_git"] = (
                os.environ["REACT_STARTER_INIT_GIT"].strip().lower() in _TRUTHY
            )
        if os.environ.get("REACT_STARTER_GIT_MESSAGE"):
            kwargs["git_commit_message"] = os.environ["REACT_STARTER_GIT_MESSAGE"]
        return cls(**kwargs)
