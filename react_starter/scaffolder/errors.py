"""Error taxonomy for project generation.

Every failure the generator can surface derives from ``ScaffoldError`` so the
orchestrator can record the failing stage without guessing at exception types.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all generation failures."""


class InvalidProjectName(ScaffoldError):
    """Raised when a project name is not lowercase alphanumeric with hyphens."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Invalid project name {name!r}: "
            "must be lowercase, alphanumeric with hyphens"
        )


class UnknownTemplate(ScaffoldError):
    """Raised when a template identifier is not registered in the catalog."""

    def __init__(self, template: str, known: list[str] | None = None) -> None:
        self.template = template
        self.known = known or []
        message = f"Unknown template {template!r}"
        if self.known:
            message += f" (expected one of: {', '.join(self.known)})"
        super().__init__(message)


class MaterializationFailed(ScaffoldError):
    """Raised when a directory or file could not be written."""

    def __init__(self, path: str | Path, cause: BaseException) -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Failed to write {self.path}: {cause}")


class InstallationFailed(ScaffoldError):
    """Raised when the dependency installation command does not succeed."""

    def __init__(self, cause: str, exit_code: int | None = None) -> None:
        self.cause = cause
        self.exit_code = exit_code
        super().__init__(f"Dependency installation failed: {cause}")
