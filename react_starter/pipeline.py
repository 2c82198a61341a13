"""create-my-react-app generation orchestrator.

Drives a single generation run through its stages, strictly in order:

validating          -- check the project name and template identifier.
planning            -- compute the structure plan and the manifest.
writing             -- create directories and write the source files.
manifest_persisting -- write ``package.json``.
installing          -- run the package manager in the new project.

Any ``ScaffoldError`` ends the run in the ``failed`` state, recording the stage
that raised it.  Nothing written before a failure is cleaned up.

Usage::

    create-my-react-app
    python -m react_starter
"""

from __future__ import annotations

import asyncio
import sys
import time
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from react_starter.config import Config
from react_starter.prompts import collect_project_details
from react_starter.scaffolder import (
    ContentRenderer,
    DependencyInstaller,
    InvalidProjectName,
    ProjectManifest,
    ScaffoldError,
    StructurePlan,
    TemplateCatalog,
    TemplateId,
    build_default_catalog,
    build_manifest,
    initialize_repository,
    materialize,
    plan,
    write_manifest,
)
from react_starter.utils import (
    console,
    format_duration,
    is_valid_project_name,
    print_banner,
    print_error,
    print_stage_header,
    print_success,
    print_summary_table,
)


# ---------------------------------------------------------------------------
# Stages and results
# ---------------------------------------------------------------------------


class Stage(str, Enum):
    """States of a generation run."""

    VALIDATING = "validating"
    PLANNING = "planning"
    WRITING = "writing"
    MANIFEST_PERSISTING = "manifest_persisting"
    INSTALLING = "installing"
    DONE = "done"
    FAILED = "failed"


class GenerationResult(BaseModel):
    """Terminal outcome of one generation run.

    ``stage`` is ``done`` on success, otherwise the stage that failed.
    ``history`` lists every stage entered, in order.
    """

    success: bool
    stage: Stage
    project_name: str
    template: str
    project_path: Path | None = None
    files_written: list[Path] = Field(default_factory=list)
    history: list[Stage] = Field(default_factory=list)
    error: str | None = None
    error_kind: str | None = None
    elapsed: float = 0.0


def validate_project_name(name: str) -> str:
    """Return *name* unchanged if it is a valid project name.

    Raises:
        InvalidProjectName: If *name* is not lowercase alphanumeric with hyphens.
    """
    if not is_valid_project_name(name):
        raise InvalidProjectName(name)
    return name


# ---------------------------------------------------------------------------
# Orchestrator
# ---------------------------------------------------------------------------


class GenerationOrchestrator:
    """Sequences validation, planning, writing, manifest and install.

    Attributes:
        config: Run configuration (output directory, install command, git).
        catalog: Template catalog shared with the manifest builder.
        renderer: Content renderer for project files.
        installer: Runs the dependency installation command.
    """

    def __init__(
        self,
        config: Config | None = None,
        catalog: TemplateCatalog | None = None,
        renderer: ContentRenderer | None = None,
        installer: DependencyInstaller | None = None,
    ) -> None:
        self.config = config or Config()
        self.catalog = catalog or build_default_catalog()
        self.renderer = renderer or ContentRenderer()
        self.installer = installer or DependencyInstaller(self.config.install_command)
        self.stage = Stage.VALIDATING
        self.history: list[Stage] = []

    def _enter(self, stage: Stage) -> None:
        self.stage = stage
        self.history.append(stage)
        if stage is not Stage.DONE:
            print_stage_header(stage.value)

    async def run(self, project_name: str, template: str | TemplateId) -> GenerationResult:
        """Generate *project_name* from *template*.

        Returns:
            A ``GenerationResult``; failures are reported in the result
            rather than raised.
        """
        start = time.monotonic()
        self.history = []
        template_value = template.value if isinstance(template, TemplateId) else str(template)
        project_path: Path | None = None
        written: list[Path] = []

        try:
            self._enter(Stage.VALIDATING)
            template_id = self._validate(project_name, template)
            project_path = self.config.project_path(project_name)

            self._enter(Stage.PLANNING)
            structure, manifest = self._plan(project_name, template_id)

            self._enter(Stage.WRITING)
            written = await materialize(
                project_path, structure, self.renderer.resolver_for(template_id)
            )
            console.print(f"  [green]+[/green] Wrote {len(written)} file(s) to {project_path}")

            self._enter(Stage.MANIFEST_PERSISTING)
            manifest_path = await write_manifest(project_path, manifest)
            console.print(f"  [green]+[/green] Wrote {manifest_path.name}")

            self._enter(Stage.INSTALLING)
            await self.installer.install(project_path)

        except ScaffoldError as exc:
            failed_stage = self.stage
            self.history.append(Stage.FAILED)
            self.stage = Stage.FAILED
            print_error(f"Project creation failed during {failed_stage.value}: {exc}")
            return GenerationResult(
                success=False,
                stage=failed_stage,
                project_name=project_name,
                template=template_value,
                project_path=project_path,
                files_written=written,
                history=list(self.history),
                error=str(exc),
                error_kind=type(exc).__name__,
                elapsed=time.monotonic() - start,
            )

        if self.config.init_git:
            await initialize_repository(project_path, self.config.git_commit_message)

        self._enter(Stage.DONE)
        elapsed = time.monotonic() - start
        self._print_success(project_name, template_value, project_path, len(written), elapsed)
        return GenerationResult(
            success=True,
            stage=Stage.DONE,
            project_name=project_name,
            template=template_value,
            project_path=project_path,
            files_written=written,
            history=list(self.history),
            elapsed=elapsed,
        )

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    def _validate(self, project_name: str, template: str | TemplateId) -> TemplateId:
        """Check name and template without touching the filesystem."""
        validate_project_name(project_name)
        template_id = TemplateId.parse(template)
        self.catalog.lookup(template_id)
        return template_id

    def _plan(
        self, project_name: str, template_id: TemplateId
    ) -> tuple[StructurePlan, ProjectManifest]:
        structure = plan(template_id)
        manifest = build_manifest(project_name, template_id, self.catalog)
        console.print(
            f"  [green]+[/green] {len(structure)} file(s) in "
            f"{len(structure.directories())} director(ies), "
            f"{len(manifest.dependencies)} dependencies"
        )
        return structure, manifest

    def _print_success(
        self,
        project_name: str,
        template: str,
        project_path: Path,
        file_count: int,
        elapsed: float,
    ) -> None:
        print_summary_table(
            {
                "Project": project_name,
                "Template": template,
                "Location": str(project_path),
                "Files": str(file_count + 1),
                "Duration": format_duration(elapsed),
            },
            title="Project Created",
        )
        print_success(f"Project {project_name} created successfully!")
        console.print(
            "\nNext steps:\n"
            f"  - cd {project_name}\n"
            "  - npm start\n\n"
            "Happy Coding!"
        )


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """CLI entry point for ``create-my-react-app``."""
    print_banner()

    try:
        config = Config.from_env()
    except ValidationError as exc:
        print_error(f"Invalid configuration: {exc}")
        sys.exit(1)
    catalog = build_default_catalog()

    try:
        request = collect_project_details(catalog.identifiers())
    except (KeyboardInterrupt, EOFError):
        print_error("Project creation aborted.")
        sys.exit(1)

    orchestrator = GenerationOrchestrator(config, catalog=catalog)
    try:
        result = asyncio.run(orchestrator.run(request.project_name, request.template))
    except KeyboardInterrupt:
        print_error("Project creation aborted.")
        sys.exit(1)

    if not result.success:
        sys.exit(1)


if __name__ == "__main__":
    main()
