"""Content resolver -- renders the file contents for a structure plan.

File contents live as Jinja2 templates under ``scaffolder/templates/``, keyed
by the file's path relative to the project root plus a ``.j2`` suffix (e.g.
``src/App.js`` -> ``src/App.js.j2``).  Keying by full path keeps files with the
same name in different directories apart.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

from jinja2 import Environment, FileSystemLoader, TemplateNotFound, select_autoescape
from pydantic import BaseModel, ConfigDict

from react_starter.utils import print_warning

from .catalog import TemplateId
from .planner import StructurePlan


_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

ContentResolver = Callable[[str], str]


class ResolvedFile(BaseModel):
    """A file path relative to the project root and its rendered content."""

    model_config = ConfigDict(frozen=True)

    path: str
    content: str


class ContentRenderer:
    """Renders project files from the bundled Jinja2 templates."""

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def resolve(self, relative_path: str, template: "str | TemplateId") -> str:
        """Return the content of *relative_path* for the given template.

        Paths with no matching template resolve to an empty string.  The
        planner should never ask for such a path; the fallback only keeps a
        planner/renderer mismatch from crashing a run.

        Raises:
            UnknownTemplate: If *template* is not a registered identifier.
        """
        template_id = TemplateId.parse(template)
        try:
            source = self.env.get_template(f"{relative_path}.j2")
        except TemplateNotFound:
            print_warning(f"  No content template for {relative_path}; writing an empty file")
            return ""
        return source.render(**_context_for(template_id))

    def resolver_for(self, template: "str | TemplateId") -> ContentResolver:
        """Bind *template* so the result maps a relative path to content."""
        template_id = TemplateId.parse(template)
        return lambda relative_path: self.resolve(relative_path, template_id)

    def resolve_plan(
        self, structure: StructurePlan, template: "str | TemplateId"
    ) -> list[ResolvedFile]:
        """Render every file of *structure* in plan order."""
        template_id = TemplateId.parse(template)
        return [
            ResolvedFile(path=path, content=self.resolve(path, template_id))
            for path in structure.relative_paths()
        ]

    def list_templates(self) -> list[str]:
        """Relative paths of every bundled content template, without ``.j2``."""
        if not self.template_dir.is_dir():
            return []
        return sorted(
            p.relative_to(self.template_dir).as_posix()[: -len(".j2")]
            for p in self.template_dir.rglob("*.j2")
        )


def _context_for(template_id: TemplateId) -> dict[str, Any]:
    return {
        "template": template_id.value,
        "router": template_id is TemplateId.WITH_ROUTER,
    }

