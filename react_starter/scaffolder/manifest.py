"""Manifest builder -- assembles the generated project's ``package.json``."""

from __future__ import annotations

import json

from pydantic import BaseModel, ConfigDict, Field

from .catalog import TemplateCatalog, TemplateId


MANIFEST_FILENAME = "package.json"

DEFAULT_SCRIPTS: dict[str, str] = {
    "start": "react-scripts start",
    "build": "react-scripts build",
    "test": "react-scripts test",
    "eject": "react-scripts eject",
}


class ProjectManifest(BaseModel):
    """Serialisable project descriptor written as ``package.json``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    version: str = "0.1.0"
    private: bool = True
    type: str = "module"
    dependencies: dict[str, str] = Field(default_factory=dict)
    dev_dependencies: dict[str, str] = Field(
        default_factory=dict, alias="devDependencies"
    )
    scripts: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_SCRIPTS))

    def to_dict(self) -> dict[str, object]:
        """Return the manifest using npm's key names."""
        return self.model_dump(by_alias=True)

    def to_json(self) -> str:
        """Render the manifest as 2-space indented JSON."""
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False) + "\n"


def build_manifest(
    project_name: str,
    template: "str | TemplateId",
    catalog: TemplateCatalog,
) -> ProjectManifest:
    """Build the manifest for *project_name* from the catalog entry of *template*.

    Raises:
        UnknownTemplate: Propagated from the catalog lookup.
    """
    definition = catalog.lookup(template)
    return ProjectManifest(
        name=project_name,
        dependencies=dict(definition.dependencies),
        dev_dependencies=dict(definition.dev_dependencies),
    )
