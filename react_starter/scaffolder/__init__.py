"""Template resolution and file-materialization engine.

Quick usage::

    from react_starter.scaffolder import (
        ContentRenderer, build_default_catalog, build_manifest, materialize, plan,
    )

    catalog = build_default_catalog()
    structure = plan("with-router")
    manifest = build_manifest("my-app", "with-router", catalog)
    renderer = ContentRenderer()
    await materialize("./my-app", structure, renderer.resolver_for("with-router"))
"""

from react_starter.scaffolder.catalog import (
    TemplateCatalog,
    TemplateDefinition,
    TemplateId,
    build_default_catalog,
)
from react_starter.scaffolder.content import ContentRenderer, ResolvedFile
from react_starter.scaffolder.errors import (
    InstallationFailed,
    InvalidProjectName,
    MaterializationFailed,
    ScaffoldError,
    UnknownTemplate,
)
from react_starter.scaffolder.installer import DependencyInstaller
from react_starter.scaffolder.manifest import ProjectManifest, build_manifest
from react_starter.scaffolder.materializer import materialize, write_manifest
from react_starter.scaffolder.planner import StructurePlan, plan
from react_starter.scaffolder.vcs import initialize_repository

__all__ = [
    "ContentRenderer",
    "DependencyInstaller",
    "InstallationFailed",
    "InvalidProjectName",
    "MaterializationFailed",
    "ProjectManifest",
    "ResolvedFile",
    "ScaffoldError",
    "StructurePlan",
    "TemplateCatalog",
    "TemplateDefinition",
    "TemplateId",
    "UnknownTemplate",
    "build_default_catalog",
    "build_manifest",
    "initialize_repository",
    "materialize",
    "plan",
    "write_manifest",
]
