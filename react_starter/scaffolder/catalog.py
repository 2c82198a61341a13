"""Template catalog -- the registry of project variants and their dependencies.

The catalog is the single source of truth for dependency sets.  It is built
once with :func:`build_default_catalog` and handed to whoever needs it; nothing
mutates it after construction.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from .errors import UnknownTemplate


# ---------------------------------------------------------------------------
# Template identifiers
# ---------------------------------------------------------------------------


class TemplateId(str, Enum):
    """Closed set of project variants the generator knows how to build."""

    BASIC = "basic"
    WITH_ROUTER = "with-router"

    @classmethod
    def parse(cls, value: "str | TemplateId") -> "TemplateId":
        """Convert a raw identifier into a ``TemplateId``.

        Raises:
            UnknownTemplate: If *value* is not one of the registered variants.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnknownTemplate(str(value), [t.value for t in cls]) from None


# ---------------------------------------------------------------------------
# Template definition
# ---------------------------------------------------------------------------


class TemplateDefinition(BaseModel):
    """Dependency sets for one template variant.

    Both mappings are stored as read-only views, so a definition handed out
    by the catalog cannot be changed by the caller.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    dependencies: Mapping[str, str] = Field(default_factory=dict, validate_default=True)
    dev_dependencies: Mapping[str, str] = Field(
        default_factory=dict, alias="devDependencies", validate_default=True
    )

    @field_validator("dependencies", "dev_dependencies", mode="after")
    @classmethod
    def _read_only(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @field_serializer("dependencies", "dev_dependencies")
    def _as_dict(self, value: Mapping[str, str]) -> dict[str, str]:
        return dict(value)


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


_BASE_DEPENDENCIES: dict[str, str] = {
    "react": "^18.2.0",
    "react-dom": "^18.2.0",
    "react-scripts": "^5.0.1",
}

_ROUTER_DEPENDENCIES: dict[str, str] = {
    "react-router-dom": "^6.3.0",
}

_DEV_DEPENDENCIES: dict[str, str] = {
    "@testing-library/react": "^13.3.0",
    "eslint": "^8.20.0",
    "prettier": "^2.7.1",
}


class TemplateCatalog:
    """Immutable mapping of ``TemplateId`` to ``TemplateDefinition``."""

    def __init__(self, definitions: Mapping[TemplateId, TemplateDefinition]) -> None:
        self._definitions = MappingProxyType(dict(definitions))

    def lookup(self, template: "str | TemplateId") -> TemplateDefinition:
        """Return the definition registered for *template*.

        Raises:
            UnknownTemplate: If the identifier is unknown or not registered.
        """
        template_id = TemplateId.parse(template)
        try:
            return self._definitions[template_id]
        except KeyError:
            raise UnknownTemplate(template_id.value, self.identifiers()) from None

    def identifiers(self) -> list[str]:
        """Registered identifiers in declaration order."""
        return [t.value for t in self._definitions]

    def __contains__(self, template: object) -> bool:
        try:
            return TemplateId.parse(template) in self._definitions  # type: ignore[arg-type]
        except UnknownTemplate:
            return False


def build_default_catalog() -> TemplateCatalog:
    """Construct the catalog of built-in templates."""
    return TemplateCatalog(
        {
            TemplateId.BASIC: TemplateDefinition(
                dependencies=dict(_BASE_DEPENDENCIES),
                dev_dependencies=dict(_DEV_DEPENDENCIES),
            ),
            TemplateId.WITH_ROUTER: TemplateDefinition(
                dependencies={**_BASE_DEPENDENCIES, **_ROUTER_DEPENDENCIES},
                dev_dependencies=dict(_DEV_DEPENDENCIES),
            ),
        }
    )
