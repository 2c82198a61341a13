"""Structure planner -- which directories and files a template produces.

Every variant is the shared baseline plus a per-template delta.  Adding a
variant means adding a ``TemplateId`` member, a delta here, the matching
content templates and a catalog entry.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .catalog import TemplateId


# ---------------------------------------------------------------------------
# Plan model
# ---------------------------------------------------------------------------


class StructurePlan(BaseModel):
    """Ordered mapping of directory -> file names relative to that directory.

    File names may include a sub-directory (``components/Home.js``); those
    sub-directories are reported by :meth:`directories` so they can be created
    before any file is written.
    """

    model_config = ConfigDict(frozen=True)

    layout: dict[str, tuple[str, ...]]

    def directories(self) -> list[str]:
        """Every directory to create, parents listed before children."""
        result: list[str] = []
        for directory, files in self.layout.items():
            if directory not in result:
                result.append(directory)
            for name in files:
                parts = name.split("/")[:-1]
                for depth in range(1, len(parts) + 1):
                    sub = "/".join([directory, *parts[:depth]])
                    if sub not in result:
                        result.append(sub)
        return result

    def relative_paths(self) -> list[str]:
        """Every file path relative to the project root, in plan order."""
        return [
            f"{directory}/{name}"
            for directory, files in self.layout.items()
            for name in files
        ]

    def __len__(self) -> int:
        return sum(len(files) for files in self.layout.values())


# ---------------------------------------------------------------------------
# Baseline and deltas
# ---------------------------------------------------------------------------

_BASELINE: dict[str, tuple[str, ...]] = {
    "public": ("index.html", "favicon.ico", "manifest.json"),
    "src": ("App.js", "index.js", "index.css", "App.css"),
}

_TEMPLATE_DELTAS: dict[TemplateId, dict[str, tuple[str, ...]]] = {
    TemplateId.BASIC: {},
    TemplateId.WITH_ROUTER: {
        "src": ("components/Home.js", "components/About.js"),
    },
}


def plan(template: "str | TemplateId") -> StructurePlan:
    """Return the structure plan for *template*.

    Raises:
        UnknownTemplate: If *template* is not a registered identifier.
    """
    template_id = TemplateId.parse(template)
    delta = _TEMPLATE_DELTAS[template_id]

    layout: dict[str, tuple[str, ...]] = {}
    for directory in [*_BASELINE, *(d for d in delta if d not in _BASELINE)]:
        layout[directory] = _BASELINE.get(directory, ()) + delta.get(directory, ())
    return StructurePlan(layout=layout)
