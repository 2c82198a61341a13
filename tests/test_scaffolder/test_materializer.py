"""Tests for the project materializer (react_starter.scaffolder.materializer).

Covers:
- Exact file set on disk for both templates
- Directory creation before any write, idempotent re-runs
- Overwriting existing files
- Failure on the Nth write: MaterializationFailed, earlier files kept
- package.json persistence
"""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from react_starter.scaffolder import materializer as materializer_module
from react_starter.scaffolder.catalog import TemplateCatalog
from react_starter.scaffolder.content import ContentRenderer
from react_starter.scaffolder.errors import MaterializationFailed
from react_starter.scaffolder.manifest import build_manifest
from react_starter.scaffolder.materializer import materialize, write_manifest
from react_starter.scaffolder.planner import StructurePlan, plan


pytestmark = pytest.mark.unit


def _files_on_disk(root: Path) -> set[str]:
    return {p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file()}


FIVE_FILE_PLAN = StructurePlan(
    layout={
        "public": ("one.txt", "two.txt"),
        "src": ("three.txt", "four.txt", "five.txt"),
    }
)


# ---------------------------------------------------------------------------
# Successful materialization
# ---------------------------------------------------------------------------


class TestMaterialize:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("template", ["basic", "with-router"])
    async def test_exact_file_set(
        self, tmp_path: Path, renderer: ContentRenderer, template: str
    ):
        root = tmp_path / "my-app"
        structure = plan(template)
        written = await materialize(root, structure, renderer.resolver_for(template))

        assert _files_on_disk(root) == set(structure.relative_paths())
        assert [p.relative_to(root).as_posix() for p in written] == structure.relative_paths()

    @pytest.mark.asyncio
    async def test_content_comes_from_resolver(self, tmp_path: Path):
        await materialize(tmp_path, FIVE_FILE_PLAN, lambda path: f"content of {path}")
        assert (tmp_path / "src" / "four.txt").read_text(encoding="utf-8") == (
            "content of src/four.txt"
        )

    @pytest.mark.asyncio
    async def test_existing_directories_are_fine(self, tmp_path: Path):
        (tmp_path / "public").mkdir()
        (tmp_path / "src").mkdir()
        written = await materialize(tmp_path, FIVE_FILE_PLAN, lambda path: "x")
        assert len(written) == 5

    @pytest.mark.asyncio
    async def test_overwrites_existing_files(self, tmp_path: Path):
        (tmp_path / "public").mkdir()
        (tmp_path / "public" / "one.txt").write_text("old", encoding="utf-8")
        await materialize(tmp_path, FIVE_FILE_PLAN, lambda path: "new")
        assert (tmp_path / "public" / "one.txt").read_text(encoding="utf-8") == "new"

    @pytest.mark.asyncio
    async def test_all_directories_created_before_first_write(self, tmp_path: Path):
        seen_dirs: list[bool] = []
        real_write = materializer_module._write_file

        def recording_write(path: Path, content: str) -> None:
            seen_dirs.append((tmp_path / "src" / "components").is_dir())
            real_write(path, content)

        with patch.object(materializer_module, "_write_file", side_effect=recording_write):
            await materialize(tmp_path, plan("with-router"), lambda path: "")

        assert seen_dirs and all(seen_dirs)


# ---------------------------------------------------------------------------
# Failure handling
# ---------------------------------------------------------------------------


class TestMaterializeFailure:
    @pytest.mark.asyncio
    async def test_third_write_fails_without_rollback(self, tmp_path: Path):
        real_write = materializer_module._write_file
        calls: list[Path] = []

        def flaky_write(path: Path, content: str) -> None:
            calls.append(path)
            if len(calls) == 3:
                raise OSError(28, "No space left on device")
            real_write(path, content)

        with patch.object(materializer_module, "_write_file", side_effect=flaky_write):
            with pytest.raises(MaterializationFailed) as exc_info:
                await materialize(tmp_path, FIVE_FILE_PLAN, lambda path: "data")

        assert exc_info.value.path == tmp_path / "src" / "three.txt"
        assert isinstance(exc_info.value.cause, OSError)
        assert len(calls) == 3
        assert (tmp_path / "public" / "one.txt").exists()
        assert (tmp_path / "public" / "two.txt").exists()
        assert _files_on_disk(tmp_path) == {"public/one.txt", "public/two.txt"}

    @pytest.mark.asyncio
    async def test_directory_failure_writes_nothing(self, tmp_path: Path):
        # A regular file where the "src" directory should go.
        (tmp_path / "src").write_text("not a directory", encoding="utf-8")

        with pytest.raises(MaterializationFailed) as exc_info:
            await materialize(tmp_path, FIVE_FILE_PLAN, lambda path: "data")

        assert exc_info.value.path == tmp_path / "src"
        assert not (tmp_path / "public" / "one.txt").exists()


# ---------------------------------------------------------------------------
# Manifest persistence
# ---------------------------------------------------------------------------


class TestWriteManifest:
    @pytest.mark.asyncio
    async def test_writes_package_json(self, tmp_path: Path, catalog: TemplateCatalog):
        manifest = build_manifest("my-app", "with-router", catalog)
        path = await write_manifest(tmp_path, manifest)

        assert path == tmp_path / "package.json"
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["name"] == "my-app"
        assert "react-router-dom" in data["dependencies"]

    @pytest.mark.asyncio
    async def test_missing_root_raises(self, tmp_path: Path, catalog: TemplateCatalog):
        manifest = build_manifest("my-app", "basic", catalog)
        with pytest.raises(MaterializationFailed) as exc_info:
            await write_manifest(tmp_path / "absent", manifest)
        assert exc_info.value.path.name == "package.json"
