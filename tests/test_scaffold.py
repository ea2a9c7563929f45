from __future__ import annotations

import json
from pathlib import Path

import pytest

from mcp_scaffold.config import ServerConfig
from mcp_scaffold.errors import ScaffoldError, ScaffoldStage
from mcp_scaffold.scaffold import ServerScaffolder
from mcp_scaffold.template import TemplateRenderer


@pytest.fixture()
def scaffolder() -> ServerScaffolder:
    return ServerScaffolder(TemplateRenderer())


def test_scaffolder_creates_expected_structure(
    tmp_path: Path, scaffolder: ServerScaffolder, config: ServerConfig
):
    result = scaffolder.create(config, tmp_path)
    server_dir = tmp_path / "google-docs-mcp"

    assert result.server_dir == server_dir.resolve()
    expected_files = [
        server_dir / "src" / "index.ts",
        server_dir / "package.json",
        server_dir / "tsconfig.json",
        server_dir / ".gitignore",
        server_dir / "mcp.json",
    ]
    for path in expected_files:
        assert path.exists(), f"expected {path} to exist"
    assert len(result.files_written) == len(expected_files)
    assert result.warnings == []


def test_server_stub_uses_normalized_class_name(
    tmp_path: Path, scaffolder: ServerScaffolder, config: ServerConfig
):
    scaffolder.create(config, tmp_path)
    source = (tmp_path / "google-docs-mcp" / "src" / "index.ts").read_text(encoding="utf-8")

    assert "class GoogleDocsMcp {" in source
    assert "const server = new GoogleDocsMcp();" in source
    assert 'const SERVER_NAME = "google-docs-mcp";' in source
    assert "{{" not in source


def test_manifest_written_as_json(tmp_path: Path, scaffolder: ServerScaffolder, config: ServerConfig):
    scaffolder.create(config, tmp_path)
    manifest = json.loads((tmp_path / "google-docs-mcp" / "package.json").read_text(encoding="utf-8"))
    assert manifest["name"] == "google-docs-mcp"


def test_gitignore_covers_node_artifacts(tmp_path: Path, scaffolder: ServerScaffolder, config: ServerConfig):
    scaffolder.create(config, tmp_path)
    lines = (tmp_path / "google-docs-mcp" / ".gitignore").read_text(encoding="utf-8").splitlines()

    for entry in ("node_modules/", "build/", "*.log", "report.[0-9]*.[0-9]*.[0-9]*.[0-9]*.json", ".env*", "!.env.example"):
        assert entry in lines


def test_scaffolder_respects_force(tmp_path: Path, scaffolder: ServerScaffolder):
    config = ServerConfig.from_answers("demo")
    scaffolder.create(config, tmp_path)
    gitignore = tmp_path / "demo" / ".gitignore"
    gitignore.write_text("custom", encoding="utf-8")

    with pytest.raises(FileExistsError):
        scaffolder.create(config, tmp_path)
    assert gitignore.read_text(encoding="utf-8") == "custom"

    scaffolder.create(config, tmp_path, force=True)
    assert gitignore.read_text(encoding="utf-8").startswith("# Dependency directories")


def test_directory_failure_reports_stage(tmp_path: Path, scaffolder: ServerScaffolder):
    (tmp_path / "demo").write_text("not a directory", encoding="utf-8")

    with pytest.raises(ScaffoldError) as excinfo:
        scaffolder.create(ServerConfig.from_answers("demo"), tmp_path)
    assert excinfo.value.stage is ScaffoldStage.DIRECTORIES


def test_manifest_write_failure_reports_stage(
    tmp_path: Path, scaffolder: ServerScaffolder, monkeypatch: pytest.MonkeyPatch
):
    original_write_text = Path.write_text

    def failing_write_text(self, *args, **kwargs):
        if self.name == "package.json":
            raise PermissionError("read-only")
        return original_write_text(self, *args, **kwargs)

    monkeypatch.setattr(Path, "write_text", failing_write_text)

    with pytest.raises(ScaffoldError) as excinfo:
        scaffolder.create(ServerConfig.from_answers("demo"), tmp_path)
    assert excinfo.value.stage is ScaffoldStage.MANIFEST
    assert (tmp_path / "demo" / "src" / "index.ts").exists()


def test_gitignore_failure_is_only_a_warning(
    tmp_path: Path, scaffolder: ServerScaffolder, monkeypatch: pytest.MonkeyPatch
):
    original_write_text = Path.write_text

    def failing_write_text(self, *args, **kwargs):
        if self.name == ".gitignore":
            raise PermissionError("read-only")
        return original_write_text(self, *args, **kwargs)

    monkeypatch.setattr(Path, "write_text", failing_write_text)

    result = scaffolder.create(ServerConfig.from_answers("demo"), tmp_path)
    assert len(result.warnings) == 1
    assert ".gitignore" in result.warnings[0]
    assert (tmp_path / "demo" / "mcp.json").exists()
