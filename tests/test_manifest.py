from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from mcp_scaffold.config import ServerConfig
from mcp_scaffold.manifest import (
    PackageManifest,
    build_client_config,
    build_package_manifest,
    build_tsconfig,
    to_json,
)


def test_package_manifest_uses_single_sanitized_name(config: ServerConfig):
    payload = json.loads(to_json(build_package_manifest(config)))
    assert payload["name"] == "google-docs-mcp"
    assert payload["bin"] == {"google-docs-mcp": "build/index.js"}
    assert payload["type"] == "module"
    assert payload["publishConfig"] == {"access": "public"}
    assert payload["devDependencies"]["typescript"] == "^5.8.2"
    assert payload["dependencies"]["@modelcontextprotocol/sdk"] == "1.8.0"
    assert set(payload["scripts"]) == {"build", "watch", "inspector", "start"}


def test_package_manifest_forbids_unknown_fields():
    with pytest.raises(ValidationError):
        PackageManifest(name="demo", homepage="https://example.invalid")


def test_tsconfig_uses_compiler_aliases():
    payload = json.loads(to_json(build_tsconfig()))
    options = payload["compilerOptions"]
    assert options["moduleResolution"] == "Node16"
    assert options["outDir"] == "./build"
    assert options["rootDir"] == "./src"
    assert options["strict"] is True
    assert payload["include"] == ["src/**/*"]
    assert payload["exclude"] == ["node_modules"]


def test_client_config_carries_launch_settings(config: ServerConfig, tmp_path: Path):
    payload = json.loads(to_json(build_client_config(config, tmp_path)))
    launch = payload["mcpServers"]["google-docs-mcp"]
    assert launch == {
        "command": "node",
        "args": ["--stdio", "-y"],
        "env": {"API_KEY": "secret", "DATA": "value"},
    }


def test_client_config_defaults_to_built_entry_point(tmp_path: Path):
    config = ServerConfig.from_answers("demo")
    client = build_client_config(config, tmp_path / "demo")
    assert client.mcp_servers["demo"].args == [str(tmp_path / "demo" / "build" / "index.js")]


def test_to_json_is_indented_with_trailing_newline():
    text = to_json(build_tsconfig())
    assert text.endswith("}\n")
    assert text.splitlines()[1].startswith('  "compilerOptions"')
