"""Schemas for the JSON manifests written into a new server project."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field

from .config import ServerConfig

SDK_DEPENDENCIES: Dict[str, str] = {
    "@modelcontextprotocol/sdk": "1.8.0",
    "@types/node-fetch": "^2.6.12",
    "node-fetch": "^3.3.2",
    "zod-to-json-schema": "^3.23.5",
}

DEV_DEPENDENCIES: Dict[str, str] = {
    "@types/node": "^22.13.10",
    "typescript": "^5.8.2",
    "zod": "^3.24.2",
}

BUILD_SCRIPTS: Dict[str, str] = {
    "build": "tsc && node -e \"require('fs').chmodSync('build/index.js', '755')\"",
    "watch": "tsc --watch",
    "inspector": "npx @modelcontextprotocol/inspector build/index.js",
    "start": "node build/index.js",
}

ENTRY_POINT = "build/index.js"


class PublishConfig(BaseModel):
    """``publishConfig`` block of ``package.json``."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    access: str = "public"


class PackageManifest(BaseModel):
    """The ``package.json`` of a generated server."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    name: str = Field(..., description="Sanitized package name.")
    version: str = "1.0.0"
    description: str = "MCP server"
    license: str = "MIT"
    author: str = ""
    type: str = "module"
    private: bool = False
    bin: Dict[str, str] = Field(default_factory=dict, description="Executable name mapped to the built entry point.")
    files: List[str] = Field(default_factory=lambda: ["build"])
    publish_config: PublishConfig = Field(default_factory=PublishConfig, alias="publishConfig")
    engines: Dict[str, str] = Field(default_factory=lambda: {"node": ">=14"})
    scripts: Dict[str, str] = Field(default_factory=lambda: dict(BUILD_SCRIPTS))
    dependencies: Dict[str, str] = Field(default_factory=lambda: dict(SDK_DEPENDENCIES))
    dev_dependencies: Dict[str, str] = Field(
        default_factory=lambda: dict(DEV_DEPENDENCIES), alias="devDependencies"
    )


class CompilerOptions(BaseModel):
    """``compilerOptions`` block of ``tsconfig.json``."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    target: str = "ES2022"
    module: str = "Node16"
    module_resolution: str = Field("Node16", alias="moduleResolution")
    out_dir: str = Field("./build", alias="outDir")
    root_dir: str = Field("./src", alias="rootDir")
    strict: bool = True
    es_module_interop: bool = Field(True, alias="esModuleInterop")
    skip_lib_check: bool = Field(True, alias="skipLibCheck")
    force_consistent_casing_in_file_names: bool = Field(True, alias="forceConsistentCasingInFileNames")


class TsConfig(BaseModel):
    """The ``tsconfig.json`` of a generated server."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    compiler_options: CompilerOptions = Field(default_factory=CompilerOptions, alias="compilerOptions")
    include: List[str] = Field(default_factory=lambda: ["src/**/*"])
    exclude: List[str] = Field(default_factory=lambda: ["node_modules"])


class ServerLaunch(BaseModel):
    """How an MCP client starts a single server."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    command: str
    args: List[str] = Field(default_factory=list)
    env: Dict[str, str] = Field(default_factory=dict)


class ClientConfig(BaseModel):
    """Registration snippet for MCP client configuration files."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    mcp_servers: Dict[str, ServerLaunch] = Field(default_factory=dict, alias="mcpServers")


def build_package_manifest(config: ServerConfig) -> PackageManifest:
    return PackageManifest(
        name=config.package_name,
        description=config.description,
        bin={config.package_name: ENTRY_POINT},
    )


def build_tsconfig() -> TsConfig:
    return TsConfig()


def build_client_config(config: ServerConfig, server_dir: str | Path) -> ClientConfig:
    """Return the client registration for ``config``.

    When no arguments were supplied the server is launched from its built
    entry point inside ``server_dir``.
    """

    args = list(config.args) or [str(Path(server_dir) / ENTRY_POINT)]
    launch = ServerLaunch(command=config.command, args=args, env=dict(config.env))
    return ClientConfig(mcp_servers={config.name: launch})


def to_json(model: BaseModel) -> str:
    """Serialise ``model`` the way ``npm`` formats its manifests."""

    payload = model.model_dump(mode="json", by_alias=True)
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"


__all__ = [
    "ClientConfig",
    "CompilerOptions",
    "PackageManifest",
    "PublishConfig",
    "ServerLaunch",
    "TsConfig",
    "build_client_config",
    "build_package_manifest",
    "build_tsconfig",
    "to_json",
]
