"""MCP server scaffolding helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from .config import ServerConfig
from .errors import ScaffoldError, ScaffoldStage
from .manifest import build_client_config, build_package_manifest, build_tsconfig, to_json
from .template import TemplateRenderer

__all__ = ["ScaffoldResult", "ServerScaffolder"]


LOGGER = logging.getLogger(__name__)


SERVER_TEMPLATE = """#!/usr/bin/env node
import { Server } from '@modelcontextprotocol/sdk/server/index.js';
import { StdioServerTransport } from '@modelcontextprotocol/sdk/server/stdio.js';
import {
  CallToolRequestSchema,
  ListToolsRequestSchema,
  McpError,
  ErrorCode
} from '@modelcontextprotocol/sdk/types.js';

const SERVER_NAME = {{ name|json }};

class {{ class_name }} {
  private server: Server;

  constructor() {
    this.server = new Server(
      {
        name: SERVER_NAME,
        version: '1.0.0'
      },
      {
        capabilities: {
          resources: {},
          tools: {}
        }
      }
    );

    this.setupToolHandlers();

    this.server.onerror = (error) => console.error(`[${SERVER_NAME} Error]`, error);
    process.on('SIGINT', async () => {
      await this.server.close();
      process.exit(0);
    });
  }

  private setupToolHandlers() {
    this.server.setRequestHandler(ListToolsRequestSchema, async () => ({
      tools: [
        {
          name: 'hello',
          description: 'Say hello',
          inputSchema: {
            type: 'object',
            properties: {
              name: { type: 'string', description: 'Your name' }
            },
            required: ['name']
          }
        }
      ]
    }));

    this.server.setRequestHandler(CallToolRequestSchema, async (request) => {
      if (request.params.name === 'hello') {
        const name = request.params.arguments?.name;
        return { content: [ { type: 'text', text: `Hello, ${name}!` } ] };
      }
      throw new McpError(ErrorCode.MethodNotFound, `Unknown tool: ${request.params.name}`);
    });
  }

  async run() {
    const transport = new StdioServerTransport();
    await this.server.connect(transport);
    console.error(`${SERVER_NAME} running on stdio`);
  }
}

const server = new {{ class_name }}();
server.run().catch(console.error);
"""

GITIGNORE_TEMPLATE = """# Dependency directories
node_modules/

# Build output
build/

# Logs
logs
*.log
npm-debug.log*
yarn-debug.log*
yarn-error.log*
lerna-debug.log*

# Diagnostic reports (https://nodejs.org/api/report.html)
report.[0-9]*.[0-9]*.[0-9]*.[0-9]*.json

# Runtime data
pids
*.pid
*.seed
*.pid.lock

# Optional eslint cache
.eslintcache

# Optional REPL history
.node_repl_history

# dotenv environment variables file
.env*
!.env.example
"""


@dataclass(slots=True)
class ScaffoldResult:
    """Outcome of :meth:`ServerScaffolder.create`."""

    server_dir: Path
    files_written: list[Path] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


@dataclass(slots=True)
class ServerScaffolder:
    """Create the boilerplate of a TypeScript MCP server."""

    renderer: TemplateRenderer

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    def create(
        self,
        config: ServerConfig,
        base_dir: str | Path,
        *,
        force: bool = False,
    ) -> ScaffoldResult:
        """Create the server described by ``config`` inside ``base_dir``.

        Raises :class:`FileExistsError` when a generated file already exists
        and ``force`` is not set, and :class:`ScaffoldError` when a required
        file cannot be written. A ``.gitignore`` that cannot be written only
        adds a warning to the result.
        """

        server_dir = Path(base_dir).expanduser().resolve() / config.directory_name
        try:
            (server_dir / "src").mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ScaffoldError(ScaffoldStage.DIRECTORIES, f"cannot create {server_dir}: {exc}") from exc
        LOGGER.debug("Created %s", server_dir)

        context = config.context()
        files: list[tuple[ScaffoldStage, str, Callable[[], str]]] = [
            (ScaffoldStage.SOURCE, "src/index.ts", lambda: self.renderer.render_string(SERVER_TEMPLATE, context, missing="error")),
            (ScaffoldStage.MANIFEST, "package.json", lambda: to_json(build_package_manifest(config))),
            (ScaffoldStage.TSCONFIG, "tsconfig.json", lambda: to_json(build_tsconfig())),
            (ScaffoldStage.GITIGNORE, ".gitignore", lambda: GITIGNORE_TEMPLATE),
            (ScaffoldStage.CLIENT_CONFIG, "mcp.json", lambda: to_json(build_client_config(config, server_dir))),
        ]

        if not force:
            for _, relative_path, _ in files:
                destination = server_dir / relative_path
                if destination.exists():
                    raise FileExistsError(f"{destination} already exists")

        result = ScaffoldResult(server_dir=server_dir)
        for stage, relative_path, render in files:
            destination = server_dir / relative_path
            try:
                destination.write_text(render(), encoding="utf-8")
            except OSError as exc:
                if stage is ScaffoldStage.GITIGNORE:
                    message = f"could not write {relative_path}: {exc}"
                    LOGGER.warning("%s", message)
                    result.warnings.append(message)
                    continue
                raise ScaffoldError(stage, f"cannot write {relative_path}: {exc}") from exc
            LOGGER.info("%s file created.", relative_path)
            result.files_written.append(destination)

        return result
