"""Utilities for scaffolding new MCP servers.

The package exposes helpers for converting arbitrary server names into
identifier safe class names, renders the boilerplate of a TypeScript MCP server
and installs its dependencies. Everything can be reused programmatically or via
the ``create-mcp-server`` command line interface.
"""

from __future__ import annotations

from .config import ServerConfig
from .errors import PromptAborted, ScaffoldError, ScaffoldStage
from .installer import InstallResult, run_install
from .naming import normalize_identifier, parse_arguments, parse_environment, sanitize_name
from .prompt import PromptSession, open_prompt_session
from .scaffold import ScaffoldResult, ServerScaffolder
from .template import TemplateRenderer, TemplateRenderingError
from .workflow import ScaffoldWorkflow, WorkflowReport

__all__ = [
    "InstallResult",
    "PromptAborted",
    "PromptSession",
    "ScaffoldError",
    "ScaffoldResult",
    "ScaffoldStage",
    "ScaffoldWorkflow",
    "ServerConfig",
    "ServerScaffolder",
    "TemplateRenderer",
    "TemplateRenderingError",
    "WorkflowReport",
    "normalize_identifier",
    "open_prompt_session",
    "parse_arguments",
    "parse_environment",
    "run_install",
    "sanitize_name",
]

__version__ = "0.1.0"
