"""Configuration helpers shared by the server scaffolder and CLI."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Mapping

from .naming import normalize_identifier, parse_arguments, parse_environment, sanitize_name

_CLASS_IDENTIFIER = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")


@dataclass(slots=True)
class ServerConfig:
    """Derived identifiers and launch settings describing a new MCP server.

    Attributes
    ----------
    name:
        The server name provided by the user, with whitespace collapsed. It is
        used verbatim in the generated server stub and client registration.
    directory_name:
        The name of the directory created for the server.
    package_name:
        The ``name`` and ``bin`` key written to ``package.json``. Shares the
        sanitization policy of :attr:`directory_name`.
    class_name:
        The TypeScript class name, produced by
        :func:`~mcp_scaffold.naming.normalize_identifier`.
    command:
        Executable used by MCP clients to launch the server.
    args:
        Arguments passed to :attr:`command`.
    env:
        Environment variables exported to the server process.
    description:
        Short description for the package manifest.
    """

    name: str
    directory_name: str
    package_name: str
    class_name: str
    command: str = "node"
    args: tuple[str, ...] = ()
    env: dict[str, str] = field(default_factory=dict)
    description: str = "MCP server"

    @classmethod
    def from_answers(
        cls,
        name: str,
        *,
        command: str = "node",
        args: str = "",
        env: str = "",
        description: str = "",
    ) -> "ServerConfig":
        """Build a :class:`ServerConfig` from raw prompt answers.

        ``args`` is a comma separated list and ``env`` a comma separated list
        of ``KEY=VALUE`` pairs, matching what the interactive prompts accept.
        """

        normalized_name = " ".join(name.split())
        if not normalized_name:
            raise ValueError("server name must not be empty")

        sanitized = sanitize_name(normalized_name)
        if not sanitized.strip("-"):
            raise ValueError(
                f"server name '{normalized_name}' contains no usable characters"
            )

        class_name = normalize_identifier(normalized_name.replace(" ", "-"))
        if not _CLASS_IDENTIFIER.fullmatch(class_name):
            raise ValueError(
                f"server name '{normalized_name}' does not produce a valid class name "
                f"(got '{class_name}')"
            )

        return cls(
            name=normalized_name,
            directory_name=sanitized,
            package_name=sanitized,
            class_name=class_name,
            command=command.strip() or "node",
            args=parse_arguments(args),
            env=parse_environment(env),
            description=description.strip() or "MCP server",
        )

    def context(self) -> Mapping[str, Any]:
        """Return a dictionary compatible with the templating helpers."""

        return {
            "name": self.name,
            "directory_name": self.directory_name,
            "package_name": self.package_name,
            "class_name": self.class_name,
            "command": self.command,
            "args": list(self.args),
            "env": dict(self.env),
            "description": self.description,
        }
