"""Command line interface for creating MCP servers."""

from __future__ import annotations

import argparse
import logging
import shlex
from pathlib import Path
from typing import Sequence

from .config import ServerConfig
from .errors import PromptAborted, ScaffoldError
from .prompt import collect_answers, open_prompt_session
from .workflow import ScaffoldWorkflow, WorkflowReport

LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_SCAFFOLD_FAILED = 1
EXIT_INVALID_INPUT = 2
EXIT_INSTALL_FAILED = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-mcp-server",
        description="Scaffold a TypeScript MCP server project",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        type=Path,
        default=Path.cwd(),
        help="Directory in which the server directory is created",
    )
    parser.add_argument("--name", help="Server name (prompted for when omitted)")
    parser.add_argument("--command", dest="launch_command", help="Launch command, e.g. node")
    parser.add_argument("--args", dest="launch_args", help="Comma separated launch arguments")
    parser.add_argument("--env", help="Comma separated KEY=VALUE environment variables")
    parser.add_argument("--description", default="", help="Package description")
    parser.add_argument(
        "--package-manager",
        default="npm install",
        help="Command used to install dependencies",
    )
    parser.add_argument(
        "--skip-install",
        action="store_true",
        help="Write the project files without installing dependencies",
    )
    parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Overwrite existing files instead of failing",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _gather_answers(args: argparse.Namespace) -> dict[str, str]:
    provided = {
        "name": args.name,
        "command": args.launch_command,
        "args": args.launch_args,
        "env": args.env,
    }
    if all(value is not None for value in provided.values()):
        return {key: str(value) for key, value in provided.items()}
    with open_prompt_session() as session:
        return collect_answers(session, provided)


def _print_summary(report: WorkflowReport) -> None:
    print(f"\nServer project created at {report.server_dir}")
    print("\nRun the following commands to get started:")
    print(f"cd {report.server_dir}")
    print("npm run build")
    print("npm start")


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    install_command = shlex.split(args.package_manager)
    if not install_command:
        parser.error("--package-manager must not be empty")
    _configure_logging(args.verbose)

    try:
        answers = _gather_answers(args)
        config = ServerConfig.from_answers(
            answers["name"],
            command=answers["command"],
            args=answers["args"],
            env=answers["env"],
            description=args.description,
        )
    except PromptAborted as exc:
        LOGGER.error("%s", exc)
        return EXIT_INVALID_INPUT
    except ValueError as exc:
        LOGGER.error("Invalid input: %s", exc)
        return EXIT_INVALID_INPUT

    workflow = ScaffoldWorkflow(install_command=install_command)
    try:
        report = workflow.run(
            config,
            args.directory,
            install=not args.skip_install,
            force=args.force,
        )
    except FileExistsError as exc:
        LOGGER.error("%s (use --force to overwrite)", exc)
        return EXIT_SCAFFOLD_FAILED
    except ScaffoldError as exc:
        LOGGER.error("Scaffolding failed during the %s stage: %s", exc.stage.value, exc)
        return EXIT_SCAFFOLD_FAILED

    if not report.ok:
        LOGGER.error(
            "Project files were written to %s but dependency installation failed",
            report.server_dir,
        )
        return EXIT_INSTALL_FAILED

    _print_summary(report)
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
