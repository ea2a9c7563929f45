"""Orchestration of the scaffold and install stages."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Sequence

from .config import ServerConfig
from .errors import ScaffoldStage
from .installer import DEFAULT_INSTALL_COMMAND, InstallResult, run_install
from .scaffold import ServerScaffolder

__all__ = ["Installer", "ScaffoldWorkflow", "WorkflowReport"]


LOGGER = logging.getLogger(__name__)

Installer = Callable[[Path, Sequence[str]], InstallResult]


@dataclass(slots=True)
class WorkflowReport:
    """Summary of a workflow run.

    ``install`` is ``None`` when installation was skipped. A report whose
    install failed still lists every file that was written.
    """

    server_dir: Path
    files_written: list[Path] = field(default_factory=list)
    install: InstallResult | None = None
    warnings: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.install is None or self.install.ok

    @property
    def failed_stage(self) -> ScaffoldStage | None:
        return None if self.ok else ScaffoldStage.INSTALL


class ScaffoldWorkflow:
    """Write the server files, then install its dependencies."""

    def __init__(
        self,
        scaffolder: ServerScaffolder | None = None,
        installer: Installer = run_install,
        install_command: Sequence[str] = DEFAULT_INSTALL_COMMAND,
    ) -> None:
        self._scaffolder = scaffolder or ServerScaffolder()
        self._installer = installer
        self._install_command = tuple(install_command)

    def run(
        self,
        config: ServerConfig,
        base_dir: str | Path,
        *,
        install: bool = True,
        force: bool = False,
    ) -> WorkflowReport:
        """Scaffold ``config`` under ``base_dir``.

        Errors from the scaffolding stages propagate as
        :class:`~mcp_scaffold.errors.ScaffoldError`. A failing install is
        recorded on the returned report instead.
        """

        LOGGER.info("Creating MCP server '%s'", config.name)
        scaffolded = self._scaffolder.create(config, base_dir, force=force)
        report = WorkflowReport(
            server_dir=scaffolded.server_dir,
            files_written=list(scaffolded.files_written),
            warnings=list(scaffolded.warnings),
        )

        if not install:
            LOGGER.info("Skipping dependency installation")
            return report

        report.install = self._installer(scaffolded.server_dir, self._install_command)
        if report.install.ok:
            LOGGER.info("Dependencies installed.")
        return report
