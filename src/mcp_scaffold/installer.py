"""Dependency installation through an external package manager."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

__all__ = ["DEFAULT_INSTALL_COMMAND", "InstallResult", "run_install"]


LOGGER = logging.getLogger(__name__)

DEFAULT_INSTALL_COMMAND: tuple[str, ...] = ("npm", "install")

COMMAND_NOT_FOUND = 127


@dataclass(frozen=True)
class InstallResult:
    """Exit status and captured output of an install command."""

    command: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def run_install(
    directory: str | Path,
    command: Sequence[str] = DEFAULT_INSTALL_COMMAND,
) -> InstallResult:
    """Run ``command`` inside ``directory`` and capture its output.

    A failing command is reported through :attr:`InstallResult.returncode`
    rather than an exception. An executable that cannot be started yields
    return code 127, as does an empty ``command``.
    """

    argv = tuple(command)
    if not argv:
        LOGGER.error("No install command given")
        return InstallResult(command=argv, returncode=COMMAND_NOT_FOUND, stderr="no install command given")
    LOGGER.info("Installing dependencies with '%s'", " ".join(argv))
    try:
        completed = subprocess.run(
            list(argv),
            cwd=Path(directory),
            capture_output=True,
            check=False,
            text=True,
        )
    except OSError as exc:
        LOGGER.error("Could not start '%s': %s", argv[0], exc)
        return InstallResult(command=argv, returncode=COMMAND_NOT_FOUND, stderr=str(exc))

    result = InstallResult(
        command=argv,
        returncode=completed.returncode,
        stdout=completed.stdout or "",
        stderr=completed.stderr or "",
    )
    if result.stdout:
        LOGGER.debug("%s", result.stdout)
    if not result.ok:
        LOGGER.error("'%s' exited with status %d: %s", " ".join(argv), result.returncode, result.stderr.strip())
    return result
