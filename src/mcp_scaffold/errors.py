"""Custom exception types raised while scaffolding a server."""

from __future__ import annotations

from enum import Enum


class ScaffoldStage(str, Enum):
    """Steps of the scaffolding workflow, in execution order."""

    DIRECTORIES = "directories"
    SOURCE = "source"
    MANIFEST = "manifest"
    TSCONFIG = "tsconfig"
    GITIGNORE = "gitignore"
    CLIENT_CONFIG = "client_config"
    INSTALL = "install"


class ScaffoldError(RuntimeError):
    """Raised when a scaffolding stage cannot be completed."""

    def __init__(self, stage: ScaffoldStage, message: str) -> None:
        super().__init__(f"{stage.value}: {message}")
        self.stage = stage


class PromptAborted(RuntimeError):
    """Raised when the prompt input ends before an answer was given."""
