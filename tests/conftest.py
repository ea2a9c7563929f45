from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from mcp_scaffold.config import ServerConfig  # noqa: E402


@pytest.fixture()
def config() -> ServerConfig:
    """A fully populated configuration for the ``google-docs-mcp`` server."""

    return ServerConfig.from_answers(
        "google-docs-mcp",
        command="node",
        args="--stdio, -y",
        env="API_KEY=secret,DATA=value",
    )
