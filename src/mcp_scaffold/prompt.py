"""Interactive prompts backed by an explicitly owned input stream."""

from __future__ import annotations

import logging
import sys
from types import TracebackType
from typing import Mapping, Optional, TextIO

from .errors import PromptAborted

__all__ = ["PromptSession", "collect_answers", "open_prompt_session"]


LOGGER = logging.getLogger(__name__)

TERMINAL_DEVICE = "/dev/tty"

QUESTIONS: tuple[tuple[str, str], ...] = (
    ("name", "MCP server name: "),
    ("command", "Launch command (e.g. node): "),
    ("args", "Arguments (comma separated, e.g. --version, -y): "),
    ("env", "Environment variables (KEY=VALUE, comma separated, e.g. API_KEY=abc,DATA=xyz): "),
)


class PromptSession:
    """Ask questions on ``output`` and read answers from ``input``.

    The session closes ``input`` on exit only when ``owns_input`` is set, so
    the process' standard streams are never closed.
    """

    def __init__(self, input: TextIO, output: TextIO, *, owns_input: bool = False) -> None:
        self._input = input
        self._output = output
        self._owns_input = owns_input
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def ask(self, query: str, default: str = "") -> str:
        if self._closed:
            raise RuntimeError("prompt session is closed")
        self._output.write(query)
        self._output.flush()
        line = self._input.readline()
        if not line:
            raise PromptAborted(f"input ended while waiting for: {query.strip()}")
        answer = line.strip()
        return answer or default

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_input:
            self._input.close()

    def __enter__(self) -> "PromptSession":
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.close()


def open_prompt_session(
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    *,
    terminal: str = TERMINAL_DEVICE,
) -> PromptSession:
    """Open a session reading from the user's terminal.

    When standard input is redirected the controlling terminal is opened
    instead so the prompts still reach the user. Without a controlling
    terminal the redirected input is used as is.
    """

    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    if stdin.isatty():
        return PromptSession(stdin, stdout)

    try:
        tty = open(terminal, "r", encoding="utf-8")
    except OSError:
        LOGGER.debug("No controlling terminal at %s, reading answers from stdin", terminal)
        return PromptSession(stdin, stdout)
    return PromptSession(tty, stdout, owns_input=True)


def collect_answers(session: PromptSession, provided: Mapping[str, str | None]) -> dict[str, str]:
    """Return prompt answers, only asking for values missing from ``provided``."""

    answers: dict[str, str] = {}
    for key, query in QUESTIONS:
        value = provided.get(key)
        if value is None:
            value = session.ask(query)
        answers[key] = value
    return answers
