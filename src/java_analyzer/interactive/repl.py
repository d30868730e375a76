"""Read-eval-print loop for the interactive mode."""

import logging
import sys
from typing import TextIO

from ..config import get_config
from .session import EXIT_MESSAGE, Loader, Session, step

logger = logging.getLogger(__name__)


def _read_line(stdin: TextIO) -> str | None:
    """Read one line without its terminator; None at end of input."""
    try:
        raw = stdin.readline()
    except KeyboardInterrupt:
        return None
    if raw == "":
        return None
    return raw.rstrip("\r\n")


def run_interactive(
    session: Session | None = None,
    loader: Loader | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    prompt: str | None = None,
) -> None:
    """
    Run the interactive loop until EXIT or end of input.

    Args:
        session: Starting session (empty by default)
        loader: AST provider used by LOAD
        stdin: Line source (default: sys.stdin)
        stdout: Output stream (default: sys.stdout)
        prompt: Prompt text (default: from config)
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    prompt = get_config().prompt if prompt is None else prompt
    current: Session | None = session or Session()

    while current is not None:
        stdout.write(prompt)
        stdout.flush()

        line = _read_line(stdin)
        if line is None:
            logger.debug("End of input, leaving interactive mode")
            print(file=stdout)
            print(EXIT_MESSAGE, file=stdout)
            break

        action, current = step(current, line, loader)
        for out in action.lines:
            print(out, file=stdout)
        if action.terminal:
            break
