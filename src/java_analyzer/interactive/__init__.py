"""
Interactive mode: load a codebase once and query it repeatedly.

Key Components:
- parse_command(): Command grammar
- Session / step(): Session state machine
- run_interactive(): Prompt loop
"""

from .grammar import (
    Command,
    Exit,
    Help,
    ListTypes,
    Load,
    ManyConstructors,
    parse_command,
)
from .repl import run_interactive
from .session import (
    EXIT_MESSAGE,
    HELP_TEXT,
    Action,
    Loader,
    Session,
    execute,
    step,
)

__all__ = [
    # Grammar
    "Command",
    "Help",
    "Exit",
    "Load",
    "ListTypes",
    "ManyConstructors",
    "parse_command",
    # Session
    "Action",
    "Loader",
    "Session",
    "execute",
    "step",
    "HELP_TEXT",
    "EXIT_MESSAGE",
    # Loop
    "run_interactive",
]
