"""
Interactive session state machine.

``step`` takes the current Session and one raw input line and returns
the Action to perform together with the next Session. EXIT returns no
next Session, which ends the loop.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Sequence

from ..errors import AnalyzerError, CommandSyntaxError, NoSessionError
from ..java_parser import CompilationUnit, load_directory, types_of
from ..tools import many_constructors
from .grammar import Command, Exit, Help, ListTypes, Load, ManyConstructors, parse_command

logger = logging.getLogger(__name__)

# directory -> one entry per source file, None for files that failed to parse
Loader = Callable[[str], Sequence[CompilationUnit | None]]

HELP_TEXT = (
    "Commands:",
    "  help | h                         Show this help",
    "  exit | quit | q                  Leave the interactive session",
    '  load "<dir>"                     Load the Java files under <dir>',
    "  list                             List the types currently loaded",
    "  mc | many-constructors th <n>    Classes with <n> or more non-private constructors",
)

EXIT_MESSAGE = "Exit..."


@dataclass(frozen=True)
class Session:
    """The loaded codebase: None until the first successful load."""
    cus: tuple[CompilationUnit, ...] | None = None

    @property
    def is_loaded(self) -> bool:
        return self.cus is not None


@dataclass(frozen=True)
class Action:
    """Output of one step; ``terminal`` stops the loop."""
    lines: tuple[str, ...] = ()
    terminal: bool = False


StepResult = tuple[Action, Session | None]


# ============================================================================
# Command Handlers
# ============================================================================

def _help(session: Session, command: Help, loader: Loader) -> StepResult:
    return Action(HELP_TEXT), session


def _exit(session: Session, command: Exit, loader: Loader) -> StepResult:
    return Action((EXIT_MESSAGE,), terminal=True), None


def _load(session: Session, command: Load, loader: Loader) -> StepResult:
    loaded = loader(command.path)
    # Built in full before the new session exists
    cus = tuple(cu for cu in loaded if cu is not None)
    logger.info("Loaded %d of %d files from %s", len(cus), len(loaded), command.path)
    lines = (f"Loading {command.path}", f"Java files loaded: {len(cus)}")
    return Action(lines), Session(cus=cus)


def _list(session: Session, command: ListTypes, loader: Loader) -> StepResult:
    if not session.cus:
        raise NoSessionError()
    lines = ["Listing types currently loaded:"]
    for cu in session.cus:
        for t in types_of(cu):
            lines.append(f" * {t.qualified_name}")
    return Action(tuple(lines)), session


def _many_constructors(session: Session, command: ManyConstructors, loader: Loader) -> StepResult:
    # No session behaves as an empty codebase
    report = many_constructors(session.cus, command.threshold) if session.is_loaded else []
    return Action(tuple(str(line) for line in report)), session


_HANDLERS: dict[type, Callable[[Session, Command, Loader], StepResult]] = {
    Help: _help,
    Exit: _exit,
    Load: _load,
    ListTypes: _list,
    ManyConstructors: _many_constructors,
}


# ============================================================================
# Public API
# ============================================================================

def execute(session: Session, command: Command, loader: Loader | None = None) -> StepResult:
    """
    Apply a parsed command to a session.

    Args:
        session: Current session
        command: Parsed command
        loader: AST provider used by LOAD (defaults to the global parser)

    Returns:
        (action, next session); next session is None after EXIT
    """
    handler = _HANDLERS[type(command)]
    try:
        return handler(session, command, loader or load_directory)
    except AnalyzerError as e:
        return Action((str(e),)), session


def step(session: Session, line: str, loader: Loader | None = None) -> StepResult:
    """Parse one raw input line and apply it to the session."""
    try:
        command = parse_command(line)
    except CommandSyntaxError as e:
        return Action((f"ERROR: {e}",)), session
    return execute(session, command, loader)
