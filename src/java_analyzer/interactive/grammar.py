"""
Interactive command grammar.

    COMMAND           := HELP | EXIT | LOAD | LIST | MANY_CONSTRUCTORS
    HELP              := "help" | "h"
    EXIT              := "exit" | "quit" | "q"
    LOAD              := "load" WS STRING
    LIST              := "list"
    MANY_CONSTRUCTORS := ("mc" | "many-constructors") WS "th" WS INTEGER
    STRING            := '"' [^"]* '"'
    INTEGER           := [0-9]+
    WS                := [ \\t]+

The whole line must match one alternative. Parsing is hand-written
recursive descent; on failure the error reports the furthest column
reached and what was expected there.
"""

from dataclasses import dataclass
from typing import Callable, Union

from ..errors import CommandSyntaxError


@dataclass(frozen=True)
class Help:
    """Show the usage text."""


@dataclass(frozen=True)
class Exit:
    """Leave the interactive session."""


@dataclass(frozen=True)
class Load:
    """Load every Java file under ``path``, replacing the session."""
    path: str


@dataclass(frozen=True)
class ListTypes:
    """List the types currently loaded."""


@dataclass(frozen=True)
class ManyConstructors:
    """Run the many-constructors query on the loaded session."""
    threshold: int


Command = Union[Help, Exit, Load, ListTypes, ManyConstructors]

_WHITESPACE = " \t"
_END = "end of input"


class _CommandParser:
    """Single-use recursive descent parser over one input line."""

    def __init__(self, line: str):
        self._line = line
        self._pos = 0
        self._fail_pos = 0
        self._expected: set[str] = set()

    def parse(self) -> Command:
        productions: list[Callable[[], Command | None]] = [
            self._parse_help,
            self._parse_exit,
            self._parse_load,
            self._parse_list,
            self._parse_many_constructors,
        ]
        for production in productions:
            self._pos = 0
            command = production()
            if command is not None and self._at_end():
                return command
        raise CommandSyntaxError(self._line, self._fail_pos + 1, sorted(self._expected))

    # ------------------------------------------------------------------
    # Failure tracking
    # ------------------------------------------------------------------

    def _fail(self, *expected: str) -> None:
        if self._pos > self._fail_pos:
            self._fail_pos = self._pos
            self._expected = set(expected)
        elif self._pos == self._fail_pos:
            self._expected.update(expected)

    def _at_end(self) -> bool:
        if self._pos == len(self._line):
            return True
        self._fail(_END)
        return False

    # ------------------------------------------------------------------
    # Terminals
    # ------------------------------------------------------------------

    def _literal(self, *options: str) -> str | None:
        """Match one of the keywords, longest first."""
        for option in sorted(options, key=len, reverse=True):
            if self._line.startswith(option, self._pos):
                self._pos += len(option)
                return option
        self._fail(*(f'"{o}"' for o in options))
        return None

    def _ws(self) -> bool:
        start = self._pos
        while self._pos < len(self._line) and self._line[self._pos] in _WHITESPACE:
            self._pos += 1
        if self._pos == start:
            self._fail("whitespace")
            return False
        return True

    def _string(self) -> str | None:
        """A double-quoted string; returns the contents without quotes."""
        if not self._line.startswith('"', self._pos):
            self._fail("quoted string")
            return None
        close = self._line.find('"', self._pos + 1)
        if close == -1:
            self._pos = len(self._line)
            self._fail('closing \'"\'')
            return None
        value = self._line[self._pos + 1:close]
        self._pos = close + 1
        return value

    def _integer(self) -> int | None:
        start = self._pos
        while self._pos < len(self._line) and self._line[self._pos] in "0123456789":
            self._pos += 1
        if self._pos == start:
            self._fail("integer")
            return None
        return int(self._line[start:self._pos])

    # ------------------------------------------------------------------
    # Productions
    # ------------------------------------------------------------------

    def _parse_help(self) -> Help | None:
        return Help() if self._literal("help", "h") else None

    def _parse_exit(self) -> Exit | None:
        return Exit() if self._literal("exit", "quit", "q") else None

    def _parse_load(self) -> Load | None:
        if not (self._literal("load") and self._ws()):
            return None
        path = self._string()
        return Load(path) if path is not None else None

    def _parse_list(self) -> ListTypes | None:
        return ListTypes() if self._literal("list") else None

    def _parse_many_constructors(self) -> ManyConstructors | None:
        if not (
            self._literal("mc", "many-constructors")
            and self._ws()
            and self._literal("th")
            and self._ws()
        ):
            return None
        threshold = self._integer()
        return ManyConstructors(threshold) if threshold is not None else None


def parse_command(line: str) -> Command:
    """
    Parse one interactive command line.

    Args:
        line: Raw input, without the line terminator

    Returns:
        The parsed command

    Raises:
        CommandSyntaxError: If the line matches no command form
    """
    return _CommandParser(line).parse()
