"""
Exceptions raised by Java Analyzer.

Every failure the interactive interpreter can hit derives from
``AnalyzerError`` so it can be reported as a plain message.
"""


class AnalyzerError(Exception):
    """Base exception for all analyzer errors."""


class CommandSyntaxError(AnalyzerError):
    """Raised when an interactive command line does not match the grammar."""

    def __init__(self, line: str, column: int, expected: list[str]):
        self.line = line
        self.column = column
        self.expected = expected
        if expected:
            wanted = ", ".join(expected)
            message = f"Parse error at column {column}: expected one of {wanted}"
        else:
            message = f"Parse error at column {column}: unexpected input"
        super().__init__(f"{message}\n  {line}\n  {' ' * (column - 1)}^")


class ConfigurationError(AnalyzerError):
    """Raised for missing or invalid batch arguments and bad environment settings."""

    def __init__(self, message: str, errors: list[str] | None = None):
        self.errors = errors or [message]
        super().__init__(message)


class NoSessionError(AnalyzerError):
    """Raised when a command needs loaded types but none are loaded."""

    def __init__(self, message: str = "No classes loaded. Use <load> first"):
        super().__init__(message)
