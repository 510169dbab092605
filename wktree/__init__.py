"""
wktree
"""


#: Per-level indent width used when pretty printing.
DEFAULT_INDENT = 2

#: Absolute tolerance used when comparing numbers in two trees.
DEFAULT_TOLERANCE = 1e-10


class WKTError(Exception):
    """Base class for located lexer and parser failures."""

    def __init__(self, message, position, line, column):
        super().__init__(message)
        self.position = position
        self.line = line
        self.column = column
