from enum import Enum
import math
import string

import attr

from wktree import WKTError


DIGITS = frozenset(string.digits)
IDENT_START = frozenset(string.ascii_letters + '_')
IDENT_CHARS = IDENT_START | DIGITS
NUMBER_START = DIGITS | frozenset('+-.')
SIGNS = frozenset('+-')
EXPONENT = frozenset('eE')
WHITESPACE = frozenset(' \t\r\n')
NONZERO_DIGITS = frozenset('123456789')


class TokenType(Enum):
    IDENTIFIER = 'Identifier'
    STRING = 'String'
    NUMBER = 'Number'
    LBRACKET = 'LeftBracket'
    RBRACKET = 'RightBracket'
    COMMA = 'Comma'
    END = 'EndOfInput'


PUNCTUATION = {
    '[': TokenType.LBRACKET,
    ']': TokenType.RBRACKET,
    ',': TokenType.COMMA,
}


@attr.s(frozen=True)
class Token:
    """A single lexical token.

    ``position`` is the 0-based offset of the first character of the token
    in the source text; ``line`` and ``column`` are 1-based and refer to
    the same character. For ``STRING`` tokens ``value`` holds the text
    between the quotes, with any backslash escapes left in place.
    """
    type = attr.ib()
    value = attr.ib(default='')
    position = attr.ib(default=0)
    line = attr.ib(default=1)
    column = attr.ib(default=1)

    @property
    def type_name(self):
        return self.type.value


class Lexer:
    """Scanner turning WKT text into a flat list of tokens.

    The lexer knows nothing about nesting. It stops at the first malformed
    character sequence and raises :class:`LexerError`; no partial token
    list is ever returned::

        tokens = Lexer('UNIT["Degree",0.0174532925199433]').tokenize()

    """
    def __init__(self, text):
        self.text = text
        self.current = 0
        self.line = 1
        self.column = 1
        self._start = (0, 1, 1)

    def tokenize(self):
        """Return every token in the text, ending with a single ``END``."""
        tokens = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.type is TokenType.END:
                return tokens

    def next_token(self):
        self._skip_whitespace()
        self._start = (self.current, self.line, self.column)
        if self._at_end():
            return self._token(TokenType.END)
        c = self._advance()
        if c in PUNCTUATION:
            return self._token(PUNCTUATION[c], c)
        if c == '"':
            return self._read_string()
        if c in IDENT_START:
            return self._read_identifier()
        if c in NUMBER_START:
            return self._read_number()
        self._error("Unexpected character: '{}'".format(c), *self._start)

    def _skip_whitespace(self):
        while not self._at_end() and self._peek() in WHITESPACE:
            self._advance()

    def _read_identifier(self):
        start = self._start[0]
        while self._peek() in IDENT_CHARS:
            self._advance()
        return self._token(TokenType.IDENTIFIER, self.text[start:self.current])

    def _read_string(self):
        start = self.current
        while not self._at_end() and self._peek() != '"':
            if self._peek() == '\\' and self.current + 1 < len(self.text):
                self._advance()
            self._advance()
        if self._at_end():
            self._error("Unterminated string", *self._start)
        value = self.text[start:self.current]
        self._advance()
        return self._token(TokenType.STRING, value)

    def _read_number(self):
        start = self._start[0]
        if self.text[start] in SIGNS and self._peek() not in NUMBER_START - SIGNS:
            self._error("Invalid number: expected digit after sign")
        self._skip_digits()
        if self._peek() == '.':
            self._advance()
            self._skip_digits()
        if self._peek() in EXPONENT:
            self._advance()
            if self._peek() in SIGNS:
                self._advance()
            if self._peek() not in DIGITS:
                self._error("Invalid number: expected exponent digits")
            self._skip_digits()
        value = self.text[start:self.current]
        try:
            to_float(value)
        except ValueError:
            self._error("Invalid number format: {}".format(value),
                        *self._start)
        return self._token(TokenType.NUMBER, value)

    def _skip_digits(self):
        while self._peek() in DIGITS:
            self._advance()

    def _peek(self):
        if self._at_end():
            return ''
        return self.text[self.current]

    def _advance(self):
        c = self.text[self.current]
        self.current += 1
        if c == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return c

    def _at_end(self):
        return self.current >= len(self.text)

    def _token(self, type, value=''):
        return Token(type, value, *self._start)

    def _error(self, msg, position=None, line=None, column=None):
        if position is None:
            position, line, column = self.current, self.line, self.column
        raise LexerError(
            "Lexer error at line {}, column {}: {}".format(line, column, msg),
            position, line, column)


def to_float(text):
    """Convert a number literal, rejecting values a double cannot hold.

    ``float()`` turns ``1e999`` into infinity and ``1e-999`` into zero;
    both raise :class:`ValueError` here instead.
    """
    value = float(text)
    if math.isinf(value):
        raise ValueError("Number out of range: {}".format(text))
    mantissa = text.lower().partition('e')[0]
    if value == 0 and NONZERO_DIGITS.intersection(mantissa):
        raise ValueError("Number out of range: {}".format(text))
    return value


def tokenize(text):
    """Tokenize ``text``, raising :class:`LexerError` on malformed input."""
    return Lexer(text).tokenize()


class LexerError(WKTError):
    """Malformed character sequence in the input."""
    pass
