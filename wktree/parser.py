from wktree import WKTError
from wktree.lexer import to_float, tokenize, TokenType
from wktree.node import Node


class Parser:
    """Recursive descent parser over a token list.

    The grammar is::

        Node    := IDENT '[' Content ']'
        Content := (Item (',' Item)*)?
        Item    := STRING | NUMBER | Node | <empty>

    Numbers and children are collected in source order into their own
    lists, regardless of how they are interleaved. Empty items (``,,``)
    add nothing. Only the first string in a section is kept.

    Parsing stops at the first violation with a :class:`ParseError`; there
    is no recovery and no partial tree.
    """
    def __init__(self, tokens):
        self.tokens = tokens
        self.current = 0

    def parse(self):
        """Parse the token list into a single root :class:`Node`."""
        if self._at_end():
            self._error("Empty input")
        node = self._parse_node()
        if not self._at_end():
            self._error("Unexpected token after end of input: {}".format(
                self._peek().value))
        return node

    def _parse_node(self):
        name = self._consume(TokenType.IDENTIFIER, "Expected section name")
        node = Node(name.value, source_start=name.position)
        self._consume(TokenType.LBRACKET, "Expected '[' after section name")
        self._parse_content(node)
        close = self._consume(TokenType.RBRACKET,
                              "Expected ']' to close section")
        node.source_end = close.position + 1
        return node

    def _parse_content(self, node):
        expect_separator = False
        while not self._check(TokenType.RBRACKET) and not self._at_end():
            token = self._peek()
            if token.type is TokenType.COMMA:
                self._advance()
                expect_separator = False
                continue
            if expect_separator:
                self._error("Expected ',' or ']' (got {}: '{}')".format(
                    token.type_name, token.value))
            if token.type is TokenType.STRING:
                self._advance()
                if node.string_value is None:
                    node.string_value = token.value
            elif token.type is TokenType.NUMBER:
                try:
                    value = to_float(token.value)
                except ValueError:
                    self._error("Invalid number: {}".format(token.value))
                self._advance()
                node.add_number(value)
            elif token.type is TokenType.IDENTIFIER:
                node.add_child(self._parse_node())
            else:
                self._error("Unexpected token in section content: {}".format(
                    token.type_name))
            expect_separator = True

    def _peek(self):
        return self.tokens[self.current]

    def _advance(self):
        token = self.tokens[self.current]
        if not self._at_end():
            self.current += 1
        return token

    def _check(self, type):
        if self._at_end():
            return False
        return self._peek().type is type

    def _consume(self, type, msg):
        if self._check(type):
            return self._advance()
        token = self._peek()
        self._error("{} (got {}: '{}')".format(msg, token.type_name,
                                               token.value))

    def _at_end(self):
        return self._peek().type is TokenType.END

    def _error(self, msg):
        raise ParseError(msg, self._peek())


def parse(text):
    """Parse WKT text into a root :class:`wktree.node.Node`.

    Raises :class:`wktree.lexer.LexerError` or :class:`ParseError` on
    malformed input.
    """
    return Parser(tokenize(text)).parse()


class ParseError(WKTError):
    """Structural violation of the grammar."""

    def __init__(self, msg, token):
        super().__init__(
            "Parse error at line {}, column {}: {}".format(
                token.line, token.column, msg),
            token.position, token.line, token.column)
        self.token = token
