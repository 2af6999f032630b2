"""Recursive-descent parser core."""

import logging

from jackpy.lexer import Token, TokenKind
from jackpy.parser.errors import JackSyntaxError, UnexpectedEndOfInput, describe_expected
from jackpy.parser.marker import Marker
from jackpy.parser.options import ParserOptions
from jackpy.parser.token_source import TokenSource
from jackpy.parser.tree_sink import XmlTreeSink
from jackpy.syntax import JackSyntaxKind

logger = logging.getLogger(__name__)


class Parser:
    """Cursor plus output buffer shared by the grammar routines.

    Lookahead is limited to `peek`; consumed tokens are written to the sink
    immediately and the cursor never moves back.
    """

    def __init__(self, source: TokenSource, options: ParserOptions | None = None) -> None:
        self._source = source
        self._options = options or ParserOptions()
        self._sink = XmlTreeSink(indent=self._options.indent)

    @property
    def source(self) -> TokenSource:
        return self._source

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def sink(self) -> XmlTreeSink:
        return self._sink

    @property
    def position(self) -> int:
        return self._source.position

    def peek(self) -> Token | None:
        return self._source.current

    def at(self, kind: TokenKind, *texts: str) -> bool:
        token = self.peek()
        return token is not None and token.is_(kind, *texts)

    def advance(self, expected: str | None = None) -> Token:
        token = self._source.bump()
        if token is None:
            raise UnexpectedEndOfInput(self.position, self._source.end_range, expected=expected)
        return token

    def consume(self, kind: TokenKind, text: str | None = None) -> Token:
        index = self.position
        token = self.advance(describe_expected(kind, text))
        if not token.is_(kind) or (text is not None and token.text != text):
            raise JackSyntaxError(index, token, kind, text)
        self._sink.token(token)
        return token

    def bump(self) -> Token:
        """Consume and write the next token whatever it is."""
        token = self.advance()
        self._sink.token(token)
        return token

    def emit(self, token: Token) -> None:
        self._sink.token(token)

    def start(self, kind: JackSyntaxKind) -> Marker:
        logger.debug("Entering %s at token %d", kind.value, self.position)
        marker = Marker(kind=kind, depth=self._sink.depth, start_token=self.position)
        self._sink.start_node(kind)
        return marker

    def finish(self) -> str:
        return self._sink.finish()
