"""Forward-only cursor over a materialized token sequence."""

from jackpy.lexer import Token
from jackpy.text import TextRange, TextSize


class TokenSource:
    """Owns the parser's read position; the cursor only ever moves forward."""

    def __init__(self, tokens: tuple[Token, ...], *, text_len: int = 0) -> None:
        self._tokens = tokens
        self._position = 0
        self._text_len = text_len

    @property
    def tokens(self) -> tuple[Token, ...]:
        return self._tokens

    @property
    def position(self) -> int:
        """Index of the current token."""
        return self._position

    @property
    def is_exhausted(self) -> bool:
        return self._position >= len(self._tokens)

    @property
    def current(self) -> Token | None:
        if self.is_exhausted:
            return None
        return self._tokens[self._position]

    @property
    def end_range(self) -> TextRange:
        """Empty range just past the last token, or at end of text when known."""
        end = self._tokens[-1].range.end.value if self._tokens else 0
        return TextRange.empty(TextSize.from_int(max(end, self._text_len)))

    @property
    def remaining(self) -> tuple[Token, ...]:
        return self._tokens[self._position :]

    def bump(self) -> Token | None:
        token = self.current
        if token is not None:
            self._position += 1
        return token
