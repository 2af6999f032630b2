"""Parse carrier that holds either a serialized tree or the error that aborted it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, cast

from jackpy.diagnostics import has_errors
from jackpy.parser.options import ParserOptions
from jackpy.parser.tree_sink import render_tokens

if TYPE_CHECKING:
    from jackpy.diagnostics import Diagnostic
    from jackpy.lexer import Token
    from jackpy.parser.errors import ParseError


@dataclass(frozen=True, slots=True)
class JackParseResult:
    """Outcome of one parse invocation.

    `output` is `None` exactly when `error` is set; a failed parse never
    exposes partial output.
    """

    source_text: str
    tokens: tuple[Token, ...]
    output: str | None
    diagnostics: list[Diagnostic]
    options: ParserOptions
    error: ParseError | None = None

    def __post_init__(self) -> None:
        if (self.output is None) == (self.error is None):
            raise ValueError("A parse result carries either output or an error")

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    def unwrap(self) -> str:
        """Return the serialized tree or raise the error that aborted the parse."""
        if self.error is not None:
            raise self.error
        return cast(str, self.output)

    def tokens_xml(self) -> str:
        return render_tokens(self.tokens)
