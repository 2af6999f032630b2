"""Markers bracketing one nonterminal's output."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from jackpy.syntax import JackSyntaxKind
from jackpy.text import TextRange

if TYPE_CHECKING:
    from jackpy.parser.parser import Parser


@dataclass(slots=True)
class Marker:
    kind: JackSyntaxKind
    depth: int
    start_token: int

    def complete(self, parser: Parser) -> CompletedMarker:
        if parser.sink.depth != self.depth + 1:
            raise RuntimeError(f"Marker for {self.kind.value} completed out of order")
        parser.sink.finish_node()
        return CompletedMarker(kind=self.kind, start_token=self.start_token, end_token=parser.position)


@dataclass(frozen=True, slots=True)
class CompletedMarker:
    """Token span `[start_token, end_token)` covered by a finished node."""

    kind: JackSyntaxKind
    start_token: int
    end_token: int

    def range(self, parser: Parser) -> TextRange | None:
        tokens = parser.source.tokens[self.start_token : self.end_token]
        if not tokens:
            return None
        return tokens[0].range.cover(tokens[-1].range)
