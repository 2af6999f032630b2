"""Tag-delimited tree sink for parser output."""

from collections.abc import Iterable
from xml.sax.saxutils import escape

from jackpy.lexer import Token
from jackpy.syntax import JackSyntaxKind


def escape_text(text: str) -> str:
    """Replace `&`, `<` and `>` with their entity forms."""
    return escape(text)


def render_token(token: Token) -> str:
    tag = token.kind.value
    return f"<{tag}> {escape_text(token.text)} </{tag}>"


def render_tokens(tokens: Iterable[Token]) -> str:
    """Token-only listing wrapped in a `<tokens>` element."""
    lines = ["<tokens>"]
    lines.extend(render_token(token) for token in tokens)
    lines.append("</tokens>")
    return "".join(f"{line}\n" for line in lines)


class XmlTreeSink:
    """Append-only output buffer written in pre-order as rules run.

    Opening tags are written on entry, closing tags on exit, so a node's
    children always sit between its own tags.
    """

    def __init__(self, *, indent: int = 0) -> None:
        self._lines: list[str] = []
        self._open: list[JackSyntaxKind] = []
        self._indent = indent

    @property
    def depth(self) -> int:
        return len(self._open)

    def start_node(self, kind: JackSyntaxKind) -> None:
        self._write(f"<{kind.value}>")
        self._open.append(kind)

    def finish_node(self) -> None:
        if not self._open:
            raise RuntimeError("finish_node called more often than start_node")
        kind = self._open.pop()
        self._write(f"</{kind.value}>")

    def token(self, token: Token) -> None:
        self._write(render_token(token))

    def finish(self) -> str:
        if self._open:
            raise RuntimeError(f"Unclosed nodes: {', '.join(kind.value for kind in self._open)}")
        return "".join(self._lines)

    def _write(self, line: str) -> None:
        self._lines.append(" " * (self._indent * len(self._open)) + line + "\n")
