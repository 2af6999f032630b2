"""Diagnostics core types and helpers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Literal

from jackpy.text import LineIndex, TextRange

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the lexer and parser."""

    code: str
    message: str
    range: TextRange
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    return [diagnostic for group in groups for diagnostic in group]


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def format_diagnostic(diagnostic: Diagnostic, source: str, *, path: str | None = None) -> str:
    """Render `path:line:col: severity CODE message` for terminal output."""
    line, column = LineIndex(source).line_col(diagnostic.range.start)
    location = f"{line}:{column}"
    if path is not None:
        location = f"{path}:{location}"
    text = f"{location}: {diagnostic.severity} {diagnostic.code} {diagnostic.message}"
    if diagnostic.hint:
        text += f" (hint: {diagnostic.hint})"
    return text
