"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final

from jackpy.diagnostics.diagnostic import Diagnostic, Severity
from jackpy.text import TextRange


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None

    def at(
        self,
        range: TextRange,
        *,
        message: str | None = None,
        severity: Severity | None = None,
    ) -> Diagnostic:
        return Diagnostic(
            code=self.code,
            message=message if message is not None else self.message,
            range=range,
            severity=severity if severity is not None else self.severity,
            hint=self.hint,
            category=self.category,
        )


LEXER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_STRING",
    message="Unterminated string constant; the opening quote was skipped.",
    hint="Close the string with a double quote on the same line.",
    severity="warning",
    category="lexer",
)

LEXER_UNTERMINATED_COMMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_COMMENT",
    message="Unterminated block comment runs to end of input.",
    hint="Close the comment with `*/`.",
    severity="warning",
    category="lexer",
)

LEXER_UNRECOGNIZED_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNRECOGNIZED_CHARACTER",
    message="Unrecognized characters were skipped.",
    severity="warning",
    category="lexer",
)

LEXER_INVALID_NUMBER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_INVALID_NUMBER",
    message="Integer constant runs into identifier characters; the word was skipped.",
    hint="Separate the number from the following name, or start the name with a letter.",
    severity="warning",
    category="lexer",
)

PARSER_EXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_TOKEN",
    message="Expected token",
    severity="error",
    category="parser",
)

PARSER_UNEXPECTED_END_OF_INPUT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_END_OF_INPUT",
    message="Unexpected end of input",
    severity="error",
    category="parser",
)

PARSER_TRAILING_TOKENS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_TRAILING_TOKENS",
    message="Tokens after the end of the class were ignored",
    hint="A source file holds exactly one class.",
    severity="warning",
    category="parser",
)
