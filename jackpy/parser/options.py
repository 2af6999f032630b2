"""Parser modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum


class ParseMode(StrEnum):
    """Top-level analyzer behavior profile."""

    STRICT = "strict"
    PERMISSIVE = "permissive"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Feature flags controlling lexing, grammar compatibility and output layout.

    In permissive mode text the lexer cannot classify is skipped with a
    warning; strict mode turns those warnings into errors so the parse fails.
    """

    mode: ParseMode = ParseMode.PERMISSIVE
    strip_comments: bool = True
    primitive_types_as_identifiers: bool = True
    indent: int = 0

    def __post_init__(self) -> None:
        if self.indent < 0:
            raise ValueError("indent cannot be negative")

    @property
    def is_strict(self) -> bool:
        return self.mode == ParseMode.STRICT

    @staticmethod
    def for_mode(mode: ParseMode) -> "ParserOptions":
        return ParserOptions(mode=mode)
