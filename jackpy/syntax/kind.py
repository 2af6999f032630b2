"""Nonterminal kinds written as element names in the parse tree."""

from enum import StrEnum


class JackSyntaxKind(StrEnum):
    CLASS = "class"
    CLASS_VAR_DEC = "classVarDec"
    SUBROUTINE_DEC = "subroutineDec"
    PARAMETER_LIST = "parameterList"
    SUBROUTINE_BODY = "subroutineBody"
