"""Syntax kinds."""

from jackpy.syntax.kind import JackSyntaxKind

__all__ = ["JackSyntaxKind"]
