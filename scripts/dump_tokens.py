#!/usr/bin/env python
"""Print the token stream and lexer diagnostics of a .jack file."""

import argparse
from pathlib import Path

from jackpy.lexer import Lexer, dump_tokens


def main() -> None:
    parser = argparse.ArgumentParser(description="Dump Jack tokens for debugging")
    parser.add_argument("path", type=Path, help="Path to a .jack file")
    parser.add_argument("--keep-comments", action="store_true", help="Lex comment text as tokens")
    args = parser.parse_args()

    text = args.path.read_text(encoding="utf-8")
    lexer = Lexer(text, strip_comments=not args.keep_comments)
    tokens = lexer.lex()
    dump_tokens(tokens, text, lexer.diagnostics)

    print(f"\n{len(tokens)} tokens")


if __name__ == "__main__":
    main()
