"""Command-line entry point: tokenise, parse and render a source file."""

from __future__ import annotations

import sys
from pathlib import Path

from .codegen import CodeGenerator
from .lexer import tokenize
from .parser import Parser
from .tokens import Token


def format_token(token: Token) -> str:
    """Describe a token on one line."""
    return (
        f"Token: type={int(token.type)} lexeme='{token.lexeme}' "
        f"line={token.line} col={token.column}"
    )


def main(argv: list[str] | None = None) -> int:
    """Run the compiler front end on the file named in ``argv``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Usage: insanelang <source file>", file=sys.stderr)
        return 1
    path = args[0]
    try:
        source = Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError:
        print(f"Failed to open file {path}", file=sys.stderr)
        return 1

    tokens = tokenize(source)
    for token in tokens:
        print(format_token(token))

    try:
        module = Parser(tokens).parse()
        print("Parsing completed.")
        print(CodeGenerator().generate(module))
    except Exception as exc:  # any failure while parsing is reported, not fatal
        print(f"Parser error: {exc}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())