"""Lexer, parser stub and textual IR generator for the InsaneLang toy language."""

__version__ = "0.1.0"
__all__ = ["tokens", "nodes", "lexer", "parser", "codegen", "cli"]