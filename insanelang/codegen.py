"""Textual intermediate representation of a module."""

from __future__ import annotations

from .nodes import ModuleDecl


class CodeGenerator:
    """Renders a module as commented intermediate text."""

    def generate(self, module: ModuleDecl) -> str:
        """Return a header line for the module and one line per function."""
        lines = [f"; Module: {module.name}\n"]
        lines.extend(f"; Function: {fn.name}\n" for fn in module.functions)
        return "".join(lines)