"""Human-readable and JSON rendering of diagnostics."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import TypeAdapter

from . import ir

_DIAGNOSTIC_LIST = TypeAdapter(list[ir.Diagnostic])


def format_diagnostic(diagnostic: ir.Diagnostic) -> str:
    """Format as ``file:line:column: kind: message`` (location omitted if unknown)."""
    line = f"{diagnostic.kind.value}: {diagnostic.message}"
    if diagnostic.location:
        return f"{diagnostic.location}: {line}"
    return line


def format_diagnostics(diagnostics: Iterable[ir.Diagnostic]) -> str:
    """Format diagnostics one per line."""
    return "\n".join(format_diagnostic(d) for d in diagnostics)


def diagnostics_to_json(diagnostics: Iterable[ir.Diagnostic], indent: int | None = None) -> str:
    """Serialize diagnostics to a JSON array, messages included."""
    return _DIAGNOSTIC_LIST.dump_json(list(diagnostics), indent=indent).decode("utf-8")
