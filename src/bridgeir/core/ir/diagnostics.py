"""
Diagnostic records for bridgeir.

A diagnostic names the rule that fired, the declaration it belongs to, and the
offending literal where there is one. Diagnostics are values, collected per
batch; they never interrupt resolution.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .declarations import StringLiteral
from .location import SourceLocation


class DiagnosticKind(str, Enum):
    """Rules that can produce a diagnostic."""

    INVALID_REPRESENTATION = "invalid_representation"
    MISSING_REPRESENTATION = "missing_representation"
    EMPTY_DECLARATION_REQUESTS_CLASS = "empty_declaration_requests_class"
    UNKNOWN_ANNOTATION_KEY = "unknown_annotation_key"
    DUPLICATE_ANNOTATION_KEY = "duplicate_annotation_key"


class Diagnostic(BaseModel):
    """
    A non-fatal rule violation attributable to one declaration.

    Attributes:
        kind: Which rule fired
        ident: Identifier of the declaration
        literal: Offending annotation literal, if any
        key: Offending annotation key, for key-level diagnostics
        location: Best known source location
    """

    kind: DiagnosticKind
    ident: str
    literal: StringLiteral | None = None
    key: str | None = None
    location: SourceLocation | None = Field(
        default=None,
        description="Literal location if known, otherwise the declaration's",
    )

    model_config = ConfigDict(frozen=True)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def message(self) -> str:
        """Human-readable description of the violation."""
        if self.kind == DiagnosticKind.INVALID_REPRESENTATION:
            return (
                f"Invalid representation {self.literal} on struct {self.ident}. "
                'Expected representation = "struct" or representation = "class".'
            )
        if self.kind == DiagnosticKind.MISSING_REPRESENTATION:
            return (
                f"Struct {self.ident} has fields but no representation. "
                'Add representation = "struct" or representation = "class".'
            )
        if self.kind == DiagnosticKind.EMPTY_DECLARATION_REQUESTS_CLASS:
            return (
                f"Struct {self.ident} has no fields and cannot use "
                f"representation = {self.literal}. A struct without fields gains "
                'nothing from class semantics; use representation = "struct".'
            )
        if self.kind == DiagnosticKind.UNKNOWN_ANNOTATION_KEY:
            return (
                f"Unknown annotation key '{self.key}' on struct {self.ident}. "
                "Expected one of: representation, exposedName."
            )
        return (
            f"Annotation key '{self.key}' is set more than once on struct {self.ident}; "
            f"the last value {self.literal} is used."
        )
