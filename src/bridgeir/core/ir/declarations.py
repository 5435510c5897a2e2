"""
Declaration input types for bridgeir.

These models describe what the syntax layer hands over: one ``Declaration``
per struct definition, with its raw fields and raw annotation groups. They are
frozen; resolution never mutates them.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .location import SourceLocation


class FieldsShape(str, Enum):
    """Syntax kind of a declaration's field list."""

    NAMED = "named"  # struct Foo { bar: u8 }
    UNNAMED = "unnamed"  # struct Foo(u8);
    UNIT = "unit"  # struct Foo;


class StringLiteral(BaseModel):
    """
    A string literal as written in an annotation.

    The value is kept verbatim (after escape processing) so diagnostics can
    echo exactly what the user wrote.
    """

    value: str
    location: SourceLocation | None = None

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f'"{self.value}"'


class RawAnnotation(BaseModel):
    """
    One ``key = "literal"`` entry of an annotation group.

    Examples:
        - representation = "class"
        - exposedName = "FfiFoo"
    """

    key: str
    literal: StringLiteral
    location: SourceLocation | None = None

    model_config = ConfigDict(frozen=True)


class AnnotationGroup(BaseModel):
    """A comma-separated annotation group attached to a declaration."""

    annotations: list[RawAnnotation] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class RawField(BaseModel):
    """
    A field as it appears in the declaration.

    Attributes:
        name: Field name, absent for positional fields
        type_expr: Rendered type expression (e.g. "u8", "Vec<String>")
    """

    name: str | None = None
    type_expr: str

    model_config = ConfigDict(frozen=True)


class Declaration(BaseModel):
    """
    A struct declaration to be bridged.

    Attributes:
        ident: Declaration identifier
        fields: Raw fields in source order
        shape: Syntax kind of the field list
        annotation_groups: Annotation groups in source order
        location: Where the declaration was written, when known
    """

    ident: str
    fields: list[RawField] = Field(default_factory=list)
    shape: FieldsShape = FieldsShape.UNIT
    annotation_groups: list[AnnotationGroup] = Field(default_factory=list)
    location: SourceLocation | None = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_shape(self) -> Declaration:
        """Ensure the field list agrees with the declared shape."""
        if self.shape == FieldsShape.UNIT and self.fields:
            raise ValueError(f"Unit declaration '{self.ident}' cannot have fields")
        if self.shape == FieldsShape.NAMED:
            for f in self.fields:
                if f.name is None:
                    raise ValueError(f"Named declaration '{self.ident}' has an unnamed field")
        if self.shape == FieldsShape.UNNAMED:
            for f in self.fields:
                if f.name is not None:
                    raise ValueError(
                        f"Unnamed declaration '{self.ident}' has named field '{f.name}'"
                    )
        return self

    @property
    def annotations(self) -> list[RawAnnotation]:
        """All annotations across every group, in source order."""
        return [a for group in self.annotation_groups for a in group.annotations]
