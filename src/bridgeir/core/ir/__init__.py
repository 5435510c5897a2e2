"""
bridgeir Intermediate Representation (IR) types.

Declarations (input), annotation parse results, resolved structs (output),
and diagnostics. All types are re-exported from this package.
"""

from .annotations import (
    AnnotationKey,
    AnnotationParseError,
    AnnotationResult,
    ExposedNameSetting,
    InvalidRepresentationValue,
    Representation,
    RepresentationSetting,
    UnknownAnnotationKeyValue,
)
from .declarations import (
    AnnotationGroup,
    Declaration,
    FieldsShape,
    RawAnnotation,
    RawField,
    StringLiteral,
)
from .diagnostics import Diagnostic, DiagnosticKind
from .location import SourceLocation
from .structs import ResolvedStruct, StructField

__all__ = [
    # Location
    "SourceLocation",
    # Declarations
    "AnnotationGroup",
    "Declaration",
    "FieldsShape",
    "RawAnnotation",
    "RawField",
    "StringLiteral",
    # Annotations
    "AnnotationKey",
    "AnnotationParseError",
    "AnnotationResult",
    "ExposedNameSetting",
    "InvalidRepresentationValue",
    "Representation",
    "RepresentationSetting",
    "UnknownAnnotationKeyValue",
    # Structs
    "ResolvedStruct",
    "StructField",
    # Diagnostics
    "Diagnostic",
    "DiagnosticKind",
]
