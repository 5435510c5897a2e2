"""
Annotation parse results for bridgeir IR.

Parsing one annotation yields exactly one of the result models below. Errors
are ordinary values in the same union so that a bad annotation never stops
the rest of a declaration from being read.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from .declarations import StringLiteral
from .location import SourceLocation


class AnnotationKey(str, Enum):
    """Recognized annotation keys."""

    REPRESENTATION = "representation"
    EXPOSED_NAME = "exposedName"


class Representation(str, Enum):
    """Physical representation of a struct across the language boundary."""

    CLASS = "class"  # reference type, identity-bearing
    VALUE_STRUCT = "struct"  # value type, copied


class RepresentationSetting(BaseModel):
    """A valid ``representation`` annotation and the literal that produced it."""

    kind: Literal["representation"] = "representation"
    representation: Representation
    literal: StringLiteral

    model_config = ConfigDict(frozen=True)


class ExposedNameSetting(BaseModel):
    """An ``exposedName`` override, accepted verbatim."""

    kind: Literal["exposed_name"] = "exposed_name"
    literal: StringLiteral

    model_config = ConfigDict(frozen=True)


class InvalidRepresentationValue(BaseModel):
    """Placeholder for a ``representation`` literal outside the allowed set."""

    kind: Literal["invalid_representation"] = "invalid_representation"
    literal: StringLiteral

    model_config = ConfigDict(frozen=True)


class UnknownAnnotationKeyValue(BaseModel):
    """Placeholder for an annotation whose key is not recognized."""

    kind: Literal["unknown_key"] = "unknown_key"
    key: str
    literal: StringLiteral
    location: SourceLocation | None = None

    model_config = ConfigDict(frozen=True)


AnnotationParseError = InvalidRepresentationValue | UnknownAnnotationKeyValue

AnnotationResult = Annotated[
    Union[
        RepresentationSetting,
        ExposedNameSetting,
        InvalidRepresentationValue,
        UnknownAnnotationKeyValue,
    ],
    Field(discriminator="kind"),
]
