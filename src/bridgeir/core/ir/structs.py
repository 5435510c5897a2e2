"""
Resolved struct IR for bridgeir.

``ResolvedStruct`` is the unit of output handed to code generation. It is
always produced, even for declarations that also raised diagnostics.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .annotations import Representation
from .declarations import FieldsShape
from .location import SourceLocation


class StructField(BaseModel):
    """
    A field of a resolved struct.

    Attributes:
        name: Field name, None for unnamed fields
        type_expr: Type expression copied from the declaration
    """

    name: str | None = None
    type_expr: str

    model_config = ConfigDict(frozen=True)


class ResolvedStruct(BaseModel):
    """
    Fully resolved struct ready for rendering.

    Attributes:
        ident: Declaration identifier
        representation: Final representation (class or value struct)
        exposed_name: Name override for the other side of the boundary
        fields: Fields in source order
        fields_shape: Named, unnamed, or unit
        location: Source location of the declaration, when known
    """

    ident: str
    representation: Representation
    exposed_name: str | None = None
    fields: list[StructField] = Field(default_factory=list)
    fields_shape: FieldsShape
    location: SourceLocation | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_class(self) -> bool:
        """Check if the struct is bridged as a reference type."""
        return self.representation == Representation.CLASS

    @property
    def target_name(self) -> str:
        """Name used on the far side of the boundary."""
        return self.exposed_name or self.ident

    def get_field(self, name: str) -> StructField | None:
        """Get a named field by name."""
        for f in self.fields:
            if f.name == name:
                return f
        return None
