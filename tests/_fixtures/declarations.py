"""Declaration builders shared by the unit tests."""

from __future__ import annotations

from bridgeir.core import ir
from bridgeir.core.annotation_parser import read_annotation_group


def build_declaration(
    ident: str,
    fields: dict[str, str] | list[str] | None = None,
    annotations: str | None = None,
    shape: ir.FieldsShape | None = None,
) -> ir.Declaration:
    """
    Build a declaration the way the syntax layer would.

    ``fields`` as a dict gives named fields, as a list gives unnamed fields,
    and None gives a unit declaration. ``annotations`` is annotation group
    text such as ``'representation = "class"'``.
    """
    if isinstance(fields, dict):
        raw_fields = [ir.RawField(name=n, type_expr=t) for n, t in fields.items()]
        default_shape = ir.FieldsShape.NAMED
    elif isinstance(fields, list):
        raw_fields = [ir.RawField(type_expr=t) for t in fields]
        default_shape = ir.FieldsShape.UNNAMED
    else:
        raw_fields = []
        default_shape = ir.FieldsShape.UNIT

    groups = [read_annotation_group(annotations, file="ffi.rs")] if annotations else []

    return ir.Declaration(
        ident=ident,
        fields=raw_fields,
        shape=shape or default_shape,
        annotation_groups=groups,
    )
