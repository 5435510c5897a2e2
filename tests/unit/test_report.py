"""Tests for diagnostic messages and rendering."""

from __future__ import annotations

import json

from bridgeir.core import ir
from bridgeir.core.batch import resolve_batch
from bridgeir.core.report import diagnostics_to_json, format_diagnostic, format_diagnostics
from tests._fixtures.declarations import build_declaration


class TestMessages:
    def test_missing_representation_message(self) -> None:
        d = ir.Diagnostic(kind=ir.DiagnosticKind.MISSING_REPRESENTATION, ident="Foo")
        assert "Struct Foo has fields but no representation" in d.message
        assert 'representation = "struct"' in d.message

    def test_invalid_representation_message(self) -> None:
        d = ir.Diagnostic(
            kind=ir.DiagnosticKind.INVALID_REPRESENTATION,
            ident="Foo",
            literal=ir.StringLiteral(value="an-invalid-value"),
        )
        assert 'Invalid representation "an-invalid-value" on struct Foo' in d.message

    def test_empty_class_message(self) -> None:
        d = ir.Diagnostic(
            kind=ir.DiagnosticKind.EMPTY_DECLARATION_REQUESTS_CLASS,
            ident="Foo",
            literal=ir.StringLiteral(value="class"),
        )
        assert "has no fields" in d.message
        assert 'representation = "class"' in d.message

    def test_unknown_key_message(self) -> None:
        d = ir.Diagnostic(
            kind=ir.DiagnosticKind.UNKNOWN_ANNOTATION_KEY,
            ident="Foo",
            key="swift_name",
            literal=ir.StringLiteral(value="X"),
        )
        assert "Unknown annotation key 'swift_name' on struct Foo" in d.message


class TestFormatting:
    def test_with_location(self) -> None:
        result = resolve_batch([build_declaration("Foo", {"a": "u8"}, 'representation = "x"')])
        line = format_diagnostic(result.diagnostics[0])
        assert line.startswith("ffi.rs:1:18: invalid_representation: ")

    def test_without_location(self) -> None:
        d = ir.Diagnostic(kind=ir.DiagnosticKind.MISSING_REPRESENTATION, ident="Foo")
        assert format_diagnostic(d).startswith("missing_representation: Struct Foo")

    def test_one_line_per_diagnostic(self) -> None:
        result = resolve_batch(
            [build_declaration("A", {"a": "u8"}), build_declaration("B", {"b": "u8"})]
        )
        assert len(format_diagnostics(result.diagnostics).splitlines()) == 2


class TestJson:
    def test_round_trip_fields(self) -> None:
        result = resolve_batch([build_declaration("Foo", annotations='representation = "class"')])
        data = json.loads(diagnostics_to_json(result.diagnostics))

        assert len(data) == 1
        entry = data[0]
        assert entry["kind"] == "empty_declaration_requests_class"
        assert entry["ident"] == "Foo"
        assert entry["literal"]["value"] == "class"
        assert entry["location"] == {"file": "ffi.rs", "line": 1, "column": 18}
        assert "has no fields" in entry["message"]

    def test_empty(self) -> None:
        assert json.loads(diagnostics_to_json([])) == []
