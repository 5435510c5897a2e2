"""Tests for IR model construction and invariants."""

from __future__ import annotations

import logging
import threading

import pytest
from pydantic import TypeAdapter, ValidationError

from bridgeir.core import ir
from bridgeir.core.collector import DiagnosticCollector


class TestDeclaration:
    def test_defaults(self) -> None:
        declaration = ir.Declaration(ident="Foo")
        assert declaration.shape == ir.FieldsShape.UNIT
        assert declaration.fields == []
        assert declaration.annotations == []

    def test_is_frozen(self) -> None:
        declaration = ir.Declaration(ident="Foo")
        with pytest.raises(ValidationError):
            declaration.ident = "Bar"

    def test_unit_with_fields_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ir.Declaration(
                ident="Foo",
                shape=ir.FieldsShape.UNIT,
                fields=[ir.RawField(type_expr="u8")],
            )

    def test_named_requires_names(self) -> None:
        with pytest.raises(ValidationError):
            ir.Declaration(
                ident="Foo",
                shape=ir.FieldsShape.NAMED,
                fields=[ir.RawField(type_expr="u8")],
            )

    def test_unnamed_rejects_names(self) -> None:
        with pytest.raises(ValidationError):
            ir.Declaration(
                ident="Foo",
                shape=ir.FieldsShape.UNNAMED,
                fields=[ir.RawField(name="a", type_expr="u8")],
            )

    def test_annotations_flatten_groups_in_order(self) -> None:
        def entry(key: str) -> ir.RawAnnotation:
            return ir.RawAnnotation(key=key, literal=ir.StringLiteral(value="v"))

        declaration = ir.Declaration(
            ident="Foo",
            annotation_groups=[
                ir.AnnotationGroup(annotations=[entry("a"), entry("b")]),
                ir.AnnotationGroup(annotations=[entry("c")]),
            ],
        )
        assert [a.key for a in declaration.annotations] == ["a", "b", "c"]


class TestAnnotationResult:
    def test_discriminated_union(self) -> None:
        adapter = TypeAdapter(ir.AnnotationResult)
        result = adapter.validate_python(
            {"kind": "unknown_key", "key": "x", "literal": {"value": "y"}}
        )
        assert isinstance(result, ir.UnknownAnnotationKeyValue)

    def test_literal_str(self) -> None:
        assert str(ir.StringLiteral(value="class")) == '"class"'


class TestCollector:
    def test_push_and_drain(self) -> None:
        collector = DiagnosticCollector()
        collector.push(ir.Diagnostic(kind=ir.DiagnosticKind.MISSING_REPRESENTATION, ident="A"))
        collector.push(ir.Diagnostic(kind=ir.DiagnosticKind.MISSING_REPRESENTATION, ident="B"))

        assert len(collector) == 2
        assert [d.ident for d in collector.for_declaration("B")] == ["B"]
        assert [d.ident for d in collector.drain()] == ["A", "B"]
        assert len(collector) == 0

    def test_concurrent_push(self) -> None:
        collector = DiagnosticCollector()

        def worker(name: str) -> None:
            for _ in range(100):
                collector.push(
                    ir.Diagnostic(kind=ir.DiagnosticKind.MISSING_REPRESENTATION, ident=name)
                )

        threads = [threading.Thread(target=worker, args=(f"T{i}",)) for i in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(collector) == 800
        # Each thread's own diagnostics stay in push order
        assert len(collector.for_declaration("T3")) == 100

    def test_extend_logs_each_diagnostic(self, caplog: pytest.LogCaptureFixture) -> None:
        collector = DiagnosticCollector()
        with caplog.at_level(logging.DEBUG, logger="bridgeir.core.collector"):
            collector.extend(
                [
                    ir.Diagnostic(kind=ir.DiagnosticKind.MISSING_REPRESENTATION, ident="A"),
                    ir.Diagnostic(kind=ir.DiagnosticKind.MISSING_REPRESENTATION, ident="B"),
                ]
            )

        messages = [r.getMessage() for r in caplog.records]
        assert len(messages) == 2
        assert messages[0].startswith("missing_representation: Struct A")
        assert messages[1].startswith("missing_representation: Struct B")
