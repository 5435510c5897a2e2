"""Shared pytest fixtures for bridgeir tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from bridgeir.core import ir
from bridgeir.core.collector import DiagnosticCollector
from tests._fixtures.declarations import build_declaration


@pytest.fixture
def make_declaration() -> Callable[..., ir.Declaration]:
    """Return the declaration builder."""
    return build_declaration


@pytest.fixture
def collector() -> DiagnosticCollector:
    """Return a fresh diagnostic collector."""
    return DiagnosticCollector()


@pytest.fixture
def unit_declaration() -> ir.Declaration:
    """Return ``struct Foo;`` without annotations."""
    return build_declaration("Foo")


@pytest.fixture
def named_declaration() -> ir.Declaration:
    """Return ``struct Foo { bar: u8 }`` with ``representation = "struct"``."""
    return build_declaration("Foo", {"bar": "u8"}, 'representation = "struct"')
