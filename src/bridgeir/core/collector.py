"""
Diagnostic collector shared across a batch.

Created once per batch, appended to while declarations are resolved, and
drained once the batch completes. Appends are guarded by a lock so one
collector can be shared between threads.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Iterator

from . import ir

logger = logging.getLogger(__name__)


class DiagnosticCollector:
    """Append-only, thread-safe accumulator of diagnostics."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._diagnostics: list[ir.Diagnostic] = []

    def push(self, diagnostic: ir.Diagnostic) -> None:
        """Append a single diagnostic."""
        logger.debug("%s: %s", diagnostic.kind.value, diagnostic.message)
        with self._lock:
            self._diagnostics.append(diagnostic)

    def extend(self, diagnostics: Iterable[ir.Diagnostic]) -> None:
        """Append several diagnostics as one contiguous run."""
        items = list(diagnostics)
        for diagnostic in items:
            logger.debug("%s: %s", diagnostic.kind.value, diagnostic.message)
        with self._lock:
            self._diagnostics.extend(items)

    def drain(self) -> list[ir.Diagnostic]:
        """Return every collected diagnostic and empty the collector."""
        with self._lock:
            drained = self._diagnostics
            self._diagnostics = []
        return drained

    @property
    def diagnostics(self) -> list[ir.Diagnostic]:
        """Snapshot of the diagnostics collected so far."""
        with self._lock:
            return list(self._diagnostics)

    def for_declaration(self, ident: str) -> list[ir.Diagnostic]:
        """Diagnostics attributed to the named declaration, in order."""
        return [d for d in self.diagnostics if d.ident == ident]

    def __len__(self) -> int:
        with self._lock:
            return len(self._diagnostics)

    def __iter__(self) -> Iterator[ir.Diagnostic]:
        return iter(self.diagnostics)
