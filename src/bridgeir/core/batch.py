"""
Batch driver for bridgeir.

Resolves a list of declarations against one collector. Declarations are
independent, so with ``max_workers > 1`` they are resolved on a thread pool;
each worker writes to its own collector and the results are merged back in
declaration order, giving the same diagnostic order as a sequential run.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from pydantic import BaseModel, ConfigDict, Field

from . import ir
from .collector import DiagnosticCollector
from .manifest import BridgeConfig
from .resolver import resolve_declaration

logger = logging.getLogger(__name__)


class BatchResult(BaseModel):
    """
    Output of one batch.

    Attributes:
        structs: One ResolvedStruct per input declaration, in input order
        diagnostics: Every diagnostic of the batch, grouped by declaration
    """

    structs: list[ir.ResolvedStruct] = Field(default_factory=list)
    diagnostics: list[ir.Diagnostic] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def has_diagnostics(self) -> bool:
        """Check if any declaration of the batch produced a diagnostic."""
        return bool(self.diagnostics)

    def get_struct(self, ident: str) -> ir.ResolvedStruct | None:
        """Get a resolved struct by identifier."""
        for s in self.structs:
            if s.ident == ident:
                return s
        return None


def _resolve_isolated(
    declaration: ir.Declaration, config: BridgeConfig
) -> tuple[ir.ResolvedStruct, list[ir.Diagnostic]]:
    local = DiagnosticCollector()
    resolved = resolve_declaration(declaration, local, config.resolver)
    return resolved, local.drain()


def resolve_batch(
    declarations: Sequence[ir.Declaration],
    config: BridgeConfig | None = None,
    collector: DiagnosticCollector | None = None,
) -> BatchResult:
    """
    Resolve every declaration of a batch.

    Args:
        declarations: Declarations in source order
        config: Settings (defaults when omitted)
        collector: Collector to append to; a fresh one is created when omitted.
            It is drained into the result once the batch completes.

    Returns:
        BatchResult with all structs and all diagnostics
    """
    config = config or BridgeConfig()
    if collector is None:
        collector = DiagnosticCollector()

    workers = config.batch.max_workers
    structs: list[ir.ResolvedStruct] = []

    if workers > 1 and len(declarations) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            # map() yields in submission order
            for resolved, diagnostics in pool.map(
                lambda d: _resolve_isolated(d, config), declarations
            ):
                structs.append(resolved)
                collector.extend(diagnostics)
    else:
        for declaration in declarations:
            structs.append(resolve_declaration(declaration, collector, config.resolver))

    diagnostics = collector.drain()
    logger.info(
        "Resolved %d declaration(s) with %d diagnostic(s)", len(structs), len(diagnostics)
    )
    return BatchResult(structs=structs, diagnostics=diagnostics)
