"""
Declaration resolver for bridgeir.

Turns one ``ir.Declaration`` into one ``ir.ResolvedStruct``, pushing any rule
violations into a ``DiagnosticCollector``. Resolution always succeeds.

The representation is chosen by an ordered rule list. Each rule either
decides the representation or passes to the next one; rule order is the
precedence order, so field emptiness is checked before the explicit
representation is honored.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from . import ir
from .annotation_parser import parse_annotation
from .collector import DiagnosticCollector
from .manifest import ResolverConfig

logger = logging.getLogger(__name__)


@dataclass
class AnnotationSettings:
    """
    Settings accumulated from a declaration's annotations.

    Later annotations overwrite earlier ones for the same key. Error
    placeholders are kept in annotation order for reporting.
    """

    representation: tuple[ir.Representation, ir.StringLiteral] | None = None
    exposed_name: ir.StringLiteral | None = None
    errors: list[ir.AnnotationParseError] = field(default_factory=list)
    duplicates: list[tuple[ir.AnnotationKey, ir.StringLiteral]] = field(default_factory=list)

    @property
    def requested_class(self) -> ir.StringLiteral | None:
        """Literal of an explicit, valid request for class representation."""
        if self.representation and self.representation[0] == ir.Representation.CLASS:
            return self.representation[1]
        return None


def accumulate_settings(declaration: ir.Declaration) -> AnnotationSettings:
    """
    Parse every annotation of a declaration into one settings record.

    An invalid representation literal is recorded as an error and also
    stands in as a value-struct representation, so the declaration is not
    reported a second time as missing its representation.
    """
    settings = AnnotationSettings()
    seen: set[ir.AnnotationKey] = set()

    for annotation in declaration.annotations:
        result = parse_annotation(annotation)

        if isinstance(result, ir.RepresentationSetting):
            key = ir.AnnotationKey.REPRESENTATION
            settings.representation = (result.representation, result.literal)
        elif isinstance(result, ir.InvalidRepresentationValue):
            key = ir.AnnotationKey.REPRESENTATION
            settings.errors.append(result)
            settings.representation = (ir.Representation.VALUE_STRUCT, result.literal)
        elif isinstance(result, ir.ExposedNameSetting):
            key = ir.AnnotationKey.EXPOSED_NAME
            settings.exposed_name = result.literal
        elif isinstance(result, ir.UnknownAnnotationKeyValue):
            settings.errors.append(result)
            continue
        else:
            raise TypeError(f"Unhandled annotation result: {result!r}")

        if key in seen:
            settings.duplicates.append((key, result.literal))
        seen.add(key)

    return settings


@dataclass
class RuleContext:
    """Inputs shared by the representation rules for one declaration."""

    declaration: ir.Declaration
    settings: AnnotationSettings
    config: ResolverConfig
    collector: DiagnosticCollector

    def report(
        self,
        kind: ir.DiagnosticKind,
        literal: ir.StringLiteral | None = None,
        key: str | None = None,
        location: ir.SourceLocation | None = None,
    ) -> None:
        """Push a diagnostic for this declaration."""
        if location is None and literal is not None:
            location = literal.location
        self.collector.push(
            ir.Diagnostic(
                kind=kind,
                ident=self.declaration.ident,
                literal=literal,
                key=key,
                location=location or self.declaration.location,
            )
        )


RepresentationRule = Callable[[RuleContext], ir.Representation | None]


def report_annotation_errors(ctx: RuleContext) -> ir.Representation | None:
    """Report annotation parse errors in annotation order. Never decides."""
    for error in ctx.settings.errors:
        if isinstance(error, ir.InvalidRepresentationValue):
            ctx.report(ir.DiagnosticKind.INVALID_REPRESENTATION, literal=error.literal)
        elif isinstance(error, ir.UnknownAnnotationKeyValue):
            ctx.report(
                ir.DiagnosticKind.UNKNOWN_ANNOTATION_KEY,
                literal=error.literal,
                key=error.key,
                location=error.location,
            )

    if ctx.config.report_duplicate_keys:
        for key, literal in ctx.settings.duplicates:
            ctx.report(ir.DiagnosticKind.DUPLICATE_ANNOTATION_KEY, literal=literal, key=key.value)

    return None


def empty_declaration_is_value_struct(ctx: RuleContext) -> ir.Representation | None:
    """A declaration without fields is always a value struct."""
    if ctx.declaration.fields:
        return None

    requested = ctx.settings.requested_class
    if requested is not None:
        ctx.report(ir.DiagnosticKind.EMPTY_DECLARATION_REQUESTS_CLASS, literal=requested)
    return ir.Representation.VALUE_STRUCT


def explicit_representation(ctx: RuleContext) -> ir.Representation | None:
    """Use the annotated representation as given."""
    if ctx.settings.representation is None:
        return None
    return ctx.settings.representation[0]


def missing_representation(ctx: RuleContext) -> ir.Representation | None:
    """Fields without a representation: report and default to a value struct."""
    ctx.report(ir.DiagnosticKind.MISSING_REPRESENTATION)
    return ir.Representation.VALUE_STRUCT


REPRESENTATION_RULES: tuple[RepresentationRule, ...] = (
    report_annotation_errors,
    empty_declaration_is_value_struct,
    explicit_representation,
    missing_representation,
)


def select_representation(ctx: RuleContext) -> ir.Representation:
    """Apply the rules in order; the first one that decides wins."""
    for rule in REPRESENTATION_RULES:
        representation = rule(ctx)
        if representation is not None:
            return representation
    # missing_representation always decides
    raise AssertionError("No representation rule matched")


def extract_fields(declaration: ir.Declaration) -> list[ir.StructField]:
    """Copy fields out of the declaration, preserving order."""
    return [ir.StructField(name=f.name, type_expr=f.type_expr) for f in declaration.fields]


def resolve_declaration(
    declaration: ir.Declaration,
    collector: DiagnosticCollector,
    config: ResolverConfig | None = None,
) -> ir.ResolvedStruct:
    """
    Resolve one declaration.

    Args:
        declaration: Declaration from the syntax layer
        collector: Collector that receives any diagnostics
        config: Resolver settings (defaults when omitted)

    Returns:
        ResolvedStruct; never None, even when diagnostics were pushed
    """
    settings = accumulate_settings(declaration)
    ctx = RuleContext(
        declaration=declaration,
        settings=settings,
        config=config or ResolverConfig(),
        collector=collector,
    )
    representation = select_representation(ctx)

    resolved = ir.ResolvedStruct(
        ident=declaration.ident,
        representation=representation,
        exposed_name=settings.exposed_name.value if settings.exposed_name else None,
        fields=extract_fields(declaration),
        fields_shape=declaration.shape,
        location=declaration.location,
    )
    logger.debug(
        "Resolved %s as %s (%d field(s), %s)",
        resolved.ident,
        resolved.representation.value,
        len(resolved.fields),
        resolved.fields_shape.value,
    )
    return resolved
