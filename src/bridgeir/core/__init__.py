"""Core bridgeir functionality: IR, annotation parsing, declaration resolution, batches."""

from . import ir
from .annotation_parser import parse_annotation, parse_annotation_group, read_annotation_group
from .batch import BatchResult, resolve_batch
from .collector import DiagnosticCollector
from .errors import BridgeIRError, ConfigError, ErrorContext, ParseError
from .manifest import BridgeConfig, configure_logging, find_config, load_config
from .report import diagnostics_to_json, format_diagnostics
from .resolver import resolve_declaration

__all__ = [
    "ir",
    "BridgeIRError",
    "ParseError",
    "ConfigError",
    "ErrorContext",
    "parse_annotation",
    "parse_annotation_group",
    "read_annotation_group",
    "resolve_declaration",
    "resolve_batch",
    "BatchResult",
    "DiagnosticCollector",
    "BridgeConfig",
    "load_config",
    "find_config",
    "configure_logging",
    "format_diagnostics",
    "diagnostics_to_json",
]
