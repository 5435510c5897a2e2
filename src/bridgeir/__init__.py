"""
bridgeir - declaration-to-IR resolution for cross-language struct bindings.

Reads struct declarations and their annotations, decides how each struct is
represented across the language boundary, and collects diagnostics for the
whole batch.
"""

from __future__ import annotations

import re
from importlib.metadata import version as _metadata_version
from pathlib import Path as _Path

# Re-export commonly used types for convenience
from .core import ir
from .core.batch import BatchResult, resolve_batch
from .core.collector import DiagnosticCollector
from .core.errors import BridgeIRError, ConfigError, ParseError
from .core.resolver import resolve_declaration


def _get_version() -> str:
    """Get version from pyproject.toml (editable) or importlib.metadata (installed)."""
    # In editable mode, read directly from pyproject.toml for live updates
    pyproject = _Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        content = pyproject.read_text()
        if match := re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE):
            return match.group(1)

    # Fall back to installed metadata
    try:
        return _metadata_version("bridgeir")
    except Exception:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    "ir",
    "BatchResult",
    "DiagnosticCollector",
    "resolve_batch",
    "resolve_declaration",
    "BridgeIRError",
    "ConfigError",
    "ParseError",
]
