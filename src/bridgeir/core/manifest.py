import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .errors import make_config_error

CONFIG_FILENAME = "bridgeir.toml"
PYPROJECT_FILENAME = "pyproject.toml"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ResolverConfig:
    """Declaration resolver settings."""

    report_duplicate_keys: bool = False  # emit DuplicateAnnotationKey diagnostics


@dataclass
class BatchConfig:
    """Batch driver settings."""

    max_workers: int = 1  # >1 resolves declarations on a thread pool


@dataclass
class LoggingConfig:
    """Logging settings for the bridgeir logger."""

    level: str = "WARNING"


@dataclass
class BridgeConfig:
    """
    Configuration loaded from bridgeir.toml or [tool.bridgeir] in pyproject.toml.

    Every section is optional; missing sections use defaults.
    """

    resolver: ResolverConfig = field(default_factory=ResolverConfig)
    batch: BatchConfig = field(default_factory=BatchConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    source: Path | None = None


def _get(section: dict[str, Any], key: str, expected: type, default: Any, path: Path | None) -> Any:
    value = section.get(key, default)
    # bool is a subclass of int
    if expected is int and isinstance(value, bool):
        raise make_config_error(f"'{key}' must be an integer, got {value!r}", path)
    if not isinstance(value, expected):
        raise make_config_error(
            f"'{key}' must be of type {expected.__name__}, got {value!r}", path
        )
    return value


def _section(data: dict[str, Any], name: str, path: Path | None) -> dict[str, Any]:
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise make_config_error(f"'[{name}]' must be a table, got {section!r}", path)
    return section


def parse_config(data: dict[str, Any], path: Path | None = None) -> BridgeConfig:
    """Build a BridgeConfig from already-decoded TOML data."""
    if not isinstance(data, dict):
        raise make_config_error(f"Configuration must be a table, got {data!r}", path)

    resolver_data = _section(data, "resolver", path)
    batch_data = _section(data, "batch", path)
    logging_data = _section(data, "logging", path)

    resolver_config = ResolverConfig(
        report_duplicate_keys=_get(resolver_data, "report_duplicate_keys", bool, False, path),
    )

    max_workers = _get(batch_data, "max_workers", int, 1, path)
    if max_workers < 1:
        raise make_config_error(f"'max_workers' must be at least 1, got {max_workers}", path)
    batch_config = BatchConfig(max_workers=max_workers)

    level = _get(logging_data, "level", str, "WARNING", path).upper()
    if level not in _LOG_LEVELS:
        raise make_config_error(
            f"Unknown logging level '{level}'. Expected one of: {', '.join(_LOG_LEVELS)}", path
        )
    logging_config = LoggingConfig(level=level)

    return BridgeConfig(
        resolver=resolver_config,
        batch=batch_config,
        logging=logging_config,
        source=path,
    )


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise make_config_error(f"Invalid TOML: {e}", path) from e


def load_config(path: Path) -> BridgeConfig:
    """
    Load configuration from a bridgeir.toml or pyproject.toml file.

    Args:
        path: Config file path

    Returns:
        BridgeConfig, with defaults when the file is absent

    Raises:
        ConfigError: If the file is not valid TOML or has invalid values
    """
    if not path.exists():
        return BridgeConfig()

    data = _read_toml(path)
    if path.name == PYPROJECT_FILENAME:
        data = _section(_section(data, "tool", path), "bridgeir", path)

    return parse_config(data, path)


def find_config(start_dir: Path) -> Path | None:
    """
    Find the nearest configuration file, walking up from start_dir.

    A bridgeir.toml wins over a pyproject.toml in the same directory; a
    pyproject.toml only counts if it has a [tool.bridgeir] table.
    """
    for directory in [start_dir, *start_dir.parents]:
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        pyproject = directory / PYPROJECT_FILENAME
        if pyproject.is_file():
            tool = _read_toml(pyproject).get("tool", {})
            if isinstance(tool, dict) and "bridgeir" in tool:
                return pyproject
    return None


def configure_logging(config: LoggingConfig) -> None:
    """Apply the configured level to the bridgeir logger only."""
    logging.getLogger("bridgeir").setLevel(config.level)
