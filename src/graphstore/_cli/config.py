"""Configuration loading from pyproject.toml."""

import tomllib
from dataclasses import dataclass
from pathlib import Path

DEFAULT_SEPARATOR = "->"


class ConfigError(Exception):
    """Error in graphstore configuration."""


@dataclass(slots=True, frozen=True)
class GraphstoreConfig:
    """Configuration loaded from the ``[tool.graphstore]`` table of pyproject.toml."""

    separator: str = DEFAULT_SEPARATOR
    strict: bool = False


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Return the nearest pyproject.toml at or above start_dir (default: cwd)."""
    start = (start_dir or Path.cwd()).resolve()
    for directory in (start, *start.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate
    return None


def load_config(pyproject_path: Path) -> GraphstoreConfig:
    """Load and validate [tool.graphstore] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed GraphstoreConfig

    Raises:
        ConfigError: If the configuration is invalid

    """
    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    section = data.get("tool", {}).get("graphstore", {})
    if not section:
        return GraphstoreConfig()

    unknown = sorted(set(section) - {"separator", "strict"})
    if unknown:
        msg = f"Unknown [tool.graphstore] keys: {', '.join(unknown)}"
        raise ConfigError(msg)

    separator = section.get("separator", DEFAULT_SEPARATOR)
    if not isinstance(separator, str) or not separator.strip():
        msg = "Invalid [tool.graphstore].separator: expected non-empty string"
        raise ConfigError(msg)

    strict = section.get("strict", False)
    if not isinstance(strict, bool):
        msg = "Invalid [tool.graphstore].strict: expected boolean"
        raise ConfigError(msg)

    return GraphstoreConfig(separator=separator, strict=strict)


def get_config() -> GraphstoreConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        GraphstoreConfig (defaults if no pyproject.toml or no [tool.graphstore] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return GraphstoreConfig()
    return load_config(pyproject_path)
