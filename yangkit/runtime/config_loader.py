"""Helpers for loading parser options from TOML/JSON sources.

This module provides a single entry point `load_options` that accepts
various configuration sources:

* None -> default Options
* dict -> Options.from_dict
* Path / path-like string -> load .toml/.json from filesystem
* Inline JSON/TOML strings
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Union
import json
import logging
import sys

from pydantic import ValidationError

from yangkit.config.schema import Options
from yangkit.errors import ConfigurationError

if sys.version_info >= (3, 11):
    import tomllib
else:  # pragma: no cover - Python <3.11 path
    import tomli as tomllib

logger = logging.getLogger("yangkit.runtime.config_loader")

ConfigSource = Union[str, Path, Dict[str, Any], None]


def _detect_format(text: str) -> str:
    stripped = text.lstrip()
    return "json" if stripped.startswith(("{", "[")) else "toml"


def _decode_sniffed(text: str, fmt: str) -> Any:
    """Decode text whose format was guessed from its first character.

    A leading ``[`` is either a JSON array or a TOML table header, so JSON
    that fails to decode there is retried as TOML.
    """
    if fmt == "json" and text.lstrip().startswith("["):
        try:
            return json.loads(text)
        except json.JSONDecodeError:
            logger.debug("Text starting with '[' is not JSON; retrying as TOML")
            return _decode(text, "toml")
    return _decode(text, fmt)


def _decode(text: str, fmt: str) -> Any:
    """Decode configuration text, wrapping decoder errors."""
    try:
        if fmt == "json":
            return json.loads(text)
        return tomllib.loads(text)
    except (json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
        raise ConfigurationError(f"Invalid {fmt.upper()} configuration: {exc}") from exc


def _build(data: Any) -> Options:
    if not isinstance(data, dict):
        raise ConfigurationError("Top-level configuration must be a mapping/dict")
    try:
        return Options.from_dict(data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid parser options: {exc}") from exc


def load_options(source: ConfigSource) -> Options:
    """Load Options from various configuration sources.

    Args:
        source: One of:
            * None: returns Options.default()
            * dict: treated as already-parsed configuration mapping
            * str/Path: either a filesystem path to a .toml/.json file,
              or an inline TOML/JSON string (auto-detected)

    Returns:
        Options instance.

    Raises:
        ConfigurationError: If the source cannot be read, decoded or validated.
        TypeError: If the source type is not supported.
    """
    if source is None:
        logger.debug("No config source provided; using default Options")
        return Options.default()

    # Already parsed mapping
    if isinstance(source, dict):
        logger.debug("Loading Options from provided dict")
        return _build(source)

    # Path or string (file path or inline text)
    if isinstance(source, (str, Path)):
        path = Path(source)
        text: Optional[str] = None
        fmt: Optional[str] = None
        sniffed = False

        if isinstance(source, Path) or _looks_like_file(path):
            try:
                text = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                raise ConfigurationError(f"Cannot read configuration file {path}: {exc}") from exc
            suffix = path.suffix.lower()
            if suffix in {".toml", ".tml"}:
                fmt = "toml"
            elif suffix == ".json":
                fmt = "json"
            else:
                # Fallback: guess from content
                fmt = _detect_format(text)
                sniffed = True
            logger.info("Loading configuration from file: %s (fmt=%s)", path, fmt)
        else:
            # Inline string; auto-detect format
            text = str(source)
            fmt = _detect_format(text)
            sniffed = True
            logger.info("Loading configuration from inline %s string", fmt)

        if sniffed:
            return _build(_decode_sniffed(text, fmt))
        return _build(_decode(text, fmt))

    raise TypeError(f"Unsupported config source type: {type(source)!r}")


def _looks_like_file(path: Path) -> bool:
    try:
        return path.is_file()
    except (OSError, ValueError):
        # Inline text can be too long or contain characters invalid in paths.
        return False


__all__ = ["ConfigSource", "load_options"]
