"""Loading parser options from dicts, files and inline text."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from yangkit.config import Options
from yangkit.errors import ConfigurationError, RecoverableError
from yangkit.runtime.config_loader import load_options

TOML_OPTIONS = """
store_uses = true

[statement_options]
exclude_statements = ["description", "reference"]
latest_revision_only = true

[module_options]
include_only_sources = ["leaf"]

[deviate_options]
ignore_deviate_not_supported = true
"""


def _assert_populated(options: Options) -> None:
    assert options.store_uses is True
    assert options.statement_options.exclude_statements == ("description", "reference")
    assert options.statement_options.latest_revision_only is True
    assert options.module_options.include_only_sources == ("leaf",)
    assert options.deviate_options.ignore_deviate_not_supported is True


def test_none_returns_defaults() -> None:
    """No source means all defaults."""
    assert load_options(None) == Options()


def test_dict_source() -> None:
    """Already-parsed mappings are validated directly."""
    options = load_options({"statement_options": {"exclude_statements": ["leaf"]}})

    assert options.statement_options.exclude_statements == ("leaf",)


def test_toml_file(tmp_path: Path) -> None:
    """TOML files are detected by suffix."""
    path = tmp_path / "options.toml"
    path.write_text(TOML_OPTIONS, encoding="utf-8")

    _assert_populated(load_options(path))
    _assert_populated(load_options(str(path)))


def test_json_file(tmp_path: Path) -> None:
    """JSON files are detected by suffix."""
    path = tmp_path / "options.json"
    path.write_text(
        json.dumps(
            {
                "store_uses": True,
                "statement_options": {
                    "exclude_statements": ["description", "reference"],
                    "latest_revision_only": True,
                },
                "module_options": {"include_only_sources": ["leaf"]},
                "deviate_options": {"ignore_deviate_not_supported": True},
            }
        ),
        encoding="utf-8",
    )

    _assert_populated(load_options(path))


def test_unknown_suffix_is_sniffed(tmp_path: Path) -> None:
    """Files without a known suffix are sniffed from their content."""
    path = tmp_path / "options.cfg"
    path.write_text('{"store_uses": true}', encoding="utf-8")

    assert load_options(path).store_uses is True


def test_inline_strings() -> None:
    """Inline JSON and TOML text are both accepted."""
    assert load_options('{"store_uses": true}').store_uses is True
    assert load_options("store_uses = true").store_uses is True
    _assert_populated(load_options(TOML_OPTIONS))


def test_invalid_text_raises_configuration_error() -> None:
    """Undecodable text is reported as a configuration error."""
    with pytest.raises(ConfigurationError):
        load_options("{not json")
    with pytest.raises(ConfigurationError):
        load_options("store_uses = ")


def test_non_mapping_raises_configuration_error() -> None:
    """The top-level value must be a mapping."""
    with pytest.raises(ConfigurationError, match="mapping"):
        load_options("[1, 2, 3]")


def test_invalid_values_raise_configuration_error() -> None:
    """Validation failures are wrapped and remain recoverable."""
    with pytest.raises(RecoverableError) as excinfo:
        load_options({"store_uses": "maybe"})

    assert isinstance(excinfo.value, ConfigurationError)
    assert excinfo.value.__cause__ is not None


def test_missing_path_raises_configuration_error(tmp_path: Path) -> None:
    """A Path that does not exist cannot be read."""
    with pytest.raises(ConfigurationError):
        load_options(tmp_path / "missing.toml")


def test_unsupported_source_type() -> None:
    """Anything else is a programming error."""
    with pytest.raises(TypeError):
        load_options(42)  # type: ignore[arg-type]


def test_inline_toml_starting_with_table_header() -> None:
    """Inline TOML may open with a table header instead of a JSON array."""
    options = load_options('[statement_options]\nexclude_statements = ["leaf"]\n')

    assert options.statement_options.exclude_statements == ("leaf",)


def test_unknown_suffix_toml_starting_with_table_header(tmp_path: Path) -> None:
    """Sniffed files that start with a table header are read as TOML."""
    path = tmp_path / "options.conf"
    path.write_text(
        '[module_options]\ninclude_only_sources = ["leaf", "container"]\n',
        encoding="utf-8",
    )

    assert load_options(path).module_options.include_only_sources == ("leaf", "container")


def test_bracketed_text_that_is_neither_format() -> None:
    """Text starting with '[' that fails both decoders is a configuration error."""
    with pytest.raises(ConfigurationError):
        load_options("[statement_options\nexclude_statements = 1")
