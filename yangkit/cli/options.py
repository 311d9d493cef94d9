"""CLI command to inspect the parse settings resolved from options.

Options are loaded from an optional TOML/JSON source, CLI flags are layered
on top, and the resulting settings are printed either as a table or as JSON.
Keywords passed with ``--keyword`` are evaluated against the resolved
statement and module lookups.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from yangkit.config.schema import (
    DeviateOptions,
    ModuleOptions,
    Options,
    StatementOptions,
)
from yangkit.errors import ConfigurationError
from yangkit.parsers.options import ParseSettings, resolve_options
from yangkit.runtime.config_loader import load_options

logger = logging.getLogger("yangkit.cli.options")


def apply_cli_overrides(options: Options, args) -> Options:
    """Layer command-line flags on top of loaded options.

    Boolean flags can only switch a setting on. Keyword lists extend the
    configured lists.

    Args:
        options: Options loaded from the configuration source.
        args: Parsed command-line arguments.

    Returns:
        New Options instance with the overrides applied.
    """
    statement = options.statement_options
    module = options.module_options
    deviate = options.deviate_options

    return Options(
        ignore_submodule_circular_dependencies=(
            options.ignore_submodule_circular_dependencies
            or bool(getattr(args, "ignore_submodule_circular_dependencies", False))
        ),
        store_uses=options.store_uses or bool(getattr(args, "store_uses", False)),
        deviate_options=DeviateOptions(
            ignore_deviate_not_supported=(
                deviate.ignore_deviate_not_supported
                or bool(getattr(args, "ignore_deviate_not_supported", False))
            )
        ),
        statement_options=StatementOptions(
            exclude_statements=statement.exclude_statements
            + tuple(getattr(args, "exclude", None) or ()),
            latest_revision_only=(
                statement.latest_revision_only
                or bool(getattr(args, "latest_revision_only", False))
            ),
        ),
        module_options=ModuleOptions(
            include_only_sources=module.include_only_sources
            + tuple(getattr(args, "include_source", None) or ()),
        ),
    )


def settings_to_dict(settings: ParseSettings, keywords: List[str]) -> Dict[str, Any]:
    """Convert resolved settings and keyword decisions to a JSON-friendly dict."""
    return {
        "ignore_submodule_circular_dependencies": settings.ignore_submodule_circular_dependencies,
        "store_uses": settings.store_uses,
        "ignore_deviate_not_supported": settings.ignore_deviate_not_supported,
        "latest_revision_only": settings.statements.latest_revision_only,
        "exclude_statements": sorted(settings.statements.exclude_statements),
        "include_only_sources": sorted(settings.modules.include_only_sources),
        "keywords": {
            keyword: {
                "include_statement": settings.include_statement(keyword),
                "set_source_statement": settings.set_source_statement(keyword),
            }
            for keyword in keywords
        },
    }


# Shown for an empty keyword list; both empty lists mean "restrict nothing".
_EMPTY_LIST_LABELS = {
    "exclude_statements": "(none)",
    "include_only_sources": "(all)",
}


def _render_table(console: Console, data: Dict[str, Any]) -> None:
    table = Table(title="Resolved parse settings")
    table.add_column("Setting")
    table.add_column("Value")
    for key, value in data.items():
        if key == "keywords":
            continue
        if isinstance(value, list):
            value = ", ".join(value) if value else _EMPTY_LIST_LABELS.get(key, "(none)")
        table.add_row(key, Text(str(value)))
    console.print(table)

    if data["keywords"]:
        decisions = Table(title="Keyword decisions")
        decisions.add_column("Keyword")
        decisions.add_column("Included")
        decisions.add_column("Linked to source")
        for keyword, result in data["keywords"].items():
            decisions.add_row(
                Text(keyword),
                "yes" if result["include_statement"] else "no",
                "yes" if result["set_source_statement"] else "no",
            )
        console.print(decisions)


def options_command(args, console: Optional[Console] = None) -> int:
    """Execute the options inspection command.

    Args:
        args: Parsed command-line arguments.
        console: Rich Console for output (optional).

    Returns:
        int: Exit code (0 for success, non-zero for failure).
    """
    console = console or Console()
    try:
        options = load_options(getattr(args, "config", None))
    except ConfigurationError as e:
        logger.error("Failed to load options: %s", e)
        return 1

    options = apply_cli_overrides(options, args)
    settings = resolve_options(options)
    data = settings_to_dict(settings, list(getattr(args, "keyword", None) or []))

    if getattr(args, "json", False):
        console.print_json(json.dumps(data))
    else:
        _render_table(console, data)
    return 0
