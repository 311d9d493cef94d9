"""Parser-facing option lookups.

The statement-tree builder, deviation handling and module source linking
query option state through the helpers re-exported here.
"""

from yangkit.parsers.options import (
    ModuleOptionSet,
    ParseSettings,
    StatementOptionSet,
    has_ignore_deviate_not_supported,
    include_statement,
    resolve_options,
    set_source_statement,
)

__all__ = [
    "ModuleOptionSet",
    "ParseSettings",
    "StatementOptionSet",
    "has_ignore_deviate_not_supported",
    "include_statement",
    "resolve_options",
    "set_source_statement",
]
