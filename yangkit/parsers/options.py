"""Derived option lookups consumed by the YANG parsing engine.

The public option models are declarative. Before a parse starts they are
folded into immutable lookup sets so that the engine can ask, once per
statement it visits, whether to keep the statement and whether to link it to
the module source.

Each family follows its own aggregation rule and the rules are kept as
separate functions:

* exclude keywords and include-only keywords are unions over every value;
* ``latest_revision_only`` is decided by the last statement option supplied;
* ``ignore_deviate_not_supported`` is decided by the first deviate option.

Values whose concrete type is not the family model, including subclasses and
values from a foreign family, are skipped by every fold, so one bag of options
may be handed to all of them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import FrozenSet, Optional

from yangkit.config.schema import (
    DeviateOpt,
    DeviateOptions,
    ModuleOpt,
    ModuleOptions,
    Options,
    StatementOpt,
    StatementOptions,
)

logger = logging.getLogger("yangkit.parsers.options")


def has_ignore_deviate_not_supported(*opts: DeviateOpt) -> bool:
    """Return the flag of the first :class:`DeviateOptions` in ``opts``.

    Later deviate options are not consulted. Without any deviate option the
    result is ``False``, meaning ``deviate not-supported`` nodes are removed.
    """
    for opt in opts:
        if type(opt) is DeviateOptions:
            return opt.ignore_deviate_not_supported
    return False


def fold_exclude_statements(*opts: StatementOpt) -> FrozenSet[str]:
    """Union the exclude keywords of every :class:`StatementOptions`."""
    excluded = set()
    for opt in opts:
        if type(opt) is StatementOptions:
            excluded.update(opt.exclude_statements)
    return frozenset(excluded)


def fold_latest_revision_only(*opts: StatementOpt) -> bool:
    """Return the ``latest_revision_only`` flag of the last statement option.

    A later ``False`` overrides an earlier ``True``.
    """
    latest_revision_only = False
    for opt in opts:
        if type(opt) is StatementOptions:
            latest_revision_only = opt.latest_revision_only
    return latest_revision_only


def fold_include_only_sources(*opts: ModuleOpt) -> FrozenSet[str]:
    """Union the include-only keywords of every :class:`ModuleOptions`."""
    included = set()
    for opt in opts:
        if type(opt) is ModuleOptions:
            included.update(opt.include_only_sources)
    return frozenset(included)


@dataclass(frozen=True)
class StatementOptionSet:
    """Resolved statement options.

    Attributes:
        exclude_statements: Keywords whose statements are dropped.
        latest_revision_only: Keep only the latest revision statement.
    """

    exclude_statements: FrozenSet[str] = field(default_factory=frozenset)
    latest_revision_only: bool = False

    @classmethod
    def from_options(cls, *opts: StatementOpt) -> "StatementOptionSet":
        """Fold statement options into a lookup set."""
        resolved = cls(
            exclude_statements=fold_exclude_statements(*opts),
            latest_revision_only=fold_latest_revision_only(*opts),
        )
        logger.debug(
            "Resolved statement options: %d excluded keyword(s), latest_revision_only=%s",
            len(resolved.exclude_statements),
            resolved.latest_revision_only,
        )
        return resolved

    def include_statement(self, keyword: str) -> bool:
        """Return True if statements with ``keyword`` should be kept."""
        if not self.exclude_statements:
            return True
        return keyword not in self.exclude_statements


@dataclass(frozen=True)
class ModuleOptionSet:
    """Resolved module options.

    Attributes:
        include_only_sources: Keywords whose statements are linked to the
            module source. Empty means every statement is linked.
    """

    include_only_sources: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def from_options(cls, *opts: ModuleOpt) -> "ModuleOptionSet":
        """Fold module options into a lookup set."""
        resolved = cls(include_only_sources=fold_include_only_sources(*opts))
        logger.debug(
            "Resolved module options: %d include-only keyword(s)",
            len(resolved.include_only_sources),
        )
        return resolved

    def set_source_statement(self, keyword: str) -> bool:
        """Return True if statements with ``keyword`` should be linked to the source."""
        if not self.include_only_sources:
            return True
        return keyword in self.include_only_sources


def include_statement(opts: Optional[StatementOptionSet], keyword: str) -> bool:
    """Return True if the statement should be included.

    A missing option set includes everything.
    """
    if opts is None:
        return True
    return opts.include_statement(keyword)


def set_source_statement(opts: Optional[ModuleOptionSet], keyword: str) -> bool:
    """Return True if the source statement should be set.

    A missing option set links everything.
    """
    if opts is None:
        return True
    return opts.set_source_statement(keyword)


@dataclass(frozen=True)
class ParseSettings:
    """Read-only snapshot of every option a single parse call consults.

    Attributes:
        ignore_submodule_circular_dependencies: Tolerate circular submodule
            includes.
        store_uses: Record the originating grouping on each entry.
        ignore_deviate_not_supported: Retain ``deviate not-supported`` nodes.
        statements: Resolved statement options.
        modules: Resolved module options.
    """

    ignore_submodule_circular_dependencies: bool = False
    store_uses: bool = False
    ignore_deviate_not_supported: bool = False
    statements: StatementOptionSet = field(default_factory=StatementOptionSet)
    modules: ModuleOptionSet = field(default_factory=ModuleOptionSet)

    def include_statement(self, keyword: str) -> bool:
        """Return True if statements with ``keyword`` should be kept."""
        return self.statements.include_statement(keyword)

    def set_source_statement(self, keyword: str) -> bool:
        """Return True if statements with ``keyword`` should be linked to the source."""
        return self.modules.set_source_statement(keyword)


def resolve_options(options: Optional[Options] = None, *extra_opts) -> ParseSettings:
    """Resolve an options aggregate and extra family values for one parse call.

    The aggregate's own family values come first in the bag, followed by
    ``extra_opts``. Each family then applies its own rule to that order, so
    the aggregate's deviate flag wins over extra deviate options while the
    last extra statement option decides ``latest_revision_only``.

    Args:
        options: Options aggregate. ``None`` behaves like ``Options()``.
        *extra_opts: Additional option values of any family.

    Returns:
        ParseSettings snapshot, safe to share between worker threads.
    """
    if options is None:
        options = Options.default()

    bag = options.option_values() + tuple(extra_opts)
    settings = ParseSettings(
        ignore_submodule_circular_dependencies=options.ignore_submodule_circular_dependencies,
        store_uses=options.store_uses,
        ignore_deviate_not_supported=has_ignore_deviate_not_supported(*bag),
        statements=StatementOptionSet.from_options(*bag),
        modules=ModuleOptionSet.from_options(*bag),
    )
    logger.debug(
        "Resolved parse settings from %d option value(s): ignore_deviate_not_supported=%s",
        len(bag),
        settings.ignore_deviate_not_supported,
    )
    return settings


__all__ = [
    "StatementOptionSet",
    "ModuleOptionSet",
    "ParseSettings",
    "has_ignore_deviate_not_supported",
    "fold_exclude_statements",
    "fold_latest_revision_only",
    "fold_include_only_sources",
    "include_statement",
    "set_source_statement",
    "resolve_options",
]
