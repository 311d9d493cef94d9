"""Public option models for the YANG parser, validated with Pydantic.

Options are grouped into three families: deviation handling, statement
handling and module handling. Every family model carries a capability marker
so that call sites can accept a single ``*opts`` parameter and still pick out
only the values meant for them. The :class:`Options` aggregate bundles one
value of each family together with the global parser flags.
"""

from abc import ABC
from typing import Any, Dict, Tuple

from pydantic import BaseModel, Field


class DeviateOpt(ABC):
    """Marker for option values accepted by deviation-aware calls."""

    def is_deviate_opt(self) -> None:
        """Mark the class as a member of the deviate option family."""


class StatementOpt(ABC):
    """Marker for option values accepted by statement-tree calls."""

    def is_statement_opt(self) -> None:
        """Mark the class as a member of the statement option family."""


class ModuleOpt(ABC):
    """Marker for option values accepted by module source linking."""

    def is_module_opt(self) -> None:
        """Mark the class as a member of the module option family."""


class DeviateOptions(BaseModel, DeviateOpt):
    """Options for how deviations are handled.

    Attributes:
        ignore_deviate_not_supported: Retain nodes marked with
            ``deviate not-supported`` instead of removing them. Useful when
            one AST has to serve targets with different support for a leaf.
    """

    ignore_deviate_not_supported: bool = False

    model_config = {"frozen": True, "extra": "forbid"}


class StatementOptions(BaseModel, StatementOpt):
    """Options for how statements are handled.

    Attributes:
        exclude_statements: Statement keywords ignored while building the
            statement tree.
        latest_revision_only: Keep only the latest ``revision`` statement and
            drop the older ones.
    """

    exclude_statements: Tuple[str, ...] = Field(default_factory=tuple)
    latest_revision_only: bool = False

    model_config = {"frozen": True, "extra": "forbid"}


class ModuleOptions(BaseModel, ModuleOpt):
    """Options for how modules are handled.

    Attributes:
        include_only_sources: Statement keywords linked to the ``source``
            field of the module node. Statements with other keywords are not
            linked. An empty list links every statement.
    """

    include_only_sources: Tuple[str, ...] = Field(default_factory=tuple)

    model_config = {"frozen": True, "extra": "forbid"}


class Options(BaseModel):
    """Options used when parsing YANG modules.

    This is the top-level object handed to a parse call. The parser reads the
    two global flags directly; the nested family options are resolved into
    lookup structures by :func:`yangkit.parsers.options.resolve_options`.

    Attributes:
        ignore_submodule_circular_dependencies: Tolerate a submodule that
            includes itself through a circular chain of includes.
        store_uses: Populate the ``uses`` field of each entry with the
            grouping it was derived from.
        deviate_options: Deviation handling options.
        statement_options: Statement handling options.
        module_options: Module handling options.
    """

    ignore_submodule_circular_dependencies: bool = False
    store_uses: bool = False
    deviate_options: DeviateOptions = Field(default_factory=DeviateOptions)
    statement_options: StatementOptions = Field(default_factory=StatementOptions)
    module_options: ModuleOptions = Field(default_factory=ModuleOptions)

    model_config = {"frozen": True, "extra": "forbid"}

    def option_values(self) -> Tuple[BaseModel, ...]:
        """Return the nested family options as one shared bag.

        The bag can be passed unchanged to every family-specific fold, each of
        which picks out only the value it understands.
        """
        return (self.deviate_options, self.statement_options, self.module_options)

    @classmethod
    def default(cls) -> "Options":
        """Return options with every setting at its permissive default."""
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Options":
        """Create options from a dictionary.

        Args:
            data: Options mapping, with one nested table per option family.

        Returns:
            Options instance.

        Raises:
            ValidationError: If the mapping has unknown keys or bad values.
        """
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert options to a JSON-friendly dictionary."""
        return self.model_dump(mode="json")
