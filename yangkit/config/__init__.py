"""Public parser options for yangkit."""

from .schema import (
    DeviateOpt,
    StatementOpt,
    ModuleOpt,
    DeviateOptions,
    StatementOptions,
    ModuleOptions,
    Options,
)

__all__ = [
    "DeviateOpt",
    "StatementOpt",
    "ModuleOpt",
    "DeviateOptions",
    "StatementOptions",
    "ModuleOptions",
    "Options",
]
