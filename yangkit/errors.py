"""Exception hierarchy for yangkit.

Folding options and querying them never raises. Errors only arise at the
edges, when options are loaded from an outside source.
"""


class RecoverableError(Exception):
    """Base class for recoverable errors.

    These errors indicate expected failure conditions that a caller can
    report and recover from, for example by falling back to default options.
    """
    pass


class ConfigurationError(RecoverableError):
    """Configuration source error.

    Raised when an options file or inline options text cannot be decoded, is
    not a mapping, or contains unknown keys or invalid values.
    """
    pass
