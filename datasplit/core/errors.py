"""Split-specific exceptions.

These are raised from compute paths before any output is produced. Callers
(use-cases, CLI, HTTP routers) translate them into exit codes or responses.
"""


class SplitError(ValueError):
    """Base class for failures that abort a train/test split."""


class ConfigurationError(SplitError):
    """Raised when split parameters are invalid (e.g. test ratio out of range)."""


class ShapeMismatchError(SplitError):
    """Raised when data, labels and permutation disagree on the number of points."""
