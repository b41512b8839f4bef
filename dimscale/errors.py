"""
Dimscale exceptions and warnings.

All validation failures derive from DimensionError, which is a ValueError, so callers that
already guard numeric input with ``except ValueError`` keep working.
"""


# Classes --------------------------------------------------------------------------------------------------------------

class DimensionError(ValueError):
    """Base class for dimension resolution failures."""


class InvalidMetrics(DimensionError):
    """Display metrics or reference profile with non-positive or non-finite values."""


class InvalidSpec(DimensionError):
    """Dimension spec outside its domain: fraction not in (0, 1], negative sizes, bad ranges."""


class ScaleClampWarning(RuntimeWarning):
    """Emitted when a raw scale ratio falls outside the configured clamp band."""
