from __future__ import annotations


class PerceptronError(Exception):
    """Base class for every error raised by this package."""


class DimensionMismatchError(PerceptronError, ValueError):
    """Parameter, sample or label shapes disagree with the data they pair with."""


class InvalidConfigError(PerceptronError, ValueError):
    """A trainer or kernel was configured with values it cannot run with."""


class LabelError(PerceptronError, ValueError):
    """Labels outside {-1, +1}."""
