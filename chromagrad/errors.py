"""Exceptions and warnings raised while parsing gradient descriptors.

Structural problems raise a :class:`GradientError` subclass. Everything the
parsers can recover from is reported with :class:`GradientWarning` through
``warnings.warn`` and parsing continues with a best-effort default.
"""


class GradientError(ValueError):
    """Base class for hard gradient parsing failures."""


class FractionError(GradientError):
    """A number or percentage could not be read."""


class ColorResolveError(GradientError):
    """A color token did not resolve to a color."""


class TransformError(GradientError):
    """A transform list could not be parsed."""


class GradientXMLError(GradientError):
    """The XML token stream was malformed."""


class GradientWarning(UserWarning):
    """A recoverable problem in a gradient descriptor."""
