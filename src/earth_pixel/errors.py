"""
Error hierarchy for grid construction, coordinate validation and key decoding.

Every error raised by the package derives from EarthPixelError. The
construction, validation and key errors are also ValueErrors, so callers
that only care about "bad input" can catch that.
"""


class EarthPixelError(Exception):
    """Base class for all earth_pixel errors."""


class InternalPrecisionError(EarthPixelError, RuntimeError):
    """The fixed-point scale cannot represent the full longitude range exactly."""


class ConstructionError(EarthPixelError, ValueError):
    """A grid could not be built from the requested width and unit."""


class InvalidWidth(ConstructionError):
    """Width is not a finite positive number."""


class InvalidUnit(ConstructionError):
    """Unit is neither 'meters' nor 'degrees'."""


class WidthTooLarge(ConstructionError):
    """Width exceeds the maximum cell width in degrees."""


class WidthTooSmall(ConstructionError):
    """Width is finer than the fixed-point precision can represent."""


class ValidationError(EarthPixelError, ValueError):
    """A location could not be turned into a valid coordinate."""


class NotAnObject(ValidationError, TypeError):
    """Location is not a mapping or an object with latitude/longitude."""


class NotANumber(ValidationError):
    """Latitude or longitude is missing or not a finite number."""


class OutOfRange(ValidationError):
    """Latitude or longitude lies outside the valid geographic range."""


class MalformedKeyError(EarthPixelError, ValueError):
    """A cell key does not describe a cell of any valid grid."""
