"""Validation of caller-supplied locations."""

from collections.abc import Mapping
import math
import numbers

from .cell import Coordinate
from .errors import NotAnObject, NotANumber, OutOfRange


_MISSING = object()


def _field(location, name: str):
    if isinstance(location, Mapping):
        return location.get(name, _MISSING)
    return getattr(location, name, _MISSING)


def _to_number(value, name: str) -> float:
    if value is _MISSING:
        raise NotANumber(f"{name.capitalize()} is missing")
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise NotANumber(f"{name.capitalize()} must be a number, got {value!r}") from exc
    if not math.isfinite(number):
        raise NotANumber(f"{name.capitalize()} must be finite, got {value!r}")
    return number


def validate_location(location) -> Coordinate:
    """
    Check a location and return it as a Coordinate.

    Args:
        location: Mapping with 'latitude' and 'longitude' keys, or any
            object exposing latitude and longitude attributes

    Returns:
        Coordinate with float latitude and longitude

    Raises:
        NotAnObject: If location is a scalar, a string or None
        NotANumber: If a field is missing or not a finite number
        OutOfRange: If |latitude| > 90 or |longitude| > 180
    """
    if location is None or isinstance(location, (str, bytes, numbers.Number)):
        raise NotAnObject(f"Location must be a mapping or an object, got {type(location).__name__}")

    latitude = _to_number(_field(location, "latitude"), "latitude")
    longitude = _to_number(_field(location, "longitude"), "longitude")

    if abs(latitude) > 90:
        raise OutOfRange(f"Latitude must be between -90 and 90, got {latitude}")
    if abs(longitude) > 180:
        raise OutOfRange(f"Longitude must be between -180 and 180, got {longitude}")

    return Coordinate(latitude, longitude)
