"""
Resolution of a requested cell width into a whole number of latitude bands.

A requested width is never used as is: it is snapped so that an integer
number of equal-height bands tiles the 180 degrees between the poles. The
division count alone is then enough to rebuild the band height, which is
what lets a key be decoded without the grid that produced it.
"""

from dataclasses import dataclass
import logging
import math

from .errors import ConstructionError, InvalidUnit, InvalidWidth, WidthTooLarge, WidthTooSmall
from .fixedpoint import PRECISION, round_fixed, to_fixed


LOGGER = logging.getLogger(__name__)

EARTH_RADIUS = 6371000
"""Mean Earth radius in meters (spherical model)."""

EARTH_PERIMETER = 2 * math.pi * EARTH_RADIUS

MAX_WIDTH = 45
"""Maximum accepted cell width, in degrees."""

MIN_DIVISIONS = math.ceil(180 / MAX_WIDTH)

MAX_DIVISIONS = 948_682
"""
Finest accepted grid, about 21 m cells.

Floored widths leave up to one fixed-point unit per cell uncovered below the
north pole and the east date line, and those points fold into the last band
or cell. Bands near the equator hold at most 2 * divisions + 2 cells, so the
uncovered strip stays narrower than one cell while
(2 * divisions + 2) * (2 * divisions + 3) < 360 * PRECISION.
"""

UNITS = ("meters", "degrees")


def meters_to_degrees(meters: float) -> float:
    """Convert a distance along the equator to degrees of arc."""
    return 360 * meters / EARTH_PERIMETER


def _check_divisions(divisions) -> None:
    if isinstance(divisions, bool) or not isinstance(divisions, int):
        raise ConstructionError(f"divisions must be an integer, got {divisions!r}")
    if divisions < MIN_DIVISIONS:
        raise WidthTooLarge(
            f"divisions must be at least {MIN_DIVISIONS} (width <= {MAX_WIDTH} degrees), "
            f"got {divisions}"
        )
    if divisions > MAX_DIVISIONS:
        raise WidthTooSmall(
            f"divisions must be at most {MAX_DIVISIONS} at precision {PRECISION}, got {divisions}"
        )


@dataclass(frozen=True)
class Resolution:
    """
    Latitude band layout of a grid.

    Attributes:
        divisions: Number of latitude bands covering 180 degrees
        width: Height of a band in degrees, rounded to the fixed-point precision
    """

    divisions: int
    width: float

    def __post_init__(self):
        _check_divisions(self.divisions)
        if self.width != round_fixed(180 / self.divisions):
            raise ConstructionError(
                f"width {self.width} does not match {self.divisions} divisions"
            )

    @classmethod
    def from_divisions(cls, divisions: int) -> "Resolution":
        """Rebuild a resolution from its division count alone."""
        _check_divisions(divisions)
        return cls(divisions, round_fixed(180 / divisions))

    @property
    def fixed_width(self) -> int:
        """Band height as a fixed-point integer."""
        return to_fixed(self.width)


def resolve_resolution(width, unit: str = "meters") -> Resolution:
    """
    Turn a requested cell width into a validated Resolution.

    Args:
        width: Cell width, as a number or a numeric string
        unit: 'meters' (converted at the equator) or 'degrees'

    Returns:
        Resolution with an integer division count

    Raises:
        InvalidWidth: If width is not a finite positive number
        InvalidUnit: If unit is not one of UNITS
        WidthTooLarge: If the width exceeds MAX_WIDTH degrees
        WidthTooSmall: If the grid needs more than MAX_DIVISIONS bands
    """
    try:
        degrees = float(width)
    except (TypeError, ValueError) as exc:
        raise InvalidWidth(f"Width must be a number, got {width!r}") from exc

    if not math.isfinite(degrees):
        raise InvalidWidth(f"Width must be finite, got {width!r}")
    if degrees <= 0:
        raise InvalidWidth(f"Width must be positive, got {width!r}")

    if unit not in UNITS:
        raise InvalidUnit(f"Unknown unit {unit!r}, expected one of {', '.join(UNITS)}")

    if unit == "meters":
        degrees = meters_to_degrees(degrees)

    if degrees > MAX_WIDTH:
        raise WidthTooLarge(f"Width must be at most {MAX_WIDTH} degrees, got {degrees}")

    bands = 180 / degrees
    if not math.isfinite(bands):
        raise WidthTooSmall(f"Width {width!r} {unit} is too small to divide the globe")

    divisions = math.ceil(bands)
    resolution = Resolution.from_divisions(divisions)

    LOGGER.debug(
        "Resolved width %r %s to %d divisions of %s degrees",
        width, unit, resolution.divisions, resolution.width,
    )
    return resolution
