"""
Quantization of coordinates onto the latitude band / longitude cell grid.

Latitude is split into `divisions` bands of equal height. Each band is then
split into its own number of longitude cells: a degree of longitude covers
cos(latitude) times the ground distance it covers at the equator, so the
band's cells are widened by 1 / cos(center latitude) and snapped to an
integer count over 360 degrees.

Indices are floored, so a band covers [south, north) and a cell covers
[west, east). Latitude 90 and longitude 180 fold into the last band and the
last cell instead of overflowing the index range.

All arithmetic that feeds a floor or ceiling runs on fixed-point integers.
"""

import math
from typing import Tuple

from .cell import CellIndices, CellInfo, Coordinate, assemble
from .errors import MalformedKeyError
from .fixedpoint import from_fixed_half, to_fixed
from .resolution import Resolution


def clamp_index(index: int, count: int) -> int:
    """Clamp an index to [0, count - 1]."""
    return max(0, min(count - 1, index))


def band_center(lat_index: int, lat_width: int) -> float:
    """
    Center latitude of a band, in degrees.

    Args:
        lat_index: Latitude band index
        lat_width: Band height (fixed-point)
    """
    south = lat_index * lat_width - to_fixed(90)
    return from_fixed_half(2 * south + lat_width)


def adjust_width_for_longitude(latitude: float, width: float) -> Tuple[int, int]:
    """
    Longitude cell layout of the band centered on `latitude`.

    Args:
        latitude: Band center latitude in degrees
        width: Band height in degrees

    Returns:
        Tuple of (lon_divisions, lon_width) where lon_width is fixed-point

    When cos(latitude) <= 0 the band is a single cell spanning 360 degrees.
    Band centers never reach the poles, so this only guards the formula.
    """
    cos = math.cos(math.radians(latitude))
    if cos <= 0:
        lon_divisions = 1
    else:
        lon_divisions = max(1, math.ceil(360 / (width / cos)))
    return lon_divisions, to_fixed(360 / lon_divisions)


def quantize_location(resolution: Resolution, coordinate: Coordinate) -> Tuple[CellIndices, int, int]:
    """
    Find the cell containing a validated coordinate.

    Args:
        resolution: Latitude band layout
        coordinate: Coordinate within [-90, 90] x [-180, 180]

    Returns:
        Tuple of (indices, lat_width, lon_width), widths as fixed-point integers
    """
    lat_width = resolution.fixed_width
    lat_index = (to_fixed(coordinate.latitude) + to_fixed(90)) // lat_width
    lat_index = clamp_index(lat_index, resolution.divisions)

    lon_divisions, lon_width = adjust_width_for_longitude(
        band_center(lat_index, lat_width), resolution.width
    )
    lon_index = (to_fixed(coordinate.longitude) + to_fixed(180)) // lon_width
    lon_index = clamp_index(lon_index, lon_divisions)

    indices = CellIndices(resolution.divisions, lat_index, lon_index, lon_divisions)
    return indices, lat_width, lon_width


def locate_cell(divisions: int, lat_index: int, lon_index: int) -> Tuple[CellIndices, int, int]:
    """
    Rebuild a cell's layout from its key components alone.

    Args:
        divisions: Number of latitude bands
        lat_index: Latitude band index
        lon_index: Longitude cell index

    Returns:
        Tuple of (indices, lat_width, lon_width), widths as fixed-point integers

    Raises:
        MalformedKeyError: If no valid grid has such a cell
    """
    try:
        resolution = Resolution.from_divisions(divisions)
    except ValueError as exc:
        raise MalformedKeyError(f"Invalid division count {divisions}: {exc}") from exc

    if lat_index >= divisions:
        raise MalformedKeyError(
            f"Latitude index {lat_index} out of range for {divisions} divisions"
        )

    lat_width = resolution.fixed_width
    lon_divisions, lon_width = adjust_width_for_longitude(
        band_center(lat_index, lat_width), resolution.width
    )
    if lon_index >= lon_divisions:
        raise MalformedKeyError(
            f"Longitude index {lon_index} out of range for {lon_divisions} cells in band {lat_index}"
        )

    indices = CellIndices(divisions, lat_index, lon_index, lon_divisions)
    return indices, lat_width, lon_width


def quantize_to_cell(resolution: Resolution, coordinate: Coordinate) -> CellInfo:
    """Quantize a coordinate and assemble its CellInfo."""
    return assemble(*quantize_location(resolution, coordinate))

