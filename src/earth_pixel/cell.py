"""
Value types describing a grid cell, and their assembly from grid indices.

All edges are computed on fixed-point integers and converted to floats in
one step, so that bounds, widths and centers of the same cell always agree.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict

from .fixedpoint import from_fixed, from_fixed_half, to_fixed
from .keys import encode_key


@dataclass(frozen=True)
class Coordinate:
    """A latitude/longitude pair in degrees."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class Bounds:
    """Edges of a cell in degrees."""

    north: float
    south: float
    east: float
    west: float


@dataclass(frozen=True)
class Widths:
    """Size of a cell along each axis, in degrees."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class CellIndices:
    """
    Position of a cell in the grid.

    lon_divisions is the number of longitude cells in the cell's latitude
    band; it is derived from the band, not stored in keys.
    """

    divisions: int
    lat_index: int
    lon_index: int
    lon_divisions: int


@dataclass(frozen=True)
class CellInfo:
    """Everything known about one cell."""

    center: Coordinate
    bounds: Bounds
    widths: Widths
    key: str

    def as_dict(self) -> Dict[str, Any]:
        """Return the cell as nested plain dictionaries."""
        return asdict(self)


def assemble(indices: CellIndices, lat_width: int, lon_width: int) -> CellInfo:
    """
    Build the CellInfo of a cell.

    Args:
        indices: Grid position of the cell
        lat_width: Latitude band height (fixed-point)
        lon_width: Longitude cell width in this band (fixed-point)

    Returns:
        CellInfo with center, bounds, widths and key
    """
    south = indices.lat_index * lat_width - to_fixed(90)
    west = indices.lon_index * lon_width - to_fixed(180)

    return CellInfo(
        center=Coordinate(
            latitude=from_fixed_half(2 * south + lat_width),
            longitude=from_fixed_half(2 * west + lon_width),
        ),
        bounds=Bounds(
            north=from_fixed(south + lat_width),
            south=from_fixed(south),
            east=from_fixed(west + lon_width),
            west=from_fixed(west),
        ),
        widths=Widths(
            latitude=from_fixed(lat_width),
            longitude=from_fixed(lon_width),
        ),
        key=encode_key(indices.divisions, indices.lat_index, indices.lon_index),
    )
