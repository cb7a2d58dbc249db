"""
Grid: the public entry point.

A Grid is built once from a cell width and then maps locations to cells:

    grid = Grid(0.5, "degrees")
    grid.key({"latitude": 0.3, "longitude": 23})    # '168-b4-196'
    Grid.extract("168-b4-196").center               # Coordinate(0.25, 23.25)

A Grid holds nothing but a frozen Resolution, so one instance can be shared
between threads.
"""

import logging
from typing import Dict, Union

from .cell import CellInfo, Coordinate, assemble
from .fixedpoint import PRECISION
from .keys import decode_key
from .quantize import locate_cell, quantize_to_cell
from .resolution import Resolution, resolve_resolution
from .validate import validate_location


LOGGER = logging.getLogger(__name__)


class Grid:
    """Quantizes coordinates into cells of approximately fixed size."""

    def __init__(self, width: Union[float, str], unit: str = "meters"):
        """
        Args:
            width: Cell width, as a number or a numeric string
            unit: 'meters' or 'degrees'. Meters are converted at the equator.

        Raises:
            ConstructionError: If width or unit is invalid
        """
        self._resolution = resolve_resolution(width, unit)
        LOGGER.debug("Created %r", self)

    def __repr__(self) -> str:
        return f"Grid(divisions={self._resolution.divisions}, width={self._resolution.width})"

    @property
    def resolution(self) -> Resolution:
        """Latitude band layout of this grid."""
        return self._resolution

    def get(self, location) -> CellInfo:
        """
        Get the cell containing a location.

        Args:
            location: Mapping or object with latitude and longitude

        Returns:
            CellInfo with center, bounds, widths and key

        Raises:
            ValidationError: If the location is malformed or out of range
        """
        return quantize_to_cell(self._resolution, validate_location(location))

    def key(self, location) -> str:
        """Key of the cell containing a location."""
        return self.get(location).key

    def center(self, location) -> Coordinate:
        """Center of the cell containing a location."""
        return self.get(location).center

    def debug(self) -> Dict[str, Union[float, int]]:
        """Width and division count of the grid, for introspection."""
        return {
            "width": self._resolution.width,
            "divisions": self._resolution.divisions,
        }

    @staticmethod
    def precision() -> int:
        """Fixed-point scale used by all grid arithmetic."""
        return PRECISION

    @staticmethod
    def extract(key: str) -> CellInfo:
        """
        Rebuild a cell from its key, without the grid that produced it.

        The returned key is in canonical lower-case form.

        Raises:
            MalformedKeyError: If the key is malformed or names no valid cell
        """
        return assemble(*locate_cell(*decode_key(key)))
