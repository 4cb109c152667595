"""
Winding normalizer for Polygon rings.

Computes the orientation of each ring of a Polygon from the sign of its
shoelace area and reverses, in place, every ring whose orientation disagrees
with the requested convention.

Two conventions are supported:

    FORWARD  exterior clockwise, holes counter-clockwise (d3-geo)
    REVERSE  exterior counter-clockwise, holes clockwise (RFC 7946)

Usage:
    from geojson_wind.winding import Convention, wind_polygon
    wind_polygon(geometry["coordinates"], Convention.FORWARD)
"""

import logging
from enum import Enum
from typing import List, Sequence

from shapely.algorithms.cga import signed_area as _cga_signed_area
from shapely.geometry import LinearRing

from .exceptions import WindingInvariantError

logger = logging.getLogger(__name__)

# A closed ring needs at least three distinct vertices plus the closing point
MIN_RING_POSITIONS = 4


class Orientation(Enum):
    CLOCKWISE = "clockwise"
    COUNTER_CLOCKWISE = "counter-clockwise"
    DEGENERATE = "degenerate"


class Convention(Enum):
    """Target winding convention for Polygon rings."""

    FORWARD = "forward"
    REVERSE = "reverse"

    @classmethod
    def from_reverse(cls, reverse) -> "Convention":
        """Map the boolean ``reverse`` flag onto a convention.

        A Convention passed in is returned unchanged.
        """
        if isinstance(reverse, cls):
            return reverse
        return cls.REVERSE if reverse else cls.FORWARD

    @property
    def exterior_clockwise(self) -> bool:
        return self is Convention.FORWARD

    @property
    def interior_clockwise(self) -> bool:
        return self is Convention.REVERSE


def _check_ring(ring):
    if not isinstance(ring, list):
        raise WindingInvariantError(
            f"Expected a ring as a list of positions, got {type(ring).__name__}"
        )


def signed_area(ring: Sequence) -> float:
    """Shoelace area of a ring; positive when counter-clockwise.

    Rings with fewer than MIN_RING_POSITIONS positions are degenerate and
    report 0.0. Only the x and y values of each position are used.
    """
    if len(ring) < MIN_RING_POSITIONS:
        return 0.0
    try:
        linear_ring = LinearRing([(position[0], position[1]) for position in ring])
    except (TypeError, IndexError, ValueError, OverflowError) as e:
        raise WindingInvariantError(f"Ring positions cannot be read as x/y pairs: {e}") from e
    return _cga_signed_area(linear_ring)


def ring_orientation(ring: Sequence) -> Orientation:
    """Classify a ring by the sign of its signed area."""
    area = signed_area(ring)
    if area > 0:
        return Orientation.COUNTER_CLOCKWISE
    if area < 0:
        return Orientation.CLOCKWISE
    return Orientation.DEGENERATE


def wind_ring(ring: List, clockwise: bool) -> bool:
    """Reverse ``ring`` in place if it does not wind the requested way.

    Degenerate rings are left alone. Reversing a closed ring keeps it
    closed, since the first and last positions are equal.

    Returns:
        bool: True if the ring was reversed
    """
    _check_ring(ring)
    orientation = ring_orientation(ring)
    if orientation is Orientation.DEGENERATE:
        return False

    wanted = Orientation.CLOCKWISE if clockwise else Orientation.COUNTER_CLOCKWISE
    if orientation is wanted:
        return False

    ring.reverse()
    logger.debug(f"Reversed {len(ring)}-position ring to {wanted.value}")
    return True


def wind_polygon(rings: List[List], convention) -> int:
    """Wind the rings of a single Polygon to ``convention``.

    Args:
        rings: Polygon coordinates; ring 0 is the exterior, the rest are holes
        convention: Convention, or the boolean ``reverse`` flag

    Returns:
        int: Number of rings reversed
    """
    convention = Convention.from_reverse(convention)
    if not isinstance(rings, list):
        raise WindingInvariantError(
            f"Expected Polygon coordinates as a list of rings, got {type(rings).__name__}"
        )
    if not rings:
        return 0

    exterior, interiors = rings[0], rings[1:]
    reversed_count = int(wind_ring(exterior, convention.exterior_clockwise))
    for interior in interiors:
        reversed_count += wind_ring(interior, convention.interior_clockwise)
    return reversed_count


def is_wound(rings: Sequence[Sequence], convention) -> bool:
    """Check, without modifying anything, that a Polygon already follows ``convention``."""
    convention = Convention.from_reverse(convention)
    for index, ring in enumerate(rings):
        orientation = ring_orientation(ring)
        if orientation is Orientation.DEGENERATE:
            continue
        clockwise = convention.exterior_clockwise if index == 0 else convention.interior_clockwise
        if (orientation is Orientation.CLOCKWISE) != clockwise:
            return False
    return True
