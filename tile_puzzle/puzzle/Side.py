from enum import Enum, STRICT
from typing import Tuple


class Side(Enum, boundary=STRICT):
    """
    Enumeration for the four sides of a tile.
    """
    # ------------------------------------------------------------------------------------------------------------------
    LEFT = 0
    """
    Left side.
    """

    RIGHT = 1
    """
    Right side.
    """

    TOP = 2
    """
    Top side.
    """

    BOTTOM = 3
    """
    Bottom side.
    """

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def opposite(self):
        """
        Returns the side of a neighbor that touches this side.
        """
        return _OPPOSITES[self]

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def offset(self) -> Tuple[int, int]:
        """
        Returns the grid offset (column, row) of the neighbor at this side.
        """
        return _OFFSETS[self]


# ----------------------------------------------------------------------------------------------------------------------
_OPPOSITES = {Side.LEFT:   Side.RIGHT,
              Side.RIGHT:  Side.LEFT,
              Side.TOP:    Side.BOTTOM,
              Side.BOTTOM: Side.TOP}

_OFFSETS = {Side.LEFT:   (-1, 0),
            Side.RIGHT:  (1, 0),
            Side.TOP:    (0, -1),
            Side.BOTTOM: (0, 1)}

# ----------------------------------------------------------------------------------------------------------------------
