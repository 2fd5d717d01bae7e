from pathlib import Path
from typing import Dict, Tuple

from tile_puzzle.puzzle.Image import Image
from tile_puzzle.puzzle.Side import Side

UNPLACED = -1
"""
Sentinel for the column and row of a tile without a position on the grid.
"""


class Tile:
    """
    A tile of the puzzle with unknown original position.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def __init__(self, id: int, image: Image, fingerprints: Dict[Side, int], path: Path | None = None):
        """
        Object constructor.

        :param id: The identity of the tile, i.e. its index in the load order.
        :param image: The image of the tile.
        :param fingerprints: The fingerprints of the four borders of the tile.
        :param path: The path to the image file of the tile.
        """
        self._id: int = id
        """
        The identity of the tile.
        """

        self._image: Image = image
        """
        The image of the tile.
        """

        self._fingerprints: Dict[Side, int] = dict(fingerprints)
        """
        The fingerprints of the four borders of the tile.
        """

        self._path: Path | None = path
        """
        The path to the image file of the tile.
        """

        self._column: int = UNPLACED
        """
        The column of the tile in the grid.
        """

        self._row: int = UNPLACED
        """
        The row of the tile in the grid.
        """

        self.first_column: bool = False
        """
        Whether the size of the tile reveals that the tile belongs to the first column.
        """

        self.first_row: bool = False
        """
        Whether the size of the tile reveals that the tile belongs to the first row.
        """

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def id(self) -> int:
        return self._id

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def image(self) -> Image:
        return self._image

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def path(self) -> Path | None:
        return self._path

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def column(self) -> int:
        return self._column

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def row(self) -> int:
        return self._row

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def is_placed(self) -> bool:
        """
        Returns whether this tile has a position on the grid.
        """
        return self._column != UNPLACED

    # ------------------------------------------------------------------------------------------------------------------
    def fingerprint(self, side: Side) -> int:
        """
        Returns the fingerprint of a border of this tile.

        :param side: The side of the border.
        """
        return self._fingerprints[side]

    # ------------------------------------------------------------------------------------------------------------------
    def place(self, column: int, row: int) -> bool:
        """
        Places this tile on the grid. A tile is placed at most once, placing an already placed tile has no effect.
        Returns whether this tile has been placed.

        :param column: The column.
        :param row: The row.
        """
        if self.is_placed:
            return False

        self._column = column
        self._row = row

        return True

    # ------------------------------------------------------------------------------------------------------------------
    def place_next_to(self, tile, side: Side) -> bool:
        """
        Places this tile at a side of another tile. Returns whether this tile has been placed.

        :param tile: The other, already placed, tile.
        :param side: The side of the other tile.
        """
        offset_column, offset_row = side.offset

        return self.place(tile.column + offset_column, tile.row + offset_row)

    # ------------------------------------------------------------------------------------------------------------------
    def in_grid(self, grid_size: int) -> bool:
        """
        Returns whether this tile has been placed inside the grid.

        :param grid_size: The number of columns and rows of the grid.
        """
        return 0 <= self._column < grid_size and 0 <= self._row < grid_size

    # ------------------------------------------------------------------------------------------------------------------
    def rect(self, first_col_width: int, first_row_height: int) -> Tuple[int, int, int, int]:
        """
        Returns the rectangle (x, y, width, height) covered by this tile in the assembled image. Tiles not in the first
        column or row are shifted by one pixel, since they share their left column and top row with their neighbors.

        :param first_col_width: The width of the tiles in the first column.
        :param first_row_height: The height of the tiles in the first row.
        """
        x = first_col_width * self._column - (1 if self._column > 0 else 0)
        y = first_row_height * self._row - (1 if self._row > 0 else 0)

        return x, y, self._image.width, self._image.height

    # ------------------------------------------------------------------------------------------------------------------
    def sort_key(self) -> Tuple[int, int]:
        """
        Returns the key for ordering tiles: the tile at (0, 0) first, then tiles with column or row 0, then all other
        tiles. Ties are ordered by the sum of column and row. Size hints count as a known column or row.
        """
        column = self._column
        row = self._row
        if not self.is_placed:
            column = 0 if self.first_column else UNPLACED
            row = 0 if self.first_row else UNPLACED

        if column == 0 and row == 0:
            tier = 0
        elif column == 0 or row == 0:
            tier = 1
        else:
            tier = 2

        return tier, column + row

    # ------------------------------------------------------------------------------------------------------------------
    def __repr__(self) -> str:
        return f'Tile(id={self._id}, column={self._column}, row={self._row})'

# ----------------------------------------------------------------------------------------------------------------------
