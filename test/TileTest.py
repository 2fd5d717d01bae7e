import unittest

from Fixtures import create_tile
from tile_puzzle.puzzle.Side import Side
from tile_puzzle.puzzle.Tile import UNPLACED


class TileTest(unittest.TestCase):
    """
    Unit test for tiles.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def test_place_once(self):
        """
        A tile is placed at most once.
        """
        tile = create_tile(0, 1, 2, 3, 4)
        self.assertFalse(tile.is_placed)
        self.assertEqual((UNPLACED, UNPLACED), (tile.column, tile.row))

        self.assertTrue(tile.place(2, 3))
        self.assertFalse(tile.place(5, 7))
        self.assertTrue(tile.is_placed)
        self.assertEqual((2, 3), (tile.column, tile.row))

    # ------------------------------------------------------------------------------------------------------------------
    def test_place_next_to(self):
        """
        A tile placed next to another tile gets the adjacent position.
        """
        tile = create_tile(0, 1, 2, 3, 4)
        tile.place(2, 3)

        right = create_tile(1, 1, 2, 3, 4)
        right.place_next_to(tile, Side.RIGHT)
        bottom = create_tile(2, 1, 2, 3, 4)
        bottom.place_next_to(tile, Side.BOTTOM)

        self.assertEqual((3, 3), (right.column, right.row))
        self.assertEqual((2, 4), (bottom.column, bottom.row))

    # ------------------------------------------------------------------------------------------------------------------
    def test_in_grid(self):
        """
        Only placed tiles inside the grid are in the grid.
        """
        tile = create_tile(0, 1, 2, 3, 4)
        self.assertFalse(tile.in_grid(16))

        tile.place(15, 0)
        self.assertTrue(tile.in_grid(16))
        self.assertFalse(tile.in_grid(15))

    # ------------------------------------------------------------------------------------------------------------------
    def test_rect(self):
        """
        Tiles not in the first column or row are shifted by one pixel.
        """
        tile = create_tile(0, 1, 2, 3, 4, width=241, height=136)
        tile.place(2, 1)
        self.assertEqual((479, 134, 241, 136), tile.rect(240, 135))

        tile = create_tile(1, 1, 2, 3, 4, width=240, height=135)
        tile.place(0, 0)
        self.assertEqual((0, 0, 240, 135), tile.rect(240, 135))

        tile = create_tile(2, 1, 2, 3, 4, width=240, height=136)
        tile.place(0, 15)
        self.assertEqual((0, 2024, 240, 136), tile.rect(240, 135))

    # ------------------------------------------------------------------------------------------------------------------
    def test_sort_key(self):
        """
        The top left tile sorts first, then tiles in the first column or row, then all other tiles.
        """
        corner = create_tile(0, 1, 2, 3, 4)
        corner.place(0, 0)
        first_column = create_tile(1, 1, 2, 3, 4)
        first_column.first_column = True
        first_row = create_tile(2, 1, 2, 3, 4)
        first_row.place(3, 0)
        inner = create_tile(3, 1, 2, 3, 4)
        inner.place(1, 1)
        far = create_tile(4, 1, 2, 3, 4)
        far.place(5, 2)

        tiles = sorted([far, first_row, inner, corner, first_column], key=lambda tile: tile.sort_key())

        self.assertEqual([0, 1, 2, 3, 4], [tile.id for tile in tiles])

# ----------------------------------------------------------------------------------------------------------------------
if __name__ == '__main__':
    unittest.main()
