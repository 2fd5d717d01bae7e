import unittest

import numpy as np

from Fixtures import create_config, create_io, create_noise_image, cut_image
from tile_puzzle.puzzle.Fingerprint import Fingerprint
from tile_puzzle.puzzle.Stitcher import Stitcher
from tile_puzzle.puzzle.Tile import Tile


class StitcherTest(unittest.TestCase):
    """
    Unit test for stitching placed tiles.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def test_stitch_2x2(self):
        """
        Four tiles placed at their position cover the whole image without gaps or overlap.
        """
        for workers in (1, 4):
            config = create_config(first_col_width=10, first_row_height=6, image_width=20, image_height=12,
                                   workers=workers)
            original = create_noise_image(20, 12)
            tiles = []
            for (column, row), image in cut_image(original, 2, 10, 6).items():
                tile = Tile(len(tiles), image, Fingerprint.of_image(image))
                tile.place(column, row)
                tiles.append(tile)

            stitched = Stitcher(create_io(), config, tiles).stitch()

            self.assertEqual((20, 12), stitched.size())
            self.assertTrue(np.array_equal(original.data, stitched.data))

    # ------------------------------------------------------------------------------------------------------------------
    def test_skip_tiles(self):
        """
        Unplaced tiles and tiles outside the grid are not stitched.
        """
        config = create_config(first_col_width=10, first_row_height=6, image_width=20, image_height=12,
                               background=(1, 2, 3))
        original = create_noise_image(20, 12)
        images = cut_image(original, 2, 10, 6)

        corner = Tile(0, images[(0, 0)], Fingerprint.of_image(images[(0, 0)]))
        corner.place(0, 0)
        unplaced = Tile(1, images[(1, 0)], Fingerprint.of_image(images[(1, 0)]))
        outside = Tile(2, images[(1, 1)], Fingerprint.of_image(images[(1, 1)]))
        outside.place(2, 1)

        stitched = Stitcher(create_io(), config, [corner, unplaced, outside]).stitch()

        self.assertTrue(np.array_equal(original.data[0:6, 0:10], stitched.data[0:6, 0:10]))
        self.assertTrue(np.all(stitched.data[0:6, 10:20] == (1, 2, 3)))
        self.assertTrue(np.all(stitched.data[6:12, :] == (1, 2, 3)))

    # ------------------------------------------------------------------------------------------------------------------
    def test_seam(self):
        """
        A tile in the second column starts one pixel left of the width of the first column.
        """
        config = create_config(grid_size=3, first_col_width=10, first_row_height=6, image_width=30, image_height=18)
        original = create_noise_image(30, 18)
        images = cut_image(original, 3, 10, 6)

        tile = Tile(0, images[(2, 1)], Fingerprint.of_image(images[(2, 1)]))
        tile.place(2, 1)

        stitched = Stitcher(create_io(), config, [tile]).stitch()

        self.assertEqual((19, 5, 11, 7), tile.rect(10, 6))
        self.assertTrue(np.array_equal(original.data[5:12, 19:30], stitched.data[5:12, 19:30]))
        self.assertTrue(np.all(stitched.data[:, 0:19] == 0))

# ----------------------------------------------------------------------------------------------------------------------
if __name__ == '__main__':
    unittest.main()
