import unittest

from Fixtures import create_tile
from tile_puzzle.puzzle.MatchIndex import MatchIndex
from tile_puzzle.puzzle.Side import Side


class MatchIndexTest(unittest.TestCase):
    """
    Unit test for the index of fingerprints.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def test_lookup(self):
        """
        Lookup of a fingerprint returns all tiles and sides exposing the fingerprint in insertion order.
        """
        tiles = [create_tile(0, 1, 2, 3, 4),
                 create_tile(1, 2, 5, 6, 7),
                 create_tile(2, 8, 9, 2, 10)]
        index = MatchIndex(tiles)

        self.assertEqual([(0, Side.RIGHT), (1, Side.LEFT), (2, Side.TOP)], index.lookup(2))
        self.assertEqual([(2, Side.BOTTOM)], index.lookup(10))
        self.assertEqual([], index.lookup(11))
        self.assertEqual(10, len(index))

    # ------------------------------------------------------------------------------------------------------------------
    def test_candidates(self):
        """
        Candidates are restricted to the tiles exposing a fingerprint at the given side.
        """
        tiles = [create_tile(0, 1, 2, 3, 4),
                 create_tile(1, 2, 5, 6, 7),
                 create_tile(2, 2, 9, 2, 10)]
        index = MatchIndex(tiles)

        self.assertEqual([1, 2], index.candidates(2, Side.LEFT))
        self.assertEqual([0], index.candidates(2, Side.RIGHT))
        self.assertEqual([2], index.candidates(2, Side.TOP))
        self.assertEqual([], index.candidates(2, Side.BOTTOM))
        self.assertEqual([], index.candidates(11, Side.LEFT))

    # ------------------------------------------------------------------------------------------------------------------
    def test_ambiguous_fingerprints(self):
        """
        Only fingerprints exposed by several tiles at the same side are ambiguous.
        """
        tiles = [create_tile(0, 1, 1, 3, 4),
                 create_tile(1, 5, 6, 3, 7),
                 create_tile(2, 8, 9, 3, 10)]
        index = MatchIndex(tiles)

        self.assertEqual(1, index.ambiguous_fingerprints())

# ----------------------------------------------------------------------------------------------------------------------
if __name__ == '__main__':
    unittest.main()
