from typing import Dict, List, Tuple

from tile_puzzle.puzzle.Side import Side
from tile_puzzle.puzzle.Tile import Tile


class MatchIndex:
    """
    Inverted index from fingerprints to the tiles exposing the fingerprint at one of their sides. Candidates are kept in
    insertion order, i.e. by tile identity and then by side in order LEFT, RIGHT, TOP, BOTTOM.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def __init__(self, tiles: List[Tile]):
        """
        Object constructor.

        :param tiles: The tiles with their fingerprints.
        """
        self._index: Dict[int, List[Tuple[int, Side]]] = {}
        """
        The map from fingerprints to the tiles and sides exposing the fingerprint.
        """

        for tile in tiles:
            for side in Side:
                self._index.setdefault(tile.fingerprint(side), []).append((tile.id, side))

    # ------------------------------------------------------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._index)

    # ------------------------------------------------------------------------------------------------------------------
    def lookup(self, fingerprint: int) -> List[Tuple[int, Side]]:
        """
        Returns the tiles and sides exposing a fingerprint.

        :param fingerprint: The fingerprint.
        """
        return list(self._index.get(fingerprint, ()))

    # ------------------------------------------------------------------------------------------------------------------
    def candidates(self, fingerprint: int, side: Side) -> List[int]:
        """
        Returns the identities of the tiles exposing a fingerprint at a given side.

        :param fingerprint: The fingerprint.
        :param side: The side.
        """
        return [tile_id for tile_id, tile_side in self._index.get(fingerprint, ()) if tile_side == side]

    # ------------------------------------------------------------------------------------------------------------------
    def ambiguous_fingerprints(self) -> int:
        """
        Returns the number of fingerprints exposed by more than one tile at the same side.
        """
        count = 0
        for entries in self._index.values():
            sides = [side for _, side in entries]
            if len(sides) != len(set(sides)):
                count += 1

        return count

# ----------------------------------------------------------------------------------------------------------------------
