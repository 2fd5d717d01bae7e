from typing import List

from tile_puzzle.io.TilePuzzleIO import TilePuzzleIO
from tile_puzzle.puzzle.Config import Config
from tile_puzzle.puzzle.MatchIndex import MatchIndex
from tile_puzzle.puzzle.Side import Side
from tile_puzzle.puzzle.Tile import Tile


class Assembler:
    """
    Class for assembling a puzzle. Starting at the placed tiles, the right and bottom neighbors of each tile are found
    by their fingerprints and placed next to the tile, depth first, until no more tiles can be placed.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def __init__(self, io: TilePuzzleIO, config: Config, tiles: List[Tile], index: MatchIndex):
        """
        Object constructor.

        :param io: The Output decorator.
        :param config: The configuration.
        :param tiles: The tiles. The identity of each tile must equal its index in this list.
        :param index: The index of the fingerprints of the tiles.
        """
        self._io: TilePuzzleIO = io
        """
        The Output decorator.
        """

        self._config: Config = config
        """
        The configuration.
        """

        self._tiles: List[Tile] = tiles
        """
        The tiles.
        """

        self._index: MatchIndex = index
        """
        The index of the fingerprints of the tiles.
        """

    # ------------------------------------------------------------------------------------------------------------------
    def assemble(self) -> List[int]:
        """
        Places all tiles reachable from the already placed tiles. Returns the identities of the tiles in the order their
        neighbors have been explored.
        """
        seeds = sorted((tile for tile in self._tiles if tile.is_placed), key=lambda tile: (tile.sort_key(), tile.id))
        stack = [tile.id for tile in reversed(seeds) if tile.in_grid(self._config.grid_size)]

        explored = []
        while stack:
            tile = self._tiles[stack.pop()]
            explored.append(tile.id)

            for side in (Side.RIGHT, Side.BOTTOM):
                neighbor = self._find_neighbor(tile, side)
                if neighbor is None:
                    continue

                neighbor.place_next_to(tile, side)
                self._io.log_very_verbose(f'Placed tile {neighbor.id} at ({neighbor.column}, {neighbor.row}).')

                if neighbor.in_grid(self._config.grid_size):
                    stack.append(neighbor.id)
                else:
                    self._io.log_verbose(f'Tile {neighbor.id} placed at ({neighbor.column}, {neighbor.row}) is '
                                         'outside the grid.')

        return explored

    # ------------------------------------------------------------------------------------------------------------------
    def _find_neighbor(self, tile: Tile, side: Side) -> Tile | None:
        """
        Returns the first unplaced tile of which the border at the opposite side matches the border of a tile at a
        side. Returns None when no such tile exists.

        :param tile: The tile.
        :param side: The side of the tile.
        """
        for candidate_id in self._index.candidates(tile.fingerprint(side), side.opposite):
            candidate = self._tiles[candidate_id]
            if candidate.id != tile.id and not candidate.is_placed:
                return candidate

        return None

# ----------------------------------------------------------------------------------------------------------------------
