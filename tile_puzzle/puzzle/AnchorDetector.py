from typing import List

from tile_puzzle.io.TilePuzzleIO import TilePuzzleIO
from tile_puzzle.puzzle.Config import Config
from tile_puzzle.puzzle.PuzzleError import PuzzleError
from tile_puzzle.puzzle.Tile import Tile


class AnchorDetector:
    """
    Class for detecting tiles of which the size reveals their position: tiles in the first column are narrower and tiles
    in the first row are lower than all other tiles.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def __init__(self, io: TilePuzzleIO, config: Config):
        """
        Object constructor.

        :param io: The Output decorator.
        :param config: The configuration.
        """
        self._io: TilePuzzleIO = io
        """
        The Output decorator.
        """

        self._config: Config = config
        """
        The configuration.
        """

    # ------------------------------------------------------------------------------------------------------------------
    def validate(self, tiles: List[Tile]) -> None:
        """
        Validates the number of tiles and the size of each tile.

        :param tiles: The tiles.
        """
        if len(tiles) != self._config.expected_tile_count:
            raise PuzzleError(f'Found {len(tiles)} tiles, expected {self._config.expected_tile_count} tiles for a '
                              f'{self._config.grid_size}x{self._config.grid_size} grid.')

        widths = (self._config.first_col_width, self._config.interior_width)
        heights = (self._config.first_row_height, self._config.interior_height)
        for tile in tiles:
            if tile.image.width not in widths or tile.image.height not in heights:
                raise PuzzleError(f'Tile <fso>{tile.path}</fso> has size {tile.image.width}x{tile.image.height}, '
                                  f'expected a width of {widths[0]} or {widths[1]} and a height of {heights[0]} or '
                                  f'{heights[1]}.')

    # ------------------------------------------------------------------------------------------------------------------
    def detect(self, tiles: List[Tile]) -> List[Tile]:
        """
        Flags tiles in the first column and first row and places the tile in both at (0, 0). Returns the placed tiles.

        :param tiles: The tiles.
        """
        anchors = []
        for tile in tiles:
            tile.first_column = tile.image.width == self._config.first_col_width
            tile.first_row = tile.image.height == self._config.first_row_height
            if tile.first_column and tile.first_row:
                tile.place(0, 0)
                anchors.append(tile)
                self._io.log_verbose(f'Tile <fso>{tile.path}</fso> is the top left tile.')

        self._io.log_verbose(f'Found {sum(tile.first_column for tile in tiles)} tiles in the first column and '
                             f'{sum(tile.first_row for tile in tiles)} tiles in the first row.')

        return anchors

# ----------------------------------------------------------------------------------------------------------------------
