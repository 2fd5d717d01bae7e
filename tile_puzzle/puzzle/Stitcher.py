from typing import List

from tile_puzzle.helper.Parallel import parallel_for
from tile_puzzle.io.TilePuzzleIO import TilePuzzleIO
from tile_puzzle.puzzle.Config import Config
from tile_puzzle.puzzle.Image import Image
from tile_puzzle.puzzle.Tile import Tile


class Stitcher:
    """
    Class for copying placed tiles into the assembled image.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def __init__(self, io: TilePuzzleIO, config: Config, tiles: List[Tile]):
        """
        Object constructor.

        :param io: The Output decorator.
        :param config: The configuration.
        :param tiles: The tiles.
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

    # ------------------------------------------------------------------------------------------------------------------
    def stitch(self) -> Image:
        """
        Returns the assembled image. Tiles not placed or placed outside the grid are skipped.
        """
        canvas = Image.empty_color_image(self._config.image_width, self._config.image_height, self._config.background)
        tiles = [tile for tile in self._tiles if tile.is_placed and tile.in_grid(self._config.grid_size)]

        def copy_tile(index: int) -> None:
            x, y, _, _ = tiles[index].rect(self._config.first_col_width, self._config.first_row_height)
            Image.paste(canvas.data, tiles[index].image.data, x, y)

        parallel_for(copy_tile, len(tiles), self._config.workers)

        self._io.log_notice(f'Stitched {len(tiles)} of {len(self._tiles)} tiles.')

        return canvas

# ----------------------------------------------------------------------------------------------------------------------
