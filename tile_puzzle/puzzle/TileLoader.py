from pathlib import Path
from typing import List

from tile_puzzle.helper.Parallel import parallel_for
from tile_puzzle.io.TilePuzzleIO import TilePuzzleIO
from tile_puzzle.puzzle.Config import Config
from tile_puzzle.puzzle.Fingerprint import Fingerprint
from tile_puzzle.puzzle.Image import Image
from tile_puzzle.puzzle.PuzzleError import PuzzleError
from tile_puzzle.puzzle.Tile import Tile


class TileLoader:
    """
    Class for loading the tiles of a puzzle from a folder.
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
    def list_paths(self) -> List[Path]:
        """
        Returns the paths to the tile images, sorted by name.
        """
        if not self._config.tiles_path.is_dir():
            raise PuzzleError(f"Folder '{self._config.tiles_path}' does not exist.")

        paths = sorted(path for path in self._config.tiles_path.iterdir() if path.is_file())
        if not paths:
            raise PuzzleError(f"Folder '{self._config.tiles_path}' does not contain any tiles.")

        return paths

    # ------------------------------------------------------------------------------------------------------------------
    def load(self) -> List[Tile]:
        """
        Reads all tiles and computes the fingerprints of their borders. The identity of each tile is its index in the
        returned list.
        """
        paths = self.list_paths()
        self._io.log_notice(f'Loading {len(paths)} tiles from <fso>{self._config.tiles_path}</fso>.')

        tiles: List[Tile | None] = [None] * len(paths)

        def load_tile(index: int) -> None:
            image = Image.read(paths[index])
            tiles[index] = Tile(index, image, Fingerprint.of_image(image), paths[index])

        parallel_for(load_tile, len(paths), self._config.workers)

        for tile in tiles:
            self._io.log_very_verbose(f'Tile {tile.id}: <fso>{tile.path}</fso> {tile.image.width}x{tile.image.height}.')

        return tiles

# ----------------------------------------------------------------------------------------------------------------------
