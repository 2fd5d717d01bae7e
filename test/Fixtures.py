from pathlib import Path
from typing import Dict, Tuple

import numpy as np
from cleo.io.inputs.string_input import StringInput
from cleo.io.outputs.buffered_output import BufferedOutput
from cleo.io.outputs.output import Verbosity

from tile_puzzle.io.TilePuzzleIO import TilePuzzleIO
from tile_puzzle.puzzle.Config import Config
from tile_puzzle.puzzle.Image import Image
from tile_puzzle.puzzle.Side import Side
from tile_puzzle.puzzle.Tile import Tile


# ----------------------------------------------------------------------------------------------------------------------
def create_io(verbosity: Verbosity = Verbosity.NORMAL) -> TilePuzzleIO:
    """
    Returns an Output decorator writing into buffers.

    :param verbosity: The verbosity.
    """
    io = TilePuzzleIO(StringInput(''), BufferedOutput(), BufferedOutput())
    io.set_verbosity(verbosity)

    return io


# ----------------------------------------------------------------------------------------------------------------------
def create_config(**kwargs) -> Config:
    """
    Returns a configuration for a small puzzle.
    """
    settings = {'tiles_path':       Path('.'),
                'grid_size':        2,
                'first_col_width':  4,
                'first_row_height': 3,
                'image_width':      8,
                'image_height':     6,
                'workers':          1}
    settings.update(kwargs)

    return Config(**settings)


# ----------------------------------------------------------------------------------------------------------------------
def create_tile(id: int,
                left: int,
                right: int,
                top: int,
                bottom: int,
                width: int = 2,
                height: int = 2) -> Tile:
    """
    Returns a tile with given fingerprints and a black image.
    """
    image = Image(np.zeros((height, width, 3), np.uint8))
    fingerprints = {Side.LEFT: left, Side.RIGHT: right, Side.TOP: top, Side.BOTTOM: bottom}

    return Tile(id, image, fingerprints)


# ----------------------------------------------------------------------------------------------------------------------
def create_noise_image(width: int, height: int, seed: int = 42) -> Image:
    """
    Returns a color image with random pixels.
    """
    rng = np.random.default_rng(seed)

    return Image(rng.integers(0, 256, (height, width, 3), dtype=np.uint8))


# ----------------------------------------------------------------------------------------------------------------------
def cut_image(image: Image,
              grid_size: int,
              first_col_width: int,
              first_row_height: int) -> Dict[Tuple[int, int], Image]:
    """
    Cuts an image into a grid of tiles. Adjacent tiles share one column or row of pixels. Returns a map from (column,
    row) to tile images.
    """
    tiles = {}
    for row in range(grid_size):
        y = first_row_height * row - (1 if row > 0 else 0)
        height = first_row_height + (1 if row > 0 else 0)
        for column in range(grid_size):
            x = first_col_width * column - (1 if column > 0 else 0)
            width = first_col_width + (1 if column > 0 else 0)
            tiles[(column, row)] = Image(image.sub_image(x, y, width, height).data.copy())

    return tiles

# ----------------------------------------------------------------------------------------------------------------------
