from dataclasses import dataclass
from pathlib import Path
from typing import Tuple


@dataclass(frozen=True)
class Config:
    """
    The configuration of TilePuzzle.
    """
    tiles_path: Path
    """
    The path to the folder with the tile images.
    """

    output_path: Path = Path('result.jpg')
    """
    The path to the assembled output file.
    """

    quality: int = 80
    """
    The quality of the assembled image when saved as jpeg or pdf.
    """

    dpi: int = 96
    """
    The resolution in DPI (Dots Per Inch) of the assembled image when saved as pdf.
    """

    grid_size: int = 16
    """
    The number of columns and rows of the puzzle grid.
    """

    first_col_width: int = 240
    """
    The width of the tiles in the first column.
    """

    first_row_height: int = 135
    """
    The height of the tiles in the first row.
    """

    image_width: int = 3840
    """
    The width of the assembled image.
    """

    image_height: int = 2160
    """
    The height of the assembled image.
    """

    background: Tuple[int, int, int] = (0, 0, 0)
    """
    The BGR color of the canvas where no tile has been placed.
    """

    workers: int = 0
    """
    The number of workers for loading and stitching tiles. 0 for the number of CPUs.
    """

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def expected_tile_count(self) -> int:
        """
        Returns the number of tiles of a complete puzzle.
        """
        return self.grid_size * self.grid_size

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def interior_width(self) -> int:
        """
        Returns the width of tiles not in the first column. These tiles share their left pixel column with their left
        neighbor.
        """
        return self.first_col_width + 1

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def interior_height(self) -> int:
        """
        Returns the height of tiles not in the first row. These tiles share their top pixel row with their top
        neighbor.
        """
        return self.first_row_height + 1

# ----------------------------------------------------------------------------------------------------------------------
