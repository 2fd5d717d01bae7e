from typing import Dict

import numpy as np

from tile_puzzle.puzzle.Image import Image
from tile_puzzle.puzzle.Side import Side


class Fingerprint:
    """
    Class for computing fingerprints of the borders of tiles. Two tiles are neighbors when the fingerprint of the right
    (or bottom) border of one tile equals the fingerprint of the left (or top) border of the other tile.
    """
    MAGIC_NUMBER: int = 0x9e379967
    """
    The constant mixed into the hash for each pixel.
    """

    QUANTIZATION: int = 10
    """
    The intensity step below which differences between pixels are ignored.
    """

    MASK: int = 0xffffffffffffffff
    """
    The hash is an unsigned 64-bit integer.
    """

    # ------------------------------------------------------------------------------------------------------------------
    @staticmethod
    def of_border(border: np.ndarray) -> int:
        """
        Returns the fingerprint of a border, i.e. a single row or column of grayscale pixels.

        :param border: The intensities of the pixels along the border.
        """
        fingerprint = 0
        for intensity in border.ravel().tolist():
            fingerprint ^= (intensity // Fingerprint.QUANTIZATION +
                            Fingerprint.MAGIC_NUMBER +
                            (fingerprint << 6) +
                            (fingerprint >> 2)) & Fingerprint.MASK

        return fingerprint

    # ------------------------------------------------------------------------------------------------------------------
    @staticmethod
    def of_image(image: Image) -> Dict[Side, int]:
        """
        Returns the fingerprints of the four borders of a color image.

        :param image: The color image.
        """
        grayscale = image.grayscale()

        return {side: Fingerprint.of_border(grayscale.border(side)) for side in Side}

# ----------------------------------------------------------------------------------------------------------------------
