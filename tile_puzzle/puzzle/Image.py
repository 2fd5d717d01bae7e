from pathlib import Path
from typing import Any, Tuple

import cv2
import numpy as np

from tile_puzzle.puzzle.PuzzleError import PuzzleError
from tile_puzzle.puzzle.Side import Side


class Image:
    """
    Class for images.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def __init__(self, data: np.ndarray):
        """
        Object constructor.

        :param data: The image.
        """
        self._data: np.ndarray = data

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def data(self) -> np.ndarray:
        return self._data

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def width(self) -> int:
        """
        Returns the width of this image.
        """
        _, width = self._data.shape[:2]

        return width

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def height(self) -> int:
        """
        Returns the height of this image.
        """
        height, _ = self._data.shape[:2]

        return height

    # ------------------------------------------------------------------------------------------------------------------
    @staticmethod
    def read(path: Path):
        """
        Reads a color image from the given path.

        :param path: The path.
        """
        data = cv2.imread(str(path), cv2.IMREAD_COLOR)
        if data is None:
            raise PuzzleError(f"Unable to open image '{path}'.")

        return Image(data)

    # ------------------------------------------------------------------------------------------------------------------
    @staticmethod
    def empty_color_image(width: int, height: int, color: Tuple[int, int, int]):
        """
        Returns a color image filled with a single color.

        :param width: The width of the image.
        :param height: The height of the image.
        :param color: The BGR color.
        """
        return Image(np.full((height, width, 3), color, np.uint8))

    # ------------------------------------------------------------------------------------------------------------------
    def write(self, path: Path, params: Any = None) -> None:
        """
        Writes the image to the given path.

        :param path: The path.
        :param params: The encoder parameters.
        """
        try:
            if params is None:
                success = cv2.imwrite(str(path), self._data)
            else:
                success = cv2.imwrite(str(path), self._data, params)
        except cv2.error as error:
            raise PuzzleError(f"Unable to write image '{path}': {error}.") from error

        if not success:
            raise PuzzleError(f"Unable to write image '{path}'.")

    # ------------------------------------------------------------------------------------------------------------------
    def encode(self, extension: str, params: Any) -> bytes:
        """
        Returns this image encoded in the format of a file extension.

        :param extension: The file extension, e.g. '.jpg'.
        :param params: The encoder parameters.
        """
        success, buffer = cv2.imencode(extension, self._data, params)
        if not success:
            raise PuzzleError(f"Unable to encode image as '{extension}'.")

        return buffer.tobytes()

    # ------------------------------------------------------------------------------------------------------------------
    def grayscale(self):
        """
        Returns a grayscale copy of this image.
        """
        return Image(cv2.cvtColor(self._data, cv2.COLOR_BGR2GRAY))

    # ------------------------------------------------------------------------------------------------------------------
    def size(self) -> Tuple[int, int]:
        """
        Returns the size (width and height) of this image.
        """
        height, width = self._data.shape[:2]

        return width, height

    # ------------------------------------------------------------------------------------------------------------------
    def sub_image(self, x: int, y: int, width: int, height: int):
        """
        Returns a part of this image.

        :param x: The left x-coordinate of the part.
        :param y: The top y-coordinate of the part.
        :param width: The width of the part.
        :param height: The height of the part.
        """
        return Image(self._data[y:y + height, x:x + width])

    # ------------------------------------------------------------------------------------------------------------------
    def border(self, side: Side) -> np.ndarray:
        """
        Returns the single row or column of pixels along a side of this image. Columns run from top to bottom, rows
        from left to right.

        :param side: The side.
        """
        if side == Side.LEFT:
            return self._data[:, 0]

        if side == Side.RIGHT:
            return self._data[:, -1]

        if side == Side.TOP:
            return self._data[0, :]

        return self._data[-1, :]

    # ------------------------------------------------------------------------------------------------------------------
    @staticmethod
    def paste(destination: np.ndarray, source: np.ndarray, offset_x: int, offset_y: int) -> np.ndarray:
        """
        Copies one image into another image. Parts of the source image falling outside the destination image are
        clipped.

        :param destination: The destination image.
        :param source: The source image to be copied.
        :param offset_x: The offset along the x-axis where the source image must be copied into the destination image.
        :param offset_y: The offset along the y-axis where the source image must be copied into the destination image.
        """
        height1, width1 = destination.shape[:2]
        height2, width2 = source.shape[:2]

        x1_min = max(0, offset_x)
        x1_max = min(width1, width2 + offset_x)
        y1_min = max(0, offset_y)
        y1_max = min(height1, height2 + offset_y)

        if x1_min >= x1_max or y1_min >= y1_max:
            return destination

        x2_min = max(0, -offset_x)
        x2_max = x2_min + x1_max - x1_min
        y2_min = max(0, -offset_y)
        y2_max = y2_min + y1_max - y1_min

        destination[y1_min:y1_max, x1_min:x1_max] = source[y2_min:y2_max, x2_min:x2_max]

        return destination

# ----------------------------------------------------------------------------------------------------------------------
