import re
from typing import Dict, List

import cv2
import img2pdf
from cleo.ui.table import Table
from PIL import Image as PilImage

from tile_puzzle.helper.Timer import Timer
from tile_puzzle.io.TilePuzzleIO import TilePuzzleIO
from tile_puzzle.puzzle.AnchorDetector import AnchorDetector
from tile_puzzle.puzzle.Assembler import Assembler
from tile_puzzle.puzzle.Config import Config
from tile_puzzle.puzzle.Image import Image
from tile_puzzle.puzzle.MatchIndex import MatchIndex
from tile_puzzle.puzzle.PuzzleError import PuzzleError
from tile_puzzle.puzzle.Stitcher import Stitcher
from tile_puzzle.puzzle.Tile import Tile
from tile_puzzle.puzzle.TileLoader import TileLoader


class Puzzle:
    """
    Class for assembling a puzzle from a folder of tiles.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def __init__(self, io: TilePuzzleIO, config: Config):
        """
        Object constructor.

        :param io:The Output decorator.
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

        self._tiles: List[Tile] = []
        """
        The tiles of the puzzle.
        """

        self._image: Image | None = None
        """
        The assembled image.
        """

        self._timings: Dict[str, float] = {}
        """
        The duration in milliseconds of each phase.
        """

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def tiles(self) -> List[Tile]:
        return self._tiles

    # ------------------------------------------------------------------------------------------------------------------
    def assemble(self) -> None:
        """
        Assembles the puzzle and saves the assembled image.
        """
        total_timer = Timer()

        self._load_tiles()
        self._assemble_tiles()
        self._stitch_tiles()
        self._debug_mark_tiles()
        self._save_image()
        self._log_placements()

        self._timings['Total'] = total_timer.elapsed_ms()
        self._log_timings()

    # ------------------------------------------------------------------------------------------------------------------
    def _load_tiles(self) -> None:
        """
        Loads the tiles, computes their fingerprints, and detects the top left tile.
        """
        self._io.text('')
        self._io.title('Loading Tiles')

        timer = Timer()

        loader = TileLoader(self._io, self._config)
        self._tiles = loader.load()

        detector = AnchorDetector(self._io, self._config)
        detector.validate(self._tiles)
        anchors = detector.detect(self._tiles)
        if not anchors:
            raise PuzzleError(f'Unable to find the top left tile, no tile has size '
                              f'{self._config.first_col_width}x{self._config.first_row_height}.')

        self._timings['Load puzzle'] = timer.elapsed_ms()

    # ------------------------------------------------------------------------------------------------------------------
    def _assemble_tiles(self) -> None:
        """
        Places the tiles on the grid.
        """
        self._io.text('')
        self._io.title('Assembling Tiles')

        timer = Timer()

        index = MatchIndex(self._tiles)
        ambiguous = index.ambiguous_fingerprints()
        if ambiguous:
            self._io.log_verbose(f'Found {ambiguous} fingerprints shared by more than one tile.')

        assembler = Assembler(self._io, self._config, self._tiles, index)
        assembler.assemble()

        placed = sum(tile.is_placed for tile in self._tiles)
        self._io.log_notice(f'Placed {placed} of {len(self._tiles)} tiles.')

        self._timings['Assemble puzzle'] = timer.elapsed_ms()

    # ------------------------------------------------------------------------------------------------------------------
    def _stitch_tiles(self) -> None:
        """
        Copies the placed tiles into the assembled image.
        """
        self._io.text('')
        self._io.title('Stitching Tiles')

        timer = Timer()

        stitcher = Stitcher(self._io, self._config, self._tiles)
        self._image = stitcher.stitch()

        self._timings['Image creation'] = timer.elapsed_ms()

    # ------------------------------------------------------------------------------------------------------------------
    def _save_image(self) -> None:
        """
        Saves the assembled image.
        """
        self._io.text('')
        self._io.title('Saving Image')

        timer = Timer()
        path = self._config.output_path

        if str(path).lower().endswith('.png'):
            self._image.write(path, [cv2.IMWRITE_PNG_COMPRESSION, 9])

        elif re.match(r'.*\.je?pg$', str(path), re.IGNORECASE):
            self._image.write(path, [cv2.IMWRITE_JPEG_QUALITY, self._config.quality])

        elif str(path).lower().endswith('.pdf'):
            PilImage.MAX_IMAGE_PIXELS = self._image.width * self._image.height

            data = self._image.encode('.jpg', [cv2.IMWRITE_JPEG_QUALITY, self._config.quality])
            dpi = self._config.dpi
            try:
                with open(path, 'wb') as handle:
                    handle.write(img2pdf.convert(data, layout_fun=img2pdf.get_fixed_dpi_layout_fun((dpi, dpi))))
            except OSError as error:
                raise PuzzleError(f"Unable to write image '{path}': {error}.") from error
        else:
            raise PuzzleError(f"Unable to save assembled image as '{path}'.")

        self._io.text(f'Saved assembled image as <fso>{path}</fso>.')

        self._timings['Image write'] = timer.elapsed_ms()

    # ------------------------------------------------------------------------------------------------------------------
    def _log_placements(self) -> None:
        """
        Logs the position of each tile in a nice table.
        """
        if not self._io.is_verbose():
            return

        table = Table(self._io)

        headers = ['tile', 'file', 'column', 'row']
        rows = []
        for tile in sorted(self._tiles, key=lambda tile: (not tile.is_placed, tile.row, tile.column, tile.id)):
            rows.append([str(tile.id),
                         str(tile.path),
                         str(tile.column) if tile.is_placed else '-',
                         str(tile.row) if tile.is_placed else '-'])

        self._io.text('')
        table.set_headers(headers)
        table.set_rows(rows)
        table.render()

    # ------------------------------------------------------------------------------------------------------------------
    def _log_timings(self) -> None:
        """
        Logs the duration of each phase in nice table.
        """
        table = Table(self._io)

        rows = [[phase, f'{duration:.1f}'] for phase, duration in self._timings.items()]

        self._io.text('')
        table.set_headers(['phase', 'time (ms)'])
        table.set_rows(rows)
        table.render()

    # ------------------------------------------------------------------------------------------------------------------
    def _debug_mark_tiles(self) -> None:
        """
        Adds markers at the borders of the placed tiles in the assembled image.
        """
        if not self._io.is_debug():
            return

        marker_color = (0, 0, 255)
        alpha = 0.5
        data = self._image.data
        overlay = data.copy()

        for tile in self._tiles:
            if tile.is_placed and tile.in_grid(self._config.grid_size):
                x, y, width, height = tile.rect(self._config.first_col_width, self._config.first_row_height)
                cv2.rectangle(overlay, (x, y), (x + width - 1, y + height - 1), marker_color, thickness=1)

        self._image = Image(cv2.addWeighted(overlay, alpha, data, 1.0 - alpha, 0.0))

# ----------------------------------------------------------------------------------------------------------------------
