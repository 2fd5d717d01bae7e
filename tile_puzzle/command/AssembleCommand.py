from pathlib import Path

from cleo.commands.command import Command
from cleo.helpers import argument, option

from tile_puzzle.io.TilePuzzleIO import TilePuzzleIO
from tile_puzzle.puzzle.Config import Config
from tile_puzzle.puzzle.Puzzle import Puzzle


class AssembleCommand(Command):
    """
    The assemble command.
    """
    name = 'assemble'
    description = 'Assembles an image from a folder of shuffled grid tiles'
    options = [option(long_name='output',
                      short_name='o',
                      description='The assembled output file (jpg, png, or pdf).',
                      default='result.jpg',
                      flag=False),
               option(long_name='quality',
                      description='The quality of the assembled image when saved as jpeg or pdf.',
                      default=80,
                      flag=False),
               option(long_name='dpi',
                      description='The resolution of the assembled image in DPI when saved as pdf.',
                      default=96,
                      flag=False),
               option(long_name='grid-size',
                      description='The number of columns and rows of the puzzle.',
                      default=16,
                      flag=False),
               option(long_name='first-col-width',
                      description='The width of the tiles in the first column.',
                      default=240,
                      flag=False),
               option(long_name='first-row-height',
                      description='The height of the tiles in the first row.',
                      default=135,
                      flag=False),
               option(long_name='image-width',
                      description='The width of the assembled image.',
                      default=3840,
                      flag=False),
               option(long_name='image-height',
                      description='The height of the assembled image.',
                      default=2160,
                      flag=False),
               option(long_name='workers',
                      description='The number of workers for loading and stitching tiles (0 for the number of CPUs).',
                      default=0,
                      flag=False)]
    arguments = [argument(name='tiles', description='The folder with the tiles.', optional=False)]

    # ------------------------------------------------------------------------------------------------------------------
    def handle(self) -> int:
        """
        Executes the assemble command.
        """
        io = TilePuzzleIO(self._io.input, self._io.output, self._io.error_output)
        config = self._create_config()

        puzzle = Puzzle(io, config)
        puzzle.assemble()

        io.text('')

        return 0

    # ------------------------------------------------------------------------------------------------------------------
    def _create_config(self) -> Config:
        """
        Creates a Config object from the given option and arguments.
        """
        return Config(tiles_path=Path(self.argument('tiles')),
                      output_path=Path(self.option('output')),
                      quality=int(self.option('quality')),
                      dpi=int(self.option('dpi')),
                      grid_size=int(self.option('grid-size')),
                      first_col_width=int(self.option('first-col-width')),
                      first_row_height=int(self.option('first-row-height')),
                      image_width=int(self.option('image-width')),
                      image_height=int(self.option('image-height')),
                      workers=int(self.option('workers')))

# ----------------------------------------------------------------------------------------------------------------------
