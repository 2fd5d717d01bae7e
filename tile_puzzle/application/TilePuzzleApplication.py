from cleo.application import Application
from cleo.io.io import IO
from cleo.io.outputs.output import Verbosity

from tile_puzzle.command.AssembleCommand import AssembleCommand
from tile_puzzle.io.TilePuzzleIO import TilePuzzleIO


class TilePuzzleApplication(Application):
    """
    The TilePuzzle application.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def __init__(self):
        """
        Object constructor
        """
        Application.__init__(self, 'tile-puzzle', '0.0.0')

        self.add(AssembleCommand())

    # ------------------------------------------------------------------------------------------------------------------
    def render_error(self, error: Exception, io: IO) -> None:
        if io.output.verbosity == Verbosity.NORMAL:
            my_io = TilePuzzleIO(io.input, io.output, io.error_output)
            lines = [error.__class__.__name__, str(error)]
            my_io.error(lines)
        else:
            Application.render_error(self, error, io)

# ----------------------------------------------------------------------------------------------------------------------
