from typing import List

from cleo.formatters.style import Style
from cleo.io.inputs.input import Input
from cleo.io.io import IO
from cleo.io.outputs.output import Output, Verbosity


class TilePuzzleIO(IO):
    """
    Output decorator with helper methods for titles, logging and error messages.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def __init__(self, input: Input, output: Output, error_output: Output):
        """
        Object constructor.

        :param input: The input object.
        :param output: The output object.
        :param error_output: The error output object.
        """
        IO.__init__(self, input, output, error_output)

        for formatter in (output.formatter, error_output.formatter):
            formatter.set_style('fso', Style('green', None, ['bold']))
            formatter.set_style('title', Style('yellow', None, ['bold']))
            formatter.set_style('error_block', Style('white', 'red'))

    # ------------------------------------------------------------------------------------------------------------------
    def title(self, message: str) -> None:
        """
        Writes a title.

        :param message: The title.
        """
        self.write_line([f'<title>{message}</title>', f'<title>{"=" * len(message)}</title>', ''])

    # ------------------------------------------------------------------------------------------------------------------
    def text(self, message: str) -> None:
        """
        Writes a line of text.

        :param message: The text.
        """
        self.write_line(message)

    # ------------------------------------------------------------------------------------------------------------------
    def log_notice(self, message: str) -> None:
        """
        Logs a message at normal verbosity.

        :param message: The message.
        """
        self.write_line(message, Verbosity.NORMAL)

    # ------------------------------------------------------------------------------------------------------------------
    def log_verbose(self, message: str) -> None:
        """
        Logs a message when verbose output is enabled.

        :param message: The message.
        """
        self.write_line(message, Verbosity.VERBOSE)

    # ------------------------------------------------------------------------------------------------------------------
    def log_very_verbose(self, message: str) -> None:
        """
        Logs a message when very verbose output is enabled.

        :param message: The message.
        """
        self.write_line(message, Verbosity.VERY_VERBOSE)

    # ------------------------------------------------------------------------------------------------------------------
    def error(self, messages: List[str]) -> None:
        """
        Writes an error block to the error output.

        :param messages: The lines of the error message.
        """
        width = max(len(message) for message in messages) + 4

        lines = ['', f'<error_block>{" " * width}</error_block>']
        for message in messages:
            lines.append(f'<error_block>  {message.ljust(width - 2)}</error_block>')
        lines.append(f'<error_block>{" " * width}</error_block>')
        lines.append('')

        self.write_error_line(lines)

# ----------------------------------------------------------------------------------------------------------------------
