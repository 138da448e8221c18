"""
The REPL loop: read a line, dispatch it, report the cursor, repeat.
"""

import logging
from typing import Callable, Optional

from rich.console import Console

from file_manager.entities.cursor import WorkingDirectoryCursor
from file_manager.exceptions import BaseAppError, InvalidInputError, OperationFailedError
from file_manager.shell.command_table import CommandTable
from file_manager.utils.text import display_text

EXIT_SENTINEL = ".exit"
INVALID_INPUT = "Invalid input"
OPERATION_FAILED = "Operation failed"


class Dispatcher:
    """
    Interactive loop over a CommandTable.

    One line is fully handled, including any stream it starts, before the next
    line is read. No command failure ends the loop; only ``.exit``, end of
    input, or an interrupt do.
    """

    def __init__(
        self,
        table: CommandTable,
        cursor: WorkingDirectoryCursor,
        console: Console,
        username: str = "Guest",
        read_line: Optional[Callable[[], str]] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the dispatcher.

        Args:
            table: Commands available to the user
            cursor: The working directory cursor handed to every handler
            console: Where all output goes
            username: Display name used in the banners
            read_line: Returns the next input line, raising EOFError at the end (default: input)
            logger: Logger instance to use for logging
        """
        self._table = table
        self._cursor = cursor
        self._console = console
        self._username = username
        self._read_line = read_line or input
        self._logger = logger or logging.getLogger(__name__)

    @property
    def cursor(self) -> WorkingDirectoryCursor:
        return self._cursor

    def _say(self, text: str = "") -> None:
        self._console.print(display_text(text), markup=False, highlight=False, soft_wrap=True)

    def greet(self) -> None:
        self._say(f"Welcome to the File Manager, {self._username}!")
        self.print_cursor()
        self._say(f'Please enter commands and press Enter. Type "{EXIT_SENTINEL}" to quit.')

    def farewell(self) -> None:
        self._say(f"Thank you for using File Manager, {self._username}, goodbye!")

    def print_cursor(self) -> None:
        self._say(f"You are currently in {self._cursor.path}")

    def handle_line(self, line: str) -> bool:
        """
        Handle one input line.

        Returns:
            False if the line asked to exit, True otherwise
        """
        stripped = line.strip()
        if stripped == EXIT_SENTINEL:
            return False
        if not stripped:
            return True

        name, *args = stripped.split()
        try:
            self._table.dispatch(self._cursor, name, args)
        except InvalidInputError as e:
            self._logger.info(f"Invalid input {stripped!r}: {e}")
            self._say(INVALID_INPUT)
        except OperationFailedError as e:
            self._logger.info(f"Command {name} failed: {e}")
            self._say(OPERATION_FAILED)
        except BaseAppError as e:
            self._logger.error(f"Command {name} failed: {e}")
            self._say(OPERATION_FAILED)
        except Exception as e:
            # Unexpected handler errors are reported like unknown commands
            self._logger.exception(f"Unexpected error in command {name}: {e}")
            self._say(INVALID_INPUT)
        self.print_cursor()
        return True

    def run(self) -> int:
        """
        Greet, loop until exit, say goodbye.

        Returns:
            Process exit status
        """
        self.greet()
        try:
            while True:
                try:
                    line = self._read_line()
                except EOFError:
                    break
                if not self.handle_line(line):
                    break
        except KeyboardInterrupt:
            self._say()
        self.farewell()
        return 0
