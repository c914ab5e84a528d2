class ReversiConsoleError(Exception):
    """Base class for errors raised by the console layer."""


class InputStreamError(ReversiConsoleError):
    """Standard input was closed or could not be read.

    Nothing can be asked of the user any more, so this is never handled
    inside the package: it propagates up and ends the process.
    """


class GameOverError(ReversiConsoleError):
    """A move was requested while the turn authority reports the game is over."""
