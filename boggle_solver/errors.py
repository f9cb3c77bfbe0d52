class BoggleError(Exception):
    """Base class for errors raised by the solver."""


class MissingArgumentError(BoggleError, TypeError):
    """A required argument was None."""


class InvalidBoardSizeError(BoggleError, ValueError):
    """Board width or height is not positive."""


class InsufficientLettersError(BoggleError, IndexError):
    """Fewer letters were supplied than the board has cells."""
