class CodingError(Exception):
    """Base class for encoding errors.
    """


class InvalidValue(CodingError, ValueError):
    """Raised when asked to encode something that isn't a non-negative int
    that fits in the native width.
    """


class InvalidLength(CodingError, ValueError):
    """Raised when a digit count is negative or not an int.
    """


class InvalidRange(CodingError, ValueError):
    """Raised when an interval can't be drawn from.
    """


class LengthOverflow(CodingError, OverflowError):
    """Raised when an id length needs more than the native width.
    """
