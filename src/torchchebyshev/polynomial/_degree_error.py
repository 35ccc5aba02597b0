from ._invalid_argument_error import InvalidArgumentError


class DegreeError(InvalidArgumentError):
    """Raised when degree is invalid for operation."""

    pass
