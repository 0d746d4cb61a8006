"""Error types."""


class InvalidInputError(ValueError):
    """Raised when a size parameter is not a positive integer."""

    def __init__(self, n):
        self.n = n
        super().__init__(self.message)

    @property
    def message(self) -> str:
        return "Error: n must be a positive integer"


class SizeParseError(ValueError):
    """Raised when the text read from stdin is not an integer."""

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(self.message)

    @property
    def message(self) -> str:
        return "Invalid input. Please enter a positive integer."


def require_positive(n) -> int:
    """Return n if it is a positive integer, otherwise raise InvalidInputError."""
    if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
        raise InvalidInputError(n)
    return n
