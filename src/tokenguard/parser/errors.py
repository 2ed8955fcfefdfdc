"""Parser error types."""


class ParseError(Exception):
    """Raised when a value or stylesheet cannot be parsed."""

    def __init__(self, message: str, offset: int | None = None):
        self.offset = offset
        super().__init__(message)
