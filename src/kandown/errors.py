"""Exception types raised by kandown."""


class KandownError(ValueError):
    """Base class for every error kandown raises on bad input."""


class ParseError(KandownError):
    """The text does not match the board grammar.

    lineno is 1-based and None when the error has no single source line.
    """

    def __init__(self, message: str, lineno: int | None = None, line: str | None = None) -> None:
        self.lineno = lineno
        self.line = line
        if lineno is not None:
            message = f"line {lineno}: {message}"
        super().__init__(message)


class InvalidPropertyType(ParseError):
    """A property declares a type that is not one of the known names."""


class LinkError(KandownError):
    """A card or view references a property that is not declared."""


class ValidationError(KandownError):
    """A mutation was rejected; the board is left unchanged."""


class ViewError(KandownError):
    """A view cannot answer a grouping query."""


class NotFoundError(KandownError, LookupError):
    """No card or view matches the given key."""
