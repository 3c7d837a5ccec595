class SyndicationError(Exception):
    """Base class for errors raised while building a feed document."""


class InvalidXMLCharacterError(SyndicationError, ValueError):
    """Raised when feed text contains a character XML 1.0 cannot carry."""

    def __init__(self, element: str, char: str) -> None:
        super().__init__(f"Invalid XML character {char!r} (U+{ord(char):04X}) in <{element}>")
        self.element = element
        self.char = char
