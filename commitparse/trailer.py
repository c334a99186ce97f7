#!/usr/bin/env python3

"""Key/value trailers such as ``Co-authored-by: Name <email>``."""

from dataclasses import dataclass
from typing import Tuple, Union

from .fragment import Body

__all__ = [
    "TRAILER_SEPARATOR",
    "Trailer",
    "TrailerError",
]

TRAILER_SEPARATOR = ": "


class TrailerError(ValueError):
    """A line that does not have the ``Key: Value`` shape.

    Attributes:
        text: The offending text
        span: (start, end) offsets of the problem within the text.  When the
            text has a colon that is not followed by a space the span covers
            that colon, otherwise it covers the whole text.
    """

    def __init__(self, text: str) -> None:
        self.text: str = text
        colon = text.find(":")
        if colon == -1:
            self.span: Tuple[int, int] = (0, len(text))
            message = f"no colon in body line, {text!r} is not a trailer"
        else:
            self.span = (colon, colon + 1)
            message = f"colon at offset {colon} in {text!r} is not followed by a space"
        super().__init__(message)


@dataclass(frozen=True, eq=False)
class Trailer:
    """A trailer from the end of a commit message.

    Trailing whitespace on the value is ignored when comparing and hashing, so
    a trailer read from the last line of a file equals one built by hand.
    """

    key: str
    value: str

    @classmethod
    def parse(cls, text: Union[str, Body]) -> "Trailer":
        """Parse a single line as a trailer.

        The text is split once on ": ".  Whitespace around the key and after
        the separator is kept as is, so str() gives back the original line.

        Args:
            text: The line to parse

        Returns:
            The parsed trailer

        Raises:
            TrailerError: If the text does not contain ": "
        """
        line = str(text)
        key, separator, value = line.partition(TRAILER_SEPARATOR)
        if not separator:
            raise TrailerError(line)
        return cls(key, value)

    def to_body(self) -> Body:
        return Body(str(self))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Trailer):
            return NotImplemented
        return self.key == other.key and self.value.rstrip() == other.value.rstrip()

    def __hash__(self) -> int:
        return hash((self.key, self.value.rstrip()))

    def __str__(self) -> str:
        return f"{self.key}{TRAILER_SEPARATOR}{self.value}"
