#!/usr/bin/env python3

"""The two kinds of text a commit message is made of."""

from dataclasses import dataclass
from typing import Union

__all__ = [
    "Body",
    "Comment",
    "Fragment",
]


@dataclass(frozen=True)
class Body:
    """A single contiguous block of commit message text.

    An empty body represents a blank line, which is how paragraph breaks stay
    visible in the AST.
    """

    text: str = ""

    def append(self, additional: "Body") -> "Body":
        """Join another body onto this one, separated by a newline.

        Args:
            additional: The body to append

        Returns:
            A new body containing both texts
        """
        return Body(f"{self.text}\n{additional.text}")

    def is_empty(self) -> bool:
        return not self.text

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Comment:
    """A contiguous block of lines starting with the comment character."""

    text: str

    def append(self, additional: "Comment") -> "Comment":
        return Comment(f"{self.text}\n{additional.text}")

    def __str__(self) -> str:
        return self.text


Fragment = Union[Body, Comment]
