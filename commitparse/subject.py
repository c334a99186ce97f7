#!/usr/bin/env python3

from dataclasses import dataclass
from typing import Iterable

from .fragment import Body, Fragment

__all__ = ["Subject"]


@dataclass(frozen=True)
class Subject:
    """The subject of a commit, the first paragraph of non-comment text.

    A subject written without a blank line after it spans several lines.
    len() counts characters.
    """

    text: str = ""

    @classmethod
    def from_fragments(cls, ast: Iterable[Fragment]) -> "Subject":
        """Take the first Body of the AST, skipping any leading comments."""
        for fragment in ast:
            if isinstance(fragment, Body):
                return cls(fragment.text)
        return cls()

    def is_empty(self) -> bool:
        return not self.text

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text
