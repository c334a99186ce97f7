#!/usr/bin/env python3

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

from .fragment import Comment, Fragment

__all__ = ["Comments"]


@dataclass(frozen=True)
class Comments:
    """The comment blocks of a message, in document order."""

    comments: Tuple[Comment, ...] = ()

    @classmethod
    def from_fragments(cls, ast: Iterable[Fragment]) -> "Comments":
        return cls(tuple(fragment for fragment in ast if isinstance(fragment, Comment)))

    def __iter__(self) -> Iterator[Comment]:
        return iter(self.comments)

    def __len__(self) -> int:
        return len(self.comments)

    def __str__(self) -> str:
        return "\n\n".join(str(comment) for comment in self.comments)
