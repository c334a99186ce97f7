#!/usr/bin/env python3

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

from .fragment import Body, Fragment
from .trailer import Trailer, TrailerError

__all__ = ["Bodies"]

log = logging.getLogger(__name__)


def _is_trailer_or_blank(body: Body) -> bool:
    if body.is_empty():
        return True
    try:
        Trailer.parse(body)
    except TrailerError:
        return False
    return True


@dataclass(frozen=True)
class Bodies:
    """The paragraphs between the subject and the trailers.

    Empty bodies (the blank lines between paragraphs) are kept, so the first
    element is usually the blank line separating the subject from the body.
    """

    bodies: Tuple[Body, ...] = ()

    @classmethod
    def from_fragments(cls, ast: Iterable[Fragment]) -> "Bodies":
        """Derive the bodies from a grouped AST.

        The subject is always dropped.  So is the trailing run of fragments
        that are blank or parse as a trailer; that check looks at whole
        fragments, so a paragraph merged from several lines counts as a
        trailer when the paragraph as a whole parses as one.

        Args:
            ast: The grouped fragments of a message

        Returns:
            The body paragraphs in document order
        """
        raw: List[Body] = [fragment for fragment in ast if isinstance(fragment, Body)]

        trailer_count = 0
        for body in reversed(raw[1:]):
            if not _is_trailer_or_blank(body):
                break
            trailer_count += 1

        keep = max(len(raw) - trailer_count - 1, 0)
        log.debug(
            "Keeping %d of %d body fragments (%d in trailer block)",
            keep,
            len(raw),
            trailer_count,
        )
        return cls(tuple(raw[1 : 1 + keep]))

    def first(self) -> Optional[Body]:
        return self.bodies[0] if self.bodies else None

    def __iter__(self) -> Iterator[Body]:
        return iter(self.bodies)

    def __len__(self) -> int:
        return len(self.bodies)

    def __str__(self) -> str:
        # Empty bodies already stand for the blank lines between paragraphs
        return "\n".join(str(body) for body in self.bodies)
