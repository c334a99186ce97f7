#!/usr/bin/env python3

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple

from .fragment import Body, Fragment
from .trailer import Trailer, TrailerError

__all__ = ["Trailers"]


@dataclass(frozen=True)
class Trailers:
    """The trailer block at the end of a message."""

    trailers: Tuple[Trailer, ...] = ()

    @classmethod
    def from_fragments(cls, fragments: Iterable[Fragment]) -> "Trailers":
        """Collect the trailers from per-line fragments.

        The body lines are scanned from the bottom up.  Blank lines are
        skipped and the scan stops at the first line that is not a trailer,
        so a "Key: Value" looking line higher up in the body is not picked
        up.  Comment lines are ignored entirely.

        Args:
            fragments: Ungrouped fragments, one per line

        Returns:
            The trailers in document order
        """
        found: List[Trailer] = []
        for fragment in reversed(list(fragments)):
            if not isinstance(fragment, Body) or fragment.is_empty():
                continue
            try:
                found.append(Trailer.parse(fragment))
            except TrailerError:
                break

        found.reverse()
        return cls(tuple(found))

    def __iter__(self) -> Iterator[Trailer]:
        return iter(self.trailers)

    def __len__(self) -> int:
        return len(self.trailers)

    def __str__(self) -> str:
        return "\n".join(str(trailer) for trailer in self.trailers)
