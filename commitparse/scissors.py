#!/usr/bin/env python3

"""Split off the scissors section of a verbose commit.

`git commit --verbose` (and `commit.cleanup=scissors`) writes a cut line into
the edit buffer; git throws away that line and everything below it.  The line
looks like this, with the active comment character in front:

    # ------------------------ >8 ------------------------

Only a line made of exactly a candidate comment character, one space and the
marker counts.  When a message quotes the marker more than once the last
valid line wins.
"""

import logging
from dataclasses import dataclass
from typing import AbstractSet, List, Optional, Tuple

from .lexer import split_lines

__all__ = [
    "SCISSORS_MARKER",
    "LEGAL_CHARACTERS",
    "Scissors",
    "scissors_comment_char",
    "parse_sections",
    "guess_comment_character",
]

log = logging.getLogger(__name__)

SCISSORS_MARKER = "------------------------ >8 ------------------------"

# Characters git users commonly configure as core.commentChar
LEGAL_CHARACTERS: AbstractSet[str] = frozenset("#;@!$%^&|:")


@dataclass(frozen=True)
class Scissors:
    """Everything from the cut line to the end of the message, verbatim."""

    text: str

    def __str__(self) -> str:
        return self.text


def scissors_comment_char(
    line: str, candidates: AbstractSet[str] = LEGAL_CHARACTERS
) -> Optional[str]:
    """Return the comment character of a scissors line.

    Args:
        line: A single line of the message
        candidates: Characters allowed in front of the marker

    Returns:
        The comment character, or None if the line is not a valid cut line
    """
    if not line.endswith(SCISSORS_MARKER):
        return None

    comment_char = line[:1]
    if comment_char not in candidates:
        return None

    if line[1:] != f" {SCISSORS_MARKER}":
        return None

    return comment_char


def _last_scissors_line(
    lines: List[str], candidates: AbstractSet[str]
) -> Optional[Tuple[int, str]]:
    last = None
    for index, line in enumerate(lines):
        comment_char = scissors_comment_char(line, candidates)
        if comment_char is not None:
            last = (index, comment_char)
    return last


def parse_sections(
    message: str, candidates: AbstractSet[str] = LEGAL_CHARACTERS
) -> Tuple[List[str], Optional[Scissors]]:
    """Split a message into its message part and its scissors section.

    The message part is returned as lines rather than text so that a cut line
    at the very top (no lines before it) can be told apart from a cut line
    after one blank line.

    Args:
        message: The raw commit message
        candidates: Characters allowed in front of the marker

    Returns:
        A tuple containing:
            - The lines before the last valid cut line (all lines if none)
            - The scissors section, or None
    """
    lines = split_lines(message)
    found = _last_scissors_line(lines, candidates)
    if found is None:
        return lines, None

    index, comment_char = found
    log.debug(
        "Found scissors line %d using comment character %r", index, comment_char
    )
    return lines[:index], Scissors("\n".join(lines[index:]))


def guess_comment_character(
    message: str, candidates: AbstractSet[str] = LEGAL_CHARACTERS
) -> Optional[str]:
    """Work out which comment character a message was written with.

    The cut line is the most reliable hint.  Failing that, the first character
    of the last line that starts with a candidate is used, since git appends
    its help text at the bottom of the buffer.

    Args:
        message: The raw commit message
        candidates: Characters that may be comment characters

    Returns:
        The comment character, or None if nothing looks like a comment
    """
    lines = split_lines(message)
    found = _last_scissors_line(lines, candidates)
    if found is not None:
        return found[1]

    guess = None
    for line in lines:
        if line[:1] in candidates:
            guess = line[:1]

    return guess
