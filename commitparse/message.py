#!/usr/bin/env python3

"""String-in, string-out helpers for git hook scripts."""

import logging
from typing import Optional, Tuple

from .commit_message import CommitMessage
from .config import get_parser_settings
from .trailer import Trailer

__all__ = [
    "parse_message",
    "append_trailers_to_message",
]

log = logging.getLogger(__name__)


def _load(message: str, comment_char: Optional[str]) -> CommitMessage:
    settings = get_parser_settings()
    if comment_char is None:
        comment_char = settings.comment_char
    return CommitMessage(message, comment_char, settings.legal_characters)


def parse_message(
    message: str, comment_char: Optional[str] = None
) -> Tuple[str, str, str]:
    """
    Parse a Git commit message into subject, body, and trailers.

    Comments and anything below the scissors line are left out.  Trailers are
    the trailing run of "Key: Value" lines at the end of the message text.

    Args:
        message: The commit message to parse.
        comment_char: The comment character; read from the configuration if
            not given, and inferred from the message if not configured.

    Returns:
        A tuple containing:
            - subject: The subject of the message (may span several lines)
            - body: The body of the message without surrounding blank lines (may be empty)
            - trailers: The trailer block, one trailer per line (may be empty)
    """
    commit = _load(message, comment_char)
    return (
        str(commit.subject),
        str(commit.bodies).strip("\n"),
        str(commit.trailers),
    )


def append_trailers_to_message(
    message: str,
    trailers: dict[str, str],
    comment_char: Optional[str] = None,
) -> str:
    """Append trailers to Git commit message

    Comments and the scissors section stay where they are.

    Args:
        message: The original Git commit message
        trailers: Dictionary of trailer keys to values, appended in order
        comment_char: The comment character; read from the configuration if
            not given, and inferred from the message if not configured.

    Returns:
        The updated commit message with trailers added
    """
    commit = _load(message, comment_char)
    for key, value in trailers.items():
        commit = commit.add_trailer(Trailer(key, value))

    log.debug("Appended %d trailers to commit message", len(trailers))
    return str(commit)
