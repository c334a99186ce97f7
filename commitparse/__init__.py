#!/usr/bin/env python3

from .bodies import Bodies
from .comments import Comments
from .commit_message import CommitMessage
from .config import ParserSettings, get_parser_settings
from .fragment import Body, Comment, Fragment
from .message import append_trailers_to_message, parse_message
from .scissors import LEGAL_CHARACTERS, SCISSORS_MARKER, Scissors
from .subject import Subject
from .trailer import Trailer, TrailerError
from .trailers import Trailers

__all__ = [
    "Bodies",
    "Body",
    "Comment",
    "Comments",
    "CommitMessage",
    "Fragment",
    "LEGAL_CHARACTERS",
    "ParserSettings",
    "SCISSORS_MARKER",
    "Scissors",
    "Subject",
    "Trailer",
    "TrailerError",
    "Trailers",
    "append_trailers_to_message",
    "get_parser_settings",
    "parse_message",
]
