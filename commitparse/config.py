"""Parser settings read from the user's commitparse rc file.

The file is TOML and is looked up in one of these locations:
1. $COMMITPARSE_CONFIG_DIR/commitparserc if $COMMITPARSE_CONFIG_DIR is defined
2. $XDG_CONFIG_HOME/commitparse/commitparserc if $XDG_CONFIG_HOME is defined
3. $HOME/.commitparserc

Only the [parser] table is read:

    [parser]
    comment_char = ";"          # core.commentChar, if fixed
    legal_characters = "#;"     # characters inference may pick from

Settings that are missing or invalid fall back to the defaults, which infer
the comment character from each message.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, FrozenSet, Iterator, Optional

import tomli

from .scissors import LEGAL_CHARACTERS

__all__ = [
    "ParserSettings",
    "get_config_path",
    "load_parser_table",
    "get_parser_settings",
]

log = logging.getLogger(__name__)

CONFIG_FILE_NAME = "commitparserc"


@dataclass(frozen=True)
class ParserSettings:
    """How hook helpers should parse a message.

    Attributes:
        comment_char: The fixed comment character, or None to infer it
        legal_characters: The characters inference may pick from
    """

    comment_char: Optional[str] = None
    legal_characters: FrozenSet[str] = frozenset(LEGAL_CHARACTERS)


def _candidate_paths() -> Iterator[Path]:
    if "COMMITPARSE_CONFIG_DIR" in os.environ:
        yield Path(os.environ["COMMITPARSE_CONFIG_DIR"]) / CONFIG_FILE_NAME
    if "XDG_CONFIG_HOME" in os.environ:
        yield Path(os.environ["XDG_CONFIG_HOME"]) / "commitparse" / CONFIG_FILE_NAME


def get_config_path() -> Path:
    """Return the path of the rc file to read.

    Returns:
        The first existing candidate, or $HOME/.commitparserc
    """
    for path in _candidate_paths():
        if path.exists():
            return path
    return Path.home() / f".{CONFIG_FILE_NAME}"


def load_parser_table() -> dict[str, Any]:
    """Read the [parser] table of the rc file.

    An unreadable or malformed file is logged and treated as empty.

    Returns:
        The raw [parser] table, empty if there is none
    """
    config_path = get_config_path()
    if not config_path.exists():
        return {}

    try:
        with open(config_path, "rb") as f:
            user_config = tomli.load(f)
    except (OSError, tomli.TOMLDecodeError) as e:
        log.error("Error loading config from %s: %s", config_path, e)
        return {}

    table = user_config.get("parser", {})
    if not isinstance(table, dict):
        log.warning("Ignoring [parser] in %s: not a table", config_path)
        return {}
    return table


def _comment_char(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str) and len(value) == 1:
        return value
    log.warning("Ignoring invalid parser.comment_char setting: %r", value)
    return None


def _legal_characters(value: Any) -> FrozenSet[str]:
    if value is None:
        return LEGAL_CHARACTERS
    if isinstance(value, str) and value:
        return frozenset(value)
    log.warning("Ignoring invalid parser.legal_characters setting: %r", value)
    return LEGAL_CHARACTERS


def get_parser_settings() -> ParserSettings:
    """Get the parser settings from the rc file.

    Returns:
        The validated settings, with defaults for anything unset or invalid
    """
    table = load_parser_table()
    for key in table.keys() - {"comment_char", "legal_characters"}:
        log.warning("Ignoring unknown parser setting: %s", key)

    return ParserSettings(
        comment_char=_comment_char(table.get("comment_char")),
        legal_characters=_legal_characters(table.get("legal_characters")),
    )
