#!/usr/bin/env python3

"""The parsed form of a commit message edit buffer.

A CommitMessage never changes once built.  The with_* and add_* methods return
a new message, made by serializing the edited AST and parsing the result
again, so the subject, bodies, comments and trailers always agree with the
AST.
"""

import logging
import re
from typing import (
    AbstractSet,
    Iterable,
    List,
    Optional,
    Pattern,
    Sequence,
    Tuple,
    Union,
)

from .bodies import Bodies
from .comments import Comments
from .fragment import Body, Fragment
from .lexer import DEFAULT_COMMENT_CHAR, group_fragments, lex_lines
from .scissors import (
    LEGAL_CHARACTERS,
    Scissors,
    guess_comment_character,
    parse_sections,
)
from .subject import Subject
from .trailer import Trailer
from .trailers import Trailers

__all__ = ["CommitMessage"]

log = logging.getLogger(__name__)


def _serialize(fragments: Sequence[Fragment], scissors: Optional[Scissors]) -> str:
    text = "\n".join(str(fragment) for fragment in fragments)
    if scissors is None:
        return text
    if not fragments:
        return str(scissors)
    return f"{text}\n{scissors}"


class CommitMessage:
    """A commit message split into subject, bodies, comments and trailers.

    str() of a message parsed from text gives back exactly that text.

    Args:
        message: The raw commit message
        comment_char: The comment character git was configured with.  When
            omitted it is inferred from the message.
        legal_characters: The characters inference may pick a comment
            character from

    Raises:
        ValueError: If comment_char is not a single character
    """

    def __init__(
        self,
        message: str = "",
        comment_char: Optional[str] = None,
        legal_characters: AbstractSet[str] = LEGAL_CHARACTERS,
    ) -> None:
        if comment_char is not None and len(comment_char) != 1:
            raise ValueError(
                f"Comment character must be a single character, got {comment_char!r}"
            )

        self._legal_characters = frozenset(legal_characters)
        if comment_char is None:
            candidates = self._legal_characters
            resolved = guess_comment_character(message, candidates)
            log.debug("Inferred comment character %r", resolved)
        else:
            candidates = frozenset(comment_char)
            resolved = comment_char

        lines, scissors = parse_sections(message, candidates)
        per_line = lex_lines(lines, resolved or DEFAULT_COMMENT_CHAR)

        self._explicit_comment_char = comment_char
        self._comment_char = resolved
        self._scissors = scissors
        self._ast: Tuple[Fragment, ...] = tuple(group_fragments(per_line))
        self._subject = Subject.from_fragments(self._ast)
        self._bodies = Bodies.from_fragments(self._ast)
        self._comments = Comments.from_fragments(self._ast)
        self._trailers = Trailers.from_fragments(per_line)

    @classmethod
    def from_fragments(
        cls,
        fragments: Iterable[Fragment],
        scissors: Optional[Scissors] = None,
        comment_char: Optional[str] = None,
        legal_characters: AbstractSet[str] = LEGAL_CHARACTERS,
    ) -> "CommitMessage":
        """Build a message from an AST and an optional scissors section.

        The fragments are joined with newlines and parsed again, so adjacent
        fragments of the same kind come back merged.

        Args:
            fragments: The fragments, in document order
            scissors: The scissors section to append
            comment_char: The comment character to parse with
            legal_characters: The characters inference may pick from

        Returns:
            The new commit message
        """
        return cls(
            _serialize(list(fragments), scissors), comment_char, legal_characters
        )

    @property
    def ast(self) -> Tuple[Fragment, ...]:
        return self._ast

    @property
    def subject(self) -> Subject:
        return self._subject

    @property
    def bodies(self) -> Bodies:
        return self._bodies

    @property
    def comments(self) -> Comments:
        return self._comments

    @property
    def trailers(self) -> Trailers:
        return self._trailers

    @property
    def scissors(self) -> Optional[Scissors]:
        return self._scissors

    @property
    def comment_char(self) -> Optional[str]:
        """The explicit or inferred comment character, None if unknown."""
        return self._comment_char

    def _rebuild(self, fragments: Iterable[Fragment]) -> "CommitMessage":
        return CommitMessage.from_fragments(
            fragments,
            self._scissors,
            self._explicit_comment_char,
            self._legal_characters,
        )

    def insert_after_last_full_body(
        self, fragments: Iterable[Fragment]
    ) -> "CommitMessage":
        """Insert fragments after the last non-empty Body.

        With no non-empty Body the fragments go to the very front.

        Args:
            fragments: The fragments to insert

        Returns:
            The new commit message
        """
        ast: List[Fragment] = list(self._ast)
        position = 0
        for index in range(len(ast) - 1, -1, -1):
            fragment = ast[index]
            if isinstance(fragment, Body) and not fragment.is_empty():
                position = index + 1
                break

        ast[position:position] = list(fragments)
        return self._rebuild(ast)

    def add_trailer(self, trailer: Trailer) -> "CommitMessage":
        """Add a trailer to the end of the message text.

        An existing trailer block gets the new trailer as its last line.
        Otherwise a new block is started after a blank line; a message with no
        text at all also gets an empty subject line in front of it.

        Args:
            trailer: The trailer to add

        Returns:
            The new commit message
        """
        fragments: List[Fragment] = []
        if not self._trailers:
            has_text = any(
                isinstance(fragment, Body) and not fragment.is_empty()
                for fragment in self._ast
            )
            if not has_text:
                fragments.append(Body())
            fragments.append(Body())
        fragments.append(trailer.to_body())

        log.debug("Adding trailer %r", str(trailer))
        return self.insert_after_last_full_body(fragments)

    def with_subject(self, subject: Union[str, Subject, Body]) -> "CommitMessage":
        """Replace the subject, leaving everything else untouched.

        Args:
            subject: The new subject

        Returns:
            The new commit message
        """
        ast: List[Fragment] = list(self._ast)
        replacement = Body(str(subject))
        for index, fragment in enumerate(ast):
            if isinstance(fragment, Body):
                ast[index] = replacement
                break
        else:
            ast.insert(0, replacement)

        return self._rebuild(ast)

    def with_body_contents(self, contents: str) -> "CommitMessage":
        """Replace everything after the subject with new text.

        The subject, including a subject that runs over several lines, and any
        comments before it are kept.  A single blank line separates it from
        the new contents.  The scissors section is kept.  A message without
        any text keeps its comments and gets an empty subject line.

        Args:
            contents: The new body text

        Returns:
            The new commit message
        """
        head: List[Fragment] = list(self._ast) or [Body()]
        for index, fragment in enumerate(self._ast):
            if isinstance(fragment, Body):
                head = list(self._ast[: index + 1])
                break

        text = f"{_serialize(head, None)}\n\n{contents}"
        if self._scissors is not None:
            text = f"{text}\n{self._scissors}"
        return CommitMessage(
            text, self._explicit_comment_char, self._legal_characters
        )

    def matches_pattern(self, pattern: Union[str, Pattern[str]]) -> bool:
        """Search the subject and body paragraphs for a regular expression.

        The trailers, the comments and the scissors section are not searched.

        Args:
            pattern: A regular expression, compiled or not

        Returns:
            True if the pattern matches anywhere in the text
        """
        text = f"{self._subject}\n{self._bodies}"
        return re.search(pattern, text) is not None

    def _key(self) -> Tuple[Tuple[Fragment, ...], Optional[Scissors], Optional[str]]:
        return (self._ast, self._scissors, self._comment_char)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CommitMessage):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return _serialize(self._ast, self._scissors)

    def __repr__(self) -> str:
        return f"CommitMessage({str(self)!r}, comment_char={self._comment_char!r})"
