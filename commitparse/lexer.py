#!/usr/bin/env python3

"""Turn the message part of a commit into fragments.

Lexing classifies every line as a Body or a Comment.  Grouping then folds
neighbouring fragments of the same kind into paragraphs, following the rules in
_MERGE_RULES.
"""

from typing import Callable, Dict, Iterable, List, Tuple

from .fragment import Body, Comment, Fragment

__all__ = [
    "DEFAULT_COMMENT_CHAR",
    "is_comment",
    "split_lines",
    "lex_lines",
    "group_fragments",
]

# Used when no comment character was supplied or could be inferred
DEFAULT_COMMENT_CHAR = "#"


def is_comment(comment_char: str, line: str) -> bool:
    """Check whether a line is a comment.

    Args:
        comment_char: The active comment character
        line: A single line of the message

    Returns:
        True if the first character of the line is the comment character
    """
    return bool(line) and line[0] == comment_char


def split_lines(text: str) -> List[str]:
    """Split text on newlines, keeping a trailing empty line.

    An empty string has no lines at all, which keeps "" and "\\n" distinct.
    """
    if not text:
        return []
    return text.split("\n")


def lex_lines(lines: Iterable[str], comment_char: str) -> List[Fragment]:
    """Convert each line into a single-line Body or Comment fragment.

    Args:
        lines: The lines of the message part
        comment_char: The active comment character

    Returns:
        One fragment per line, in order
    """
    return [
        Comment(line) if is_comment(comment_char, line) else Body(line)
        for line in lines
    ]


def _merge_comments(previous: Comment, new: Comment) -> bool:
    return True


def _merge_bodies(previous: Body, new: Body) -> bool:
    # Blank lines stay on their own so paragraph breaks remain in the AST
    return not (previous.is_empty() or new.is_empty())


def _keep_apart(previous: Fragment, new: Fragment) -> bool:
    return False


_MERGE_RULES: Dict[Tuple[type, type], Callable[..., bool]] = {
    (Comment, Comment): _merge_comments,
    (Body, Body): _merge_bodies,
    (Body, Comment): _keep_apart,
    (Comment, Body): _keep_apart,
}


def _join_run(run: List[Fragment]) -> Fragment:
    if len(run) == 1:
        return run[0]
    return type(run[0])("\n".join(fragment.text for fragment in run))


def group_fragments(fragments: Iterable[Fragment]) -> List[Fragment]:
    """Fold per-line fragments into paragraph-level fragments.

    Each run of lines that belong together is collected first and joined
    once, so grouping stays linear in the size of the message.

    Args:
        fragments: Ungrouped fragments, usually the output of lex_lines

    Returns:
        The grouped fragments, which is the AST of the message
    """
    runs: List[List[Fragment]] = []
    for fragment in fragments:
        if runs:
            previous = runs[-1][-1]
            if _MERGE_RULES[(type(previous), type(fragment))](previous, fragment):
                runs[-1].append(fragment)
                continue
        runs.append([fragment])

    return [_join_run(run) for run in runs]
