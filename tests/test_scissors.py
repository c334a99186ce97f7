#!/usr/bin/env python3

import unittest

from expecttest import TestCase

from commitparse.scissors import (
    SCISSORS_MARKER,
    Scissors,
    guess_comment_character,
    parse_sections,
    scissors_comment_char,
)

CUT = f"# {SCISSORS_MARKER}"


class TestScissorsLine(TestCase):
    def test_valid_line(self):
        self.assertEqual(scissors_comment_char(CUT), "#")
        self.assertEqual(scissors_comment_char(f"; {SCISSORS_MARKER}"), ";")

    def test_marker_alone_is_not_valid(self):
        self.assertIsNone(scissors_comment_char(SCISSORS_MARKER))

    def test_extra_characters_are_not_valid(self):
        self.assertIsNone(scissors_comment_char(f"#  {SCISSORS_MARKER}"))
        self.assertIsNone(scissors_comment_char(f"## {SCISSORS_MARKER}"))
        self.assertIsNone(scissors_comment_char(f"#{SCISSORS_MARKER}"))

    def test_unknown_character_is_not_valid(self):
        self.assertIsNone(scissors_comment_char(f"£ {SCISSORS_MARKER}"))
        self.assertIsNone(scissors_comment_char(f"? {SCISSORS_MARKER}"))

    def test_explicit_candidates(self):
        self.assertEqual(
            scissors_comment_char(f"? {SCISSORS_MARKER}", frozenset("?")), "?"
        )
        self.assertIsNone(scissors_comment_char(CUT, frozenset("?")))


class TestParseSections(TestCase):
    def test_no_scissors(self):
        lines, scissors = parse_sections("Subject\n\nBody\n")
        self.assertEqual(lines, ["Subject", "", "Body", ""])
        self.assertIsNone(scissors)

    def test_empty_message(self):
        self.assertEqual(parse_sections(""), ([], None))

    def test_scissors_keeps_trailing_newline(self):
        lines, scissors = parse_sections(f"Subject\n{CUT}\ndiff --git a/file b/file\n")
        self.assertEqual(lines, ["Subject"])
        self.assertEqual(scissors, Scissors(f"{CUT}\ndiff --git a/file b/file\n"))

    def test_scissors_on_first_line(self):
        lines, scissors = parse_sections(f"{CUT}\ndiff")
        self.assertEqual(lines, [])
        self.assertEqual(scissors, Scissors(f"{CUT}\ndiff"))

    def test_scissors_after_blank_line(self):
        lines, scissors = parse_sections(f"\n{CUT}\ndiff")
        self.assertEqual(lines, [""])
        self.assertEqual(scissors, Scissors(f"{CUT}\ndiff"))

    def test_last_scissors_wins(self):
        message = f"Subject\n\n{CUT}\nquoted\n{CUT}\ndiff\n"
        lines, scissors = parse_sections(message)
        self.assertEqual(lines, ["Subject", "", CUT, "quoted"])
        self.assertEqual(str(scissors), f"{CUT}\ndiff\n")

    def test_invalid_lines_are_ignored(self):
        message = f"Subject\n£ {SCISSORS_MARKER}\n#  {SCISSORS_MARKER}\n"
        lines, scissors = parse_sections(message)
        self.assertIsNone(scissors)
        self.assertEqual(len(lines), 4)


class TestGuessCommentCharacter(TestCase):
    def test_nothing_to_guess_from(self):
        self.assertIsNone(guess_comment_character(""))
        self.assertIsNone(guess_comment_character("\n\n"))
        self.assertIsNone(guess_comment_character("Example Commit Message"))

    def test_scissors_character_wins(self):
        message = f"Subject\n# a comment\n; {SCISSORS_MARKER}\n# diff line\n"
        self.assertEqual(guess_comment_character(message), ";")

    def test_last_commented_line_wins(self):
        message = "Subject\n\n# first\n\n; second\n"
        self.assertEqual(guess_comment_character(message), ";")

    def test_unknown_characters_are_not_guessed(self):
        self.assertIsNone(guess_comment_character("Subject\n\n? Bitte\n"))

    def test_explicit_candidates(self):
        message = "Subject\n\n? comment\n# not a comment\n"
        self.assertEqual(guess_comment_character(message, frozenset("?")), "?")


if __name__ == "__main__":
    unittest.main()
