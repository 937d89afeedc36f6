"""Tests for the lexer and number reader."""

import pytest

from pathgeom.parser.errors import ExpectedNumberNotFound, MalformedNumber, UnexpectedNumber
from pathgeom.parser.lexer import Lexer, Token


def test_next_token_skips_separators():
    lexer = Lexer("  ,\tM")
    assert lexer.next_token() is Token.COMMAND
    assert lexer.index == 4


def test_next_token_does_not_consume():
    lexer = Lexer("12")
    assert lexer.next_token() is Token.NUMBER
    assert lexer.next_token() is Token.NUMBER
    assert lexer.index == 0


@pytest.mark.parametrize("text", ["", "   ", ", ,"])
def test_next_token_end_of_input(text):
    assert Lexer(text).next_token() is None


@pytest.mark.parametrize("text", ["5", "-5", ".5"])
def test_number_starts(text):
    assert Lexer(text).next_token() is Token.NUMBER


def test_unknown_letters_are_commands():
    # Rejected later, at dispatch time
    assert Lexer("X").next_token() is Token.COMMAND


def test_read_command():
    lexer = Lexer(" L 1")
    assert lexer.read_command() == "L"
    assert lexer.index == 2


def test_read_command_at_end():
    assert Lexer("  ").read_command() is None


def test_read_command_rejects_number():
    with pytest.raises(UnexpectedNumber) as exc:
        Lexer("  5 L").read_command()
    assert exc.value.offset == 2


def test_read_simple_number():
    lexer = Lexer("10 20")
    assert lexer.read_number() == 10.0
    assert lexer.index == 2
    assert lexer.read_number() == 20.0


def test_minus_splits_numbers():
    lexer = Lexer("1-2")
    assert lexer.read_number() == 1.0
    assert lexer.read_number() == -2.0


def test_second_dot_splits_numbers():
    lexer = Lexer("1.5.5")
    assert lexer.read_number() == 1.5
    assert lexer.read_number() == 0.5


def test_packed_negative_fractions():
    lexer = Lexer("-.5-.25.75")
    assert lexer.read_numbers(3) == [-0.5, -0.25, 0.75]


def test_trailing_dot_is_valid():
    assert Lexer("3.").read_number() == 3.0


def test_plus_is_a_separator():
    assert Lexer("+5").read_number() == 5.0


def test_exponent_is_not_part_of_number():
    lexer = Lexer("1e5")
    assert lexer.read_number() == 1.0
    assert lexer.next_token() is Token.COMMAND


@pytest.mark.parametrize("text", ["-", ".", "-.", "-,5"])
def test_malformed_number(text):
    with pytest.raises(MalformedNumber) as exc:
        Lexer(text).read_number()
    assert exc.value.offset == 0
    assert exc.value.token == text.split(",")[0]


def test_expected_number_at_command():
    with pytest.raises(ExpectedNumberNotFound) as exc:
        Lexer("L").read_number()
    assert exc.value.offset == 0


def test_expected_number_reports_position_before_separators():
    lexer = Lexer("1  ")
    lexer.read_number()
    with pytest.raises(ExpectedNumberNotFound) as exc:
        lexer.read_number()
    assert exc.value.offset == 1


def test_read_numbers_short_group():
    with pytest.raises(ExpectedNumberNotFound) as exc:
        Lexer("1 2").read_numbers(3)
    assert exc.value.expected == 3
    assert exc.value.found == 2
    assert exc.value.offset == 3
    assert "number 3 not found" in exc.value.message
