import pytest

from passcheck.criteria import (
    SPECIAL_CHARACTERS,
    digit_met,
    evaluate,
    length_and_no_space_met,
    lowercase_met,
    special_character_met,
    uppercase_met,
)
from passcheck.models import Criterion


@pytest.mark.parametrize("text,expected", [
    ("", False),
    ("a" * 7, False),
    ("a" * 8, True),       # lower bound is inclusive
    ("a" * 32, True),      # upper bound is inclusive
    ("a" * 33, False),
    ("abcd efgh", False),
    ("abcdefgh\t", False),
    ("abcdefgh\n", False),
    ("Abcdefg1!", True),
])
def test_length_and_no_space(text, expected):
    assert length_and_no_space_met(text) is expected


def test_length_bounds_are_configurable():
    assert length_and_no_space_met("abcd", min_length=4, max_length=4)
    assert not length_and_no_space_met("abcde", min_length=4, max_length=4)


def test_character_classes():
    assert uppercase_met("abcD")
    assert not uppercase_met("abcd1!")
    assert lowercase_met("ABCd")
    assert not lowercase_met("ABCD1!")
    assert digit_met("abc7")
    assert not digit_met("abc!")


def test_non_ascii_letters_do_not_count():
    assert not uppercase_met("ÄÖÜ")
    assert not lowercase_met("äöü")
    assert not digit_met("٣")  # arabic-indic digit


def test_special_characters():
    for c in "!@#$%^&*":
        assert special_character_met(f"abc{c}")
    assert not special_character_met("abcDEF123")
    assert not special_character_met("abc def")
    assert not any(c.isalnum() or c.isspace() for c in SPECIAL_CHARACTERS)


def test_special_character_set_override():
    assert not special_character_met("abc!", symbols="#")
    assert special_character_met("abc#", symbols="#")


def test_empty_string_fails_everything():
    assert not any(evaluate("").values())


def test_evaluate_covers_all_criteria():
    results = evaluate("Ab1!")
    assert set(results) == set(Criterion)
    assert results[Criterion.MIN_LENGTH_NO_SPACE] is False
    assert results[Criterion.UPPERCASE] is True
    assert results[Criterion.LOWERCASE] is True
    assert results[Criterion.DIGIT] is True
    assert results[Criterion.SPECIAL_CHARACTER] is True


def test_evaluate_uses_policy():
    policy = {"min_length": 2, "max_length": 4, "special_characters": "~"}
    results = evaluate("Ab1!", policy)
    assert results[Criterion.MIN_LENGTH_NO_SPACE] is True
    assert results[Criterion.SPECIAL_CHARACTER] is False
