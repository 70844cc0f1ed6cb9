"""Tests for card ID generation and card keys."""

import pytest

from kandown.errors import ValidationError
from kandown.ids import card_key, max_id, next_id, parse_card_key


def test_max_id_empty():
    """Empty list returns None."""
    assert max_id([]) is None


def test_max_id():
    """Finds the highest ID regardless of order."""
    assert max_id([3, 1, 2]) == 3
    assert max_id([0]) == 0
    assert max_id(iter([5, 9, 7])) == 9


def test_next_id_empty_board():
    """First card on an empty board gets ID 0."""
    assert next_id(None) == 0


def test_next_id():
    """Next ID is one past the maximum."""
    assert next_id(0) == 1
    assert next_id(41) == 42


def test_card_key():
    assert card_key(0) == "card_0"
    assert card_key(12) == "card_12"


def test_parse_card_key():
    """Prefixed keys, bare numbers and ints all resolve."""
    assert parse_card_key("card_3") == 3
    assert parse_card_key("7") == 7
    assert parse_card_key(" 8 ") == 8
    assert parse_card_key(5) == 5


def test_parse_card_key_roundtrip():
    assert parse_card_key(card_key(21)) == 21


@pytest.mark.parametrize("key", ["card_x", "card_", "card_-1", "card_1.5"])
def test_parse_card_key_bad_number(key):
    """A prefixed key with a non-numeric suffix is rejected."""
    with pytest.raises(ValidationError, match="Invalid card ID number"):
        parse_card_key(key)


@pytest.mark.parametrize("key", ["foo", "", "-3", "task_1", True])
def test_parse_card_key_bad_format(key):
    """Anything else is rejected."""
    with pytest.raises(ValidationError, match="Invalid card ID format"):
        parse_card_key(key)


def test_parse_card_key_negative_int():
    with pytest.raises(ValidationError, match="Invalid card ID number"):
        parse_card_key(-1)
