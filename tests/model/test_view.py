"""Tests for grouping and sorting a view's cards."""

import pytest

from kandown.errors import NotFoundError, ViewError
from kandown.model.loader import build_board
from kandown.model.view import cards_by_group, find_view, group_property_index
from kandown.models import Card, ColumnSort, Document, Property, PropertyType, PropertyValue, SortType, View, ViewLayout


def _titles(groups):
    return {group: [card.title for card in cards] for group, cards in groups.items()}


def _ids(groups):
    return {group: [card.id for card in cards] for group, cards in groups.items()}


def _backlog_board(card_ids, sort_type=SortType.NONE, column_sorts=None):
    """A one-column board holding the given card ids, all in Backlog."""
    doc = Document(
        properties=[Property("Status", PropertyType.SELECT, ["Backlog", "Done"])],
        cards=[Card(card_id, f"Task {card_id}", "", [PropertyValue("Status", "Backlog")]) for card_id in card_ids],
        views=[View("Board", group="Status", sort_type=sort_type, column_sorts=column_sorts or [])],
    )
    return build_board(doc)


def test_cards_by_group(board):
    """Each card lands in the bucket of its group value."""
    assert _titles(cards_by_group(board, "Board View")) == {
        "Backlog": ["Task 1"],
        "In Progress": ["Task 2"],
        "Done": ["Task 3"],
    }


def test_cards_by_group_covers_every_card(board):
    groups = cards_by_group(board, "Board View")
    assert sorted(card.id for cards in groups.values() for card in cards) == [0, 1, 2]


def test_select_options_seed_empty_buckets(test_document):
    """Every select option gets a bucket, in declared order."""
    test_document.cards.pop()
    groups = cards_by_group(build_board(test_document), "Board View")
    assert list(groups) == ["Backlog", "In Progress", "Done"]
    assert groups["Done"] == []


def test_missing_value_buckets_under_empty_string(test_document):
    test_document.cards[1].properties = []
    groups = _titles(cards_by_group(build_board(test_document), "Board View"))
    assert groups[""] == ["Task 2"]
    assert groups["In Progress"] == []


def test_group_by_text_property(test_document):
    """Non-select properties bucket by value in first-seen order."""
    test_document.views[0].group = "Owner"
    groups = _titles(cards_by_group(build_board(test_document), "Board View"))
    assert list(groups) == ["Alice", "Bob", "Charlie"]


def test_calendar_groups_by_date_property(test_document):
    test_document.cards[0].properties.append(PropertyValue("Due Date", "2025-01-01"))
    groups = _titles(cards_by_group(build_board(test_document), "Calendar View"))
    assert groups == {"2025-01-01": ["Task 1"], "": ["Task 2", "Task 3"]}


def test_alpha_sort():
    doc = Document(
        properties=[Property("Status", PropertyType.SELECT, ["Todo"])],
        cards=[
            Card(0, "Zebra", "", [PropertyValue("Status", "Todo")]),
            Card(1, "apple", "", [PropertyValue("Status", "Todo")]),
            Card(2, "Mango", "", [PropertyValue("Status", "Todo")]),
        ],
        views=[
            View("Alpha", group="Status", sort_type=SortType.ALPHA),
            View("Reverse", group="Status", sort_type=SortType.REVERSE_ALPHA),
            View("Unsorted", group="Status"),
        ],
    )
    board = build_board(doc)
    assert _titles(cards_by_group(board, "Alpha"))["Todo"] == ["Mango", "Zebra", "apple"]
    assert _titles(cards_by_group(board, "Reverse"))["Todo"] == ["apple", "Zebra", "Mango"]
    assert _titles(cards_by_group(board, "Unsorted"))["Todo"] == ["Zebra", "apple", "Mango"]


def test_manual_sort():
    """Listed ids come first in list order, the rest follow."""
    board = _backlog_board([0, 2, 5], SortType.MANUAL, [ColumnSort("Backlog", [2, 0])])
    assert _ids(cards_by_group(board, "Board"))["Backlog"] == [2, 0, 5]


def test_manual_sort_unlisted_keep_order():
    board = _backlog_board([7, 3, 5, 1], SortType.MANUAL, [ColumnSort("Backlog", [5])])
    assert _ids(cards_by_group(board, "Board"))["Backlog"] == [5, 7, 3, 1]


def test_manual_sort_unknown_ids_ignored():
    board = _backlog_board([0, 1], SortType.MANUAL, [ColumnSort("Backlog", [99, 1])])
    assert _ids(cards_by_group(board, "Board"))["Backlog"] == [1, 0]


def test_manual_sort_without_column_entry():
    board = _backlog_board([4, 2], SortType.MANUAL, [ColumnSort("Done", [2])])
    assert _ids(cards_by_group(board, "Board"))["Backlog"] == [4, 2]


def test_column_sorts_ignored_unless_manual():
    board = _backlog_board([4, 2], SortType.NONE, [ColumnSort("Backlog", [2, 4])])
    assert _ids(cards_by_group(board, "Board"))["Backlog"] == [4, 2]


def test_view_not_found(board):
    with pytest.raises(NotFoundError, match="View not found: Nope"):
        cards_by_group(board, "Nope")
    with pytest.raises(NotFoundError):
        find_view(board, "Nope")


def test_view_without_group_by(test_document):
    test_document.views[0].group = None
    board = build_board(test_document)
    with pytest.raises(ViewError, match="doesn't have a group_by property"):
        cards_by_group(board, "Board View")


def test_table_view_cannot_be_grouped(test_document):
    test_document.views.append(View("Table View", layout=ViewLayout.TABLE, sort_by="Owner"))
    board = build_board(test_document)
    with pytest.raises(ViewError, match="cannot be grouped"):
        cards_by_group(board, "Table View")
    with pytest.raises(ViewError):
        group_property_index(board.get_view("Table View"))


def test_group_property_index(board):
    assert group_property_index(board.get_view("Board View")) == board.property_by_name["Status"]
