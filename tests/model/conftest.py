"""Shared fixtures for model tests."""

import pytest

from kandown.model.loader import build_board
from kandown.models import Card, Document, Property, PropertyType, PropertyValue, View, ViewLayout


@pytest.fixture
def test_document():
    """Three properties, three cards (one per status) and two views."""
    return Document(
        properties=[
            Property("Status", PropertyType.SELECT, ["Backlog", "In Progress", "Done"]),
            Property("Owner", PropertyType.TEXT),
            Property("Due Date", PropertyType.DATE),
        ],
        cards=[
            Card(0, "Task 1", "Description for task 1", [PropertyValue("Status", "Backlog"), PropertyValue("Owner", "Alice")]),
            Card(1, "Task 2", "Description for task 2", [PropertyValue("Status", "In Progress"), PropertyValue("Owner", "Bob")]),
            Card(2, "Task 3", "Description for task 3", [PropertyValue("Status", "Done"), PropertyValue("Owner", "Charlie")]),
        ],
        views=[
            View("Board View", layout=ViewLayout.BOARD, group="Status", display="Owner"),
            View("Calendar View", layout=ViewLayout.CALENDAR, group="Due Date"),
        ],
    )


@pytest.fixture
def board(test_document):
    """The test document, linked."""
    return build_board(test_document)
