"""Shared fixtures for kandown tests."""

import pytest

SAMPLE_BOARD = """\
# Properties
- Status: Select
\t- Backlog
\t- In Progress
\t- Done
- Owner: Text
- Due Date: Date
- Shipped: Checkbox

# Views
- Board View
  Layout: Board
  Group: Status
  Display: Owner

- Calendar View
  Layout: Calendar
  Group: Due Date

# Cards
- Task 1
  Status: Backlog
  Owner: Alice
  Description for task 1

- Task 2
  Status: In Progress
  Owner: Bob

- Task 3
  Status: Done
  Owner: Charlie
"""


@pytest.fixture
def sample_markdown():
    """A small board: four properties, two views and three cards."""
    return SAMPLE_BOARD
