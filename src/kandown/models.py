"""Data models for parsed kandown documents."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class PropertyType(Enum):
    TEXT = "Text"
    NUMBER = "Number"
    DATE = "Date"
    CHECKBOX = "Checkbox"
    SELECT = "Select"


class ViewLayout(Enum):
    BOARD = "Board"
    TABLE = "Table"
    CALENDAR = "Calendar"
    TIMELINE = "Timeline"


class SortType(Enum):
    ALPHA = "Alpha"
    REVERSE_ALPHA = "ReverseAlpha"
    MANUAL = "Manual"
    NONE = "None"


@dataclass
class Property:
    """A property declared in the Properties section."""

    name: str
    type: PropertyType = PropertyType.TEXT
    options: list[str] = field(default_factory=list)


@dataclass
class PropertyValue:
    """A `Name: Value` line under a card."""

    property_name: str
    value: str


@dataclass
class Card:
    """A card from the Cards section. id is its 0-based position."""

    id: int
    title: str
    description: str = ""
    properties: list[PropertyValue] = field(default_factory=list)


@dataclass
class ColumnSort:
    """Manual card order for one column of a view."""

    column: str
    order: list[int] = field(default_factory=list)


@dataclass
class View:
    """A view from the Views section."""

    name: str
    layout: ViewLayout = ViewLayout.BOARD
    group: str | None = None
    filter: str | None = None
    sort_by: str | None = None
    sort_type: SortType = SortType.NONE
    column_sorts: list[ColumnSort] = field(default_factory=list)
    display: str | None = None


@dataclass
class Document:
    """Flat parse result: entities reference each other only by name."""

    properties: list[Property] = field(default_factory=list)
    cards: list[Card] = field(default_factory=list)
    views: list[View] = field(default_factory=list)
    meta: dict[str, Any] = field(default_factory=dict)
