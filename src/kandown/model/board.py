"""Linked board model.

Properties, cards and views live in three lists owned by the Board. Every
cross-reference between them is an index into one of those lists, resolved
through the Board. The back-reference lists (property -> cards,
card -> views) exist for reverse lookup only.
"""

from dataclasses import dataclass, field
from typing import Any

from kandown.models import PropertyType, SortType, ViewLayout

GROUPED_LAYOUTS = (ViewLayout.BOARD, ViewLayout.CALENDAR, ViewLayout.TIMELINE)


def _link(indexes: list[int], index: int) -> None:
    """Append index unless it is already present."""
    if index not in indexes:
        indexes.append(index)


@dataclass
class BoardProperty:
    name: str
    type: PropertyType
    options: list[str] = field(default_factory=list)
    cards: list[int] = field(default_factory=list)


@dataclass
class BoardCard:
    id: int
    title: str
    description: str = ""
    properties: list[tuple[int, str]] = field(default_factory=list)
    views: list[int] = field(default_factory=list)


@dataclass
class BoardView:
    """A view over the board.

    target is the property the layout hangs off: group-by for Board,
    sort-by for Table, the date property for Calendar and Timeline.
    """

    name: str
    layout: ViewLayout = ViewLayout.BOARD
    target: int | None = None
    filter: str | None = None
    sort_type: SortType = SortType.NONE
    sort_by: int | None = None
    column_sorts: dict[str, list[int]] = field(default_factory=dict)
    display: list[int] = field(default_factory=list)
    cards: list[int] = field(default_factory=list)

    @property
    def is_grouped(self) -> bool:
        """True if the layout buckets cards by its target property."""
        return self.layout in GROUPED_LAYOUTS


@dataclass
class Board:
    """The full linked board and its lookup indexes."""

    properties: list[BoardProperty] = field(default_factory=list)
    cards: list[BoardCard] = field(default_factory=list)
    views: list[BoardView] = field(default_factory=list)
    meta: dict[str, Any] = field(default_factory=dict)

    property_by_name: dict[str, int] = field(default_factory=dict)
    card_by_title: dict[str, int] = field(default_factory=dict)
    card_by_id: dict[int, int] = field(default_factory=dict)
    view_by_name: dict[str, int] = field(default_factory=dict)

    # --- Lookups ---

    def get_property(self, name: str) -> BoardProperty | None:
        index = self.property_by_name.get(name)
        return None if index is None else self.properties[index]

    def get_card(self, card_id: int) -> BoardCard | None:
        index = self.card_by_id.get(card_id)
        return None if index is None else self.cards[index]

    def get_card_by_title(self, title: str) -> BoardCard | None:
        """Last card registered under title (duplicate titles overwrite)."""
        index = self.card_by_title.get(title)
        return None if index is None else self.cards[index]

    def get_view(self, name: str) -> BoardView | None:
        index = self.view_by_name.get(name)
        return None if index is None else self.views[index]

    def property_at(self, index: int | None) -> BoardProperty | None:
        return None if index is None else self.properties[index]

    def card_value(self, card: BoardCard, prop_index: int) -> str | None:
        """The card's value for the property at prop_index, if it has one."""
        for index, value in card.properties:
            if index == prop_index:
                return value
        return None

    def card_values(self, card: BoardCard) -> dict[str, str]:
        """The card's values keyed by property name."""
        return {self.properties[index].name: value for index, value in card.properties}

    def view_cards(self, view: BoardView) -> list[BoardCard]:
        return [self.cards[index] for index in view.cards]

    def property_cards(self, prop: BoardProperty) -> list[BoardCard]:
        return [self.cards[index] for index in prop.cards]

    def card_views(self, card: BoardCard) -> list[BoardView]:
        return [self.views[index] for index in card.views]

    # --- Registration (used by the builder and mutations) ---

    def _register_property(self, prop: BoardProperty) -> int:
        index = len(self.properties)
        self.properties.append(prop)
        self.property_by_name[prop.name] = index
        return index

    def _register_card(self, card: BoardCard) -> int:
        index = len(self.cards)
        self.cards.append(card)
        self.card_by_id[card.id] = index
        self.card_by_title[card.title] = index
        return index

    def _register_view(self, view: BoardView) -> int:
        index = len(self.views)
        self.views.append(view)
        self.view_by_name[view.name] = index
        return index

    def _link_card_property(self, card_index: int, prop_index: int) -> None:
        _link(self.properties[prop_index].cards, card_index)

    def _add_card_links(self, card_index: int) -> None:
        """Link a card that has no links yet to its properties and every view.

        Appends without membership checks; each property is linked once even
        if the card holds several values for it.
        """
        card = self.cards[card_index]
        for prop_index in dict.fromkeys(index for index, _ in card.properties):
            self.properties[prop_index].cards.append(card_index)
        for view_index, view in enumerate(self.views):
            view.cards.append(card_index)
            card.views.append(view_index)
