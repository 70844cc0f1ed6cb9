"""Grouping and sorting of a view's cards."""

from kandown.errors import NotFoundError, ViewError
from kandown.model.board import Board, BoardCard, BoardView
from kandown.models import PropertyType, SortType


def find_view(board: Board, view_name: str) -> BoardView:
    """Lookup a view by name. Raises NotFoundError if missing."""
    view = board.get_view(view_name)
    if view is None:
        raise NotFoundError(f"View not found: {view_name}")
    return view


def group_property_index(view: BoardView) -> int:
    """Index of the property a view groups by (date property for calendars).

    Raises ViewError for Table views and for views without one.
    """
    if not view.is_grouped:
        raise ViewError(f"View '{view.name}' is a {view.layout.value} view and cannot be grouped")
    if view.target is None:
        raise ViewError(f"View '{view.name}' doesn't have a group_by property")
    return view.target


def sort_cards(view: BoardView, group: str, cards: list[BoardCard]) -> list[BoardCard]:
    """Order one bucket of cards according to the view's sort type.

    Manual order places cards by their position in the column's id list;
    cards not in the list go last, keeping their relative order.
    """
    if view.sort_type is SortType.ALPHA:
        return sorted(cards, key=lambda card: card.title)
    if view.sort_type is SortType.REVERSE_ALPHA:
        return sorted(cards, key=lambda card: card.title, reverse=True)
    if view.sort_type is SortType.MANUAL:
        order = view.column_sorts.get(group)
        if not order:
            return list(cards)
        positions: dict[int, int] = {}
        for position, card_id in enumerate(order):
            positions.setdefault(card_id, position)
        return sorted(cards, key=lambda card: positions.get(card.id, len(order)))
    return list(cards)


def cards_by_group(board: Board, view_name: str) -> dict[str, list[BoardCard]]:
    """Bucket a view's cards by their group value and sort each bucket.

    For a Select group-by property every option gets a bucket, in declared
    order, even when empty. Cards without a value land under "".
    """
    view = find_view(board, view_name)
    prop_index = group_property_index(view)
    prop = board.properties[prop_index]

    groups: dict[str, list[BoardCard]] = {}
    if prop.type is PropertyType.SELECT:
        for option in prop.options:
            groups[option] = []

    for card in board.view_cards(view):
        value = board.card_value(card, prop_index)
        groups.setdefault(value if value is not None else "", []).append(card)

    return {group: sort_cards(view, group, cards) for group, cards in groups.items()}
