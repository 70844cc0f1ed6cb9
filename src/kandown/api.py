"""Host-facing surface: markdown in, JSON-serializable snapshots out.

Card keys on this surface are strings of the form "card_<id>".
"""

import json
from typing import Any

from kandown.errors import ValidationError
from kandown.ids import card_key, parse_card_key
from kandown.model.board import Board, BoardCard, BoardProperty, BoardView
from kandown.model.card import create_card, move_card_by_id
from kandown.model.loader import load_board
from kandown.model.view import cards_by_group, find_view
from kandown.model.writer import board_to_markdown
from kandown.models import PropertyType, ViewLayout


def new_board(markdown: str) -> Board:
    """Parse and link markdown. Raises ParseError or LinkError."""
    return load_board(markdown)


def list_view_names(board: Board) -> list[str]:
    return [view.name for view in board.views]


def view_info(board: Board, view: BoardView) -> dict[str, Any]:
    target = board.property_at(view.target)
    sort_by = board.property_at(view.sort_by)
    if view.layout is ViewLayout.TABLE:
        group_by, sort_by = None, target or sort_by
    else:
        group_by = target
    return {
        "name": view.name,
        "layout": view.layout.value,
        "groupBy": group_by.name if group_by else None,
        "sortBy": sort_by.name if sort_by else None,
        "sortType": view.sort_type.value,
    }


def property_info(prop: BoardProperty) -> dict[str, Any]:
    return {
        "name": prop.name,
        "propertyType": prop.type.value,
        "options": list(prop.options) if prop.type is PropertyType.SELECT else None,
    }


def card_data(board: Board, card: BoardCard) -> dict[str, Any]:
    return {
        "id": card_key(card.id),
        "title": card.title,
        "description": card.description,
        "properties": board.card_values(card),
    }


def get_view_snapshot(board: Board, view_name: str) -> dict[str, Any]:
    """Everything a client needs to render one grouped view.

    columns and items follow the group order of cards_by_group; cards is
    keyed by card key.
    """
    groups = cards_by_group(board, view_name)
    view = find_view(board, view_name)
    group_by = board.property_at(view.target)

    columns = []
    cards: dict[str, dict[str, Any]] = {}
    items: dict[str, list[str]] = {}
    for group, group_cards in groups.items():
        keys = []
        for card in group_cards:
            key = card_key(card.id)
            cards[key] = card_data(board, card)
            keys.append(key)
        columns.append({"id": group, "title": group, "cards": keys})
        items[group] = keys

    return {
        "views": [view_info(board, v) for v in board.views],
        "columns": columns,
        "cards": cards,
        "properties": [property_info(prop) for prop in board.properties],
        "groupByPropertyName": group_by.name if group_by else None,
        "items": items,
    }


def move_card(board: Board, key: str | int, view_name: str, value: str) -> None:
    """Move the card with the given key to the group `value` of a view."""
    move_card_by_id(board, parse_card_key(key), view_name, value)


def _as_text(value: Any) -> str:
    """Render a JSON value the way it is written in markdown."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def add_card(
    board: Board,
    title: str,
    description: str = "",
    properties: dict[str, Any] | str | None = None,
) -> str:
    """Add a card and return its key.

    properties may be a dict or a JSON object string.
    """
    if isinstance(properties, str):
        try:
            properties = json.loads(properties) if properties.strip() else {}
        except json.JSONDecodeError as e:
            raise ValidationError(f"Invalid properties JSON: {e}") from e
    if properties is None:
        properties = {}
    if not isinstance(properties, dict):
        raise ValidationError("Properties must be a JSON object")

    values = {str(name): _as_text(value) for name, value in properties.items()}
    card = create_card(board, title, description, values)
    return card_key(card.id)


def export_markdown(board: Board) -> str:
    return board_to_markdown(board)
