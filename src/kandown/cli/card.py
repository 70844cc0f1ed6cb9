"""Handlers for 'kandown card' commands."""

from kandown.api import card_data
from kandown.cli._common import (
    error,
    find_card,
    find_view,
    load_board_or_die,
    output_json,
    output_result,
    parse_assignments,
    save,
)
from kandown.errors import KandownError
from kandown.model.card import create_card, move_card_by_id


def card_list(args) -> int:
    """List cards with their property values."""
    board = load_board_or_die(args.file, args.json)

    items = [card_data(board, card) for card in board.cards]

    if args.json:
        output_json(items)
    else:
        for card, item in zip(board.cards, items):
            values = ", ".join(f"{k}: {v}" for k, v in item["properties"].items())
            print(f"{card.id}  {card.title}" + (f"  ({values})" if values else ""))

    return 0


def card_get(args) -> int:
    """Show one card."""
    board = load_board_or_die(args.file, args.json)
    card = find_card(board, args.id, args.json)

    data = card_data(board, card)
    data["views"] = [view.name for view in board.card_views(card)]

    if args.json:
        output_json(data)
    else:
        print(card.title)
        for name, value in data["properties"].items():
            print(f"  {name}: {value}")
        if card.description:
            print()
            print(card.description)

    return 0


def card_add(args) -> int:
    """Create a new card."""
    board = load_board_or_die(args.file, args.json)
    values = parse_assignments(args.set, args.json)

    try:
        card = create_card(board, args.title, args.description, values)
    except KandownError as e:
        error(str(e), args.json)

    save(board, args.file)

    output_result(
        {"id": card.id, "title": card.title},
        f"Created card {card.id}: {card.title}",
        args.json,
    )

    return 0


def card_move(args) -> int:
    """Move a card to another group of a view."""
    board = load_board_or_die(args.file, args.json)
    card = find_card(board, args.id, args.json)
    view = find_view(board, args.view, args.json)

    try:
        move_card_by_id(board, card.id, view.name, args.to)
    except KandownError as e:
        error(str(e), args.json)

    save(board, args.file)

    output_result(
        {"id": card.id, "view": view.name, "value": args.to},
        f"Moved card {card.id} to {args.to} in {view.name}",
        args.json,
    )

    return 0
