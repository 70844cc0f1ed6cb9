"""Handlers for 'kandown board' commands."""

import sys

from kandown.api import property_info, view_info
from kandown.cli._common import load_board_or_die, output_json
from kandown.model.writer import board_to_markdown


def board_summary(args) -> int:
    """Show board summary: properties, views, card count."""
    board = load_board_or_die(args.file, args.json)

    properties = [property_info(prop) for prop in board.properties]
    views = [view_info(board, view) for view in board.views]

    if args.json:
        output_json({"file": args.file, "properties": properties, "views": views, "cards": len(board.cards)})
        return 0

    print(args.file)
    print("Properties")
    for p in properties:
        options = f"  [{', '.join(p['options'])}]" if p["options"] else ""
        print(f"  {p['name']:<16} {p['propertyType']}{options}")
    print("Views")
    for v in views:
        group = f"  by {v['groupBy']}" if v["groupBy"] else ""
        print(f"  {v['name']:<16} {v['layout']}{group}")
    cards = "card" if len(board.cards) == 1 else "cards"
    print(f"{len(board.cards)} {cards}")
    return 0


def board_get(args) -> int:
    """Dump the board as normalized markdown."""
    board = load_board_or_die(args.file, args.json)

    markdown = board_to_markdown(board)

    if args.json:
        output_json({"file": args.file, "markdown": markdown})
    else:
        sys.stdout.write(markdown)

    return 0
