"""Handlers for 'kandown view' commands."""

from kandown.api import get_view_snapshot, view_info
from kandown.cli._common import error, find_view, load_board_or_die, output_json
from kandown.errors import KandownError
from kandown.model.view import cards_by_group


def view_list(args) -> int:
    """List all views."""
    board = load_board_or_die(args.file, args.json)

    items = [view_info(board, view) for view in board.views]

    if args.json:
        output_json(items)
    else:
        for v in items:
            group = f"  by {v['groupBy']}" if v["groupBy"] else ""
            sort = f"  sort {v['sortType']}" if v["sortType"] != "None" else ""
            print(f"{v['name']:<20} {v['layout']}{group}{sort}")

    return 0


def view_show(args) -> int:
    """Show a view's cards grouped into columns."""
    board = load_board_or_die(args.file, args.json)
    view = find_view(board, args.name, args.json)

    try:
        if args.json:
            output_json(get_view_snapshot(board, view.name))
            return 0
        groups = cards_by_group(board, view.name)
    except KandownError as e:
        error(str(e), args.json)

    for group, cards in groups.items():
        print(group or "(none)")
        for card in cards:
            print(f"  {card.id}  {card.title}")

    return 0
