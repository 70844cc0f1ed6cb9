"""CLI argument parser and dispatch for kandown."""

import argparse

from kandown.cli.board import board_get, board_summary
from kandown.cli.card import card_add, card_get, card_list, card_move
from kandown.cli.view import view_list, view_show


def build_parser() -> argparse.ArgumentParser:
    """Build the full CLI argument parser."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--file", "-f", default="board.md", help="Board markdown file (default: board.md)")
    common.add_argument("--json", action="store_true", help="Machine-readable JSON output")
    common.add_argument("--verbose", "-v", action="store_true", help="Log debug output to stderr")

    parser = argparse.ArgumentParser(
        prog="kandown",
        description="Markdown kanban boards",
        parents=[common],
    )

    nouns = parser.add_subparsers(dest="noun")

    # --- board ---
    board_p = nouns.add_parser("board", help="Board operations", parents=[common])
    board_verbs = board_p.add_subparsers(dest="verb")

    board_summary_p = board_verbs.add_parser("summary", help="Show board summary", parents=[common])
    board_summary_p.set_defaults(func=board_summary)

    board_get_p = board_verbs.add_parser("get", help="Dump normalized board markdown", parents=[common])
    board_get_p.set_defaults(func=board_get)

    # board with no verb = summary
    board_p.set_defaults(func=board_summary)

    # --- view ---
    view_p = nouns.add_parser("view", help="View operations", parents=[common])
    view_verbs = view_p.add_subparsers(dest="verb")

    view_list_p = view_verbs.add_parser("list", help="List views", parents=[common])
    view_list_p.set_defaults(func=view_list)

    view_show_p = view_verbs.add_parser("show", help="Show a view's columns", parents=[common])
    view_show_p.add_argument("name", nargs="?", help="View name (default: configured or first view)")
    view_show_p.set_defaults(func=view_show)

    # view with no verb = list
    view_p.set_defaults(func=view_list)

    # --- card ---
    card_p = nouns.add_parser("card", help="Card operations", parents=[common])
    card_verbs = card_p.add_subparsers(dest="verb")

    card_list_p = card_verbs.add_parser("list", help="List cards", parents=[common])
    card_list_p.set_defaults(func=card_list)

    card_get_p = card_verbs.add_parser("get", help="Show a card", parents=[common])
    card_get_p.add_argument("id", help="Card ID")
    card_get_p.set_defaults(func=card_get)

    card_add_p = card_verbs.add_parser("add", help="Create a card", parents=[common])
    card_add_p.add_argument("title", help="Card title")
    card_add_p.add_argument("--description", default="", help="Card description")
    card_add_p.add_argument(
        "--set",
        action="append",
        metavar="NAME=VALUE",
        help="Property value (repeatable)",
    )
    card_add_p.set_defaults(func=card_add)

    card_move_p = card_verbs.add_parser("move", help="Move a card to another group", parents=[common])
    card_move_p.add_argument("id", help="Card ID")
    card_move_p.add_argument("--view", help="View name (default: configured or first view)")
    card_move_p.add_argument("--to", required=True, help="New group value")
    card_move_p.set_defaults(func=card_move)

    # card with no verb = list
    card_p.set_defaults(func=card_list)

    return parser
