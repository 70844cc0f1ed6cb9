"""Shared helpers for CLI command handlers."""

import json
import logging
import sys
from pathlib import Path

from kandown.config import read_config
from kandown.errors import KandownError
from kandown.ids import parse_card_key
from kandown.model.board import Board, BoardCard, BoardView
from kandown.model.loader import load_board
from kandown.model.writer import board_to_markdown


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr; debug level with --verbose."""
    logging.basicConfig(
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        level=logging.DEBUG if verbose else logging.WARNING,
    )


def load_board_or_die(path: str, json_mode: bool) -> Board:
    """Read and build the board file. Exit 1 with message on failure."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        error(f"Cannot read {path}: {e.strerror}", json_mode)
    try:
        return load_board(text)
    except KandownError as e:
        error(f"{path}: {e}", json_mode)


def save(board: Board, path: str) -> None:
    """Write the board back to its file."""
    Path(path).write_text(board_to_markdown(board), encoding="utf-8")


def find_view(board: Board, name: str | None, json_mode: bool) -> BoardView:
    """Lookup view by name, defaulting to the configured or first view.

    Exit 1 listing available views if not found.
    """
    if name is None:
        name = read_config(board.meta)["default_view"]
    if name is None and board.views:
        return board.views[0]
    view = board.get_view(name) if name is not None else None
    if view is not None:
        return view
    available = [f"  {v.name}  ({v.layout.value})" for v in board.views]
    msg = f"View '{name}' not found. Available:\n" + "\n".join(available) if available else "Board has no views."
    error(msg, json_mode)


def find_card(board: Board, key: str, json_mode: bool) -> BoardCard:
    """Lookup card by ID or card key. Exit 1 if not found."""
    try:
        card = board.get_card(parse_card_key(key))
    except KandownError as e:
        error(str(e), json_mode)
    if card is not None:
        return card
    error(f"Card '{key}' not found.", json_mode)


def parse_assignments(pairs: list[str] | None, json_mode: bool) -> dict[str, str]:
    """Parse NAME=VALUE arguments into an ordered dict."""
    values: dict[str, str] = {}
    for pair in pairs or []:
        name, sep, value = pair.partition("=")
        if not sep or not name.strip():
            error(f"Expected NAME=VALUE, got: {pair}", json_mode)
        values[name.strip()] = value.strip()
    return values


def output_json(data: dict | list) -> None:
    """Write JSON to stdout."""
    print(json.dumps(data, indent=2))


def output_result(data: dict, text: str, json_mode: bool) -> None:
    """Output mutation result as JSON or plain text."""
    if json_mode:
        output_json(data)
    else:
        print(text)


def error(message: str, json_mode: bool) -> None:
    """Print error to stderr and exit 1."""
    if json_mode:
        print(json.dumps({"error": message}), file=sys.stderr)
    else:
        print(f"error: {message}", file=sys.stderr)
    sys.exit(1)
