"""Linked board model."""

from kandown.model.board import Board, BoardCard, BoardProperty, BoardView
from kandown.model.card import create_card, move_card, move_card_by_id
from kandown.model.loader import build_board, load_board
from kandown.model.view import cards_by_group, find_view, group_property_index, sort_cards
from kandown.model.writer import board_to_document, board_to_markdown

__all__ = [
    "Board",
    "BoardCard",
    "BoardProperty",
    "BoardView",
    "board_to_document",
    "board_to_markdown",
    "build_board",
    "cards_by_group",
    "create_card",
    "find_view",
    "group_property_index",
    "load_board",
    "move_card",
    "move_card_by_id",
    "sort_cards",
]
