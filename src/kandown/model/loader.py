"""Build a linked Board from a parsed Document."""

import logging

from kandown.config import read_config
from kandown.errors import LinkError
from kandown.model.board import Board, BoardCard, BoardProperty, BoardView
from kandown.models import Card, Document, View, ViewLayout
from kandown.parser import parse_document

logger = logging.getLogger(__name__)


def _split_display(display: str | None) -> list[str]:
    """Split a comma-separated Display value into property names."""
    if not display:
        return []
    return [name.strip() for name in display.split(",") if name.strip()]


def _load_properties(board: Board, doc: Document) -> None:
    for prop in doc.properties:
        if prop.name in board.property_by_name:
            raise LinkError(f"Duplicate property: {prop.name}")
        board._register_property(BoardProperty(name=prop.name, type=prop.type, options=list(prop.options)))


def _load_card(board: Board, card: Card) -> BoardCard:
    """Resolve a parsed card's property values against the board."""
    values: list[tuple[int, str]] = []
    for pv in card.properties:
        index = board.property_by_name.get(pv.property_name)
        if index is None:
            raise LinkError(f"Card '{card.title}' references unknown property: {pv.property_name}")
        values.append((index, pv.value))
    return BoardCard(id=card.id, title=card.title, description=card.description, properties=values)


def _load_cards(board: Board, doc: Document) -> None:
    for card in doc.cards:
        if card.id in board.card_by_id:
            raise LinkError(f"Duplicate card id: {card.id}")
        board._register_card(_load_card(board, card))


def _resolve_required(board: Board, view: View, what: str) -> int | None:
    """Resolve view.group, failing if it is named but undeclared."""
    if view.group is None:
        return None
    index = board.property_by_name.get(view.group)
    if index is None:
        raise LinkError(f"View '{view.name}' references unknown {what}: {view.group}")
    return index


def _load_view(board: Board, view: View, strict_display: bool) -> BoardView:
    sort_by = None
    if view.sort_by is not None:
        sort_by = board.property_by_name.get(view.sort_by)
        if sort_by is None:
            logger.warning("View '%s' references unknown sort_by property: %s", view.name, view.sort_by)

    if view.layout is ViewLayout.BOARD:
        target = _resolve_required(board, view, "group by")
    elif view.layout is ViewLayout.TABLE:
        target = sort_by
    else:
        target = _resolve_required(board, view, "date property")

    display: list[int] = []
    for name in _split_display(view.display):
        index = board.property_by_name.get(name)
        if index is not None:
            display.append(index)
        elif strict_display:
            raise LinkError(f"View '{view.name}' references unknown display property: {name}")
        else:
            logger.warning("View '%s' references unknown display property: '%s'", view.name, name)

    return BoardView(
        name=view.name,
        layout=view.layout,
        target=target,
        filter=view.filter,
        sort_type=view.sort_type,
        sort_by=sort_by,
        column_sorts={cs.column: list(cs.order) for cs in view.column_sorts},
        display=display,
    )


def _load_views(board: Board, doc: Document, strict_display: bool) -> None:
    for view in doc.views:
        if view.name in board.view_by_name:
            raise LinkError(f"Duplicate view: {view.name}")
        board._register_view(_load_view(board, view, strict_display))


def build_board(doc: Document) -> Board:
    """Link a Document into a Board.

    Properties are built first, then cards (resolved against properties),
    then views (resolved against both); every card is then linked to its
    properties and to every view. Raises LinkError on an unknown
    property on a card or an unknown required property on a view.
    """
    config = read_config(doc.meta)
    board = Board(meta=dict(doc.meta))
    _load_properties(board, doc)
    _load_cards(board, doc)
    _load_views(board, doc, strict_display=config["strict_display"])
    for card_index in range(len(board.cards)):
        board._add_card_links(card_index)
    logger.debug(
        "built board: %d properties, %d cards, %d views",
        len(board.properties),
        len(board.cards),
        len(board.views),
    )
    return board


def load_board(text: str) -> Board:
    """Parse markdown text and build a Board from it."""
    return build_board(parse_document(text))
