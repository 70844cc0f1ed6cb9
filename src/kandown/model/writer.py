"""Project a Board back into a Document and markdown text."""

from kandown.model.board import Board, BoardCard, BoardProperty, BoardView
from kandown.models import Card, ColumnSort, Document, Property, PropertyValue, View, ViewLayout
from kandown.writer import serialize_document


def _property_to_document(prop: BoardProperty) -> Property:
    return Property(name=prop.name, type=prop.type, options=list(prop.options))


def _card_to_document(board: Board, card: BoardCard) -> Card:
    return Card(
        id=card.id,
        title=card.title,
        description=card.description,
        properties=[PropertyValue(board.properties[index].name, value) for index, value in card.properties],
    )


def _view_to_document(board: Board, view: BoardView) -> View:
    """Rebuild a view's name references from its resolved properties.

    Board, Calendar and Timeline write their target back as Group; Table
    writes it as Sort.
    """
    target = board.property_at(view.target)
    target_name = target.name if target is not None else None
    sort_by = board.property_at(view.sort_by)
    sort_name = sort_by.name if sort_by is not None else None

    if view.layout is ViewLayout.TABLE:
        group, sort_name = None, target_name or sort_name
    else:
        group = target_name

    display = ", ".join(board.properties[index].name for index in view.display)

    return View(
        name=view.name,
        layout=view.layout,
        group=group,
        filter=view.filter,
        sort_by=sort_name,
        sort_type=view.sort_type,
        column_sorts=[ColumnSort(column, list(order)) for column, order in view.column_sorts.items()],
        display=display or None,
    )


def board_to_document(board: Board) -> Document:
    """Convert a Board to a Document in the board's stored order."""
    return Document(
        properties=[_property_to_document(prop) for prop in board.properties],
        cards=[_card_to_document(board, card) for card in board.cards],
        views=[_view_to_document(board, view) for view in board.views],
        meta=dict(board.meta),
    )


def board_to_markdown(board: Board) -> str:
    """Serialize a Board to markdown text."""
    return serialize_document(board_to_document(board))
