"""Card mutation operations for kandown boards."""

import logging
from collections.abc import Iterable, Mapping

from kandown.errors import NotFoundError, ValidationError
from kandown.ids import max_id, next_id
from kandown.model.board import Board, BoardCard, BoardProperty
from kandown.model.view import find_view, group_property_index
from kandown.models import PropertyType

logger = logging.getLogger(__name__)

CHECKBOX_VALUES = ("true", "false")


def _is_valid_value(prop: BoardProperty, value: str) -> bool:
    """Select values must be a declared option, Checkbox values true/false."""
    if prop.type is PropertyType.SELECT:
        return value in prop.options
    if prop.type is PropertyType.CHECKBOX:
        return value in CHECKBOX_VALUES
    return True


def _single_line(text: str, what: str) -> str:
    """Strip text, rejecting line breaks the markdown cannot hold."""
    if "\n" in text or "\r" in text:
        raise ValidationError(f"{what} must be a single line")
    return text.strip()


def _description_text(description: str) -> str:
    """Normalize a description, rejecting lines that would not read back as description."""
    lines = [line.strip() for line in description.strip().splitlines()]
    for line in lines:
        if not line:
            raise ValidationError("Description cannot contain blank lines")
        if ":" in line:
            raise ValidationError(f"Description lines cannot contain ':': {line}")
        if line.startswith("-"):
            raise ValidationError(f"Description lines cannot start with '-': {line}")
    return "\n".join(lines)


def create_card(
    board: Board,
    title: str,
    description: str = "",
    properties: Mapping[str, str] | Iterable[tuple[str, str]] | None = None,
) -> BoardCard:
    """Create a new card and add it to the board and every view.

    All values are validated before anything changes, including that the
    title, description and values can be written back as markdown and read
    unchanged. Surrounding whitespace is stripped. Returns the card.
    """
    title = _single_line(title, "Card title")
    if not title:
        raise ValidationError("Card title cannot be empty")
    description = _description_text(description)

    if properties is None:
        properties = {}
    pairs = properties.items() if isinstance(properties, Mapping) else properties

    values: list[tuple[int, str]] = []
    for name, value in pairs:
        prop_index = board.property_by_name.get(name)
        if prop_index is None:
            raise ValidationError(f"Unknown property: {name}")
        value = _single_line(value, f"Value for {name}")
        prop = board.properties[prop_index]
        if not _is_valid_value(prop, value):
            if prop.type is PropertyType.CHECKBOX:
                raise ValidationError(f"Invalid value for {name}: {value} (expected true or false)")
            raise ValidationError(f"Invalid value for {name}: {value}")
        values.append((prop_index, value))

    if title in board.card_by_title:
        logger.debug("title %r already in use; the title index now points at the new card", title)

    card = BoardCard(
        id=next_id(max_id(board.card_by_id)),
        title=title,
        description=description,
        properties=values,
    )
    board._add_card_links(board._register_card(card))

    logger.debug("created card %d: %s", card.id, title)
    return card


def move_card(board: Board, title: str, view_name: str, value: str) -> BoardCard:
    """Move a card to another group of a view by setting its group value.

    Overwrites the card's existing value for the view's group property, or
    adds one. Raises before changing anything if the card or view is
    unknown, the view has no group property, or the value is not allowed.
    """
    card_index = board.card_by_title.get(title)
    if card_index is None:
        raise NotFoundError(f"Card not found: {title}")
    view = find_view(board, view_name)
    prop_index = group_property_index(view)
    prop = board.properties[prop_index]
    value = _single_line(value, "Group value")
    if not _is_valid_value(prop, value):
        raise ValidationError(f"Invalid group value: {value}")

    card = board.cards[card_index]
    for i, (index, _) in enumerate(card.properties):
        if index == prop_index:
            card.properties[i] = (prop_index, value)
            break
    else:
        card.properties.append((prop_index, value))
        board._link_card_property(card_index, prop_index)

    logger.debug("moved card %d to %s=%s in %s", card.id, prop.name, value, view_name)
    return card


def move_card_by_id(board: Board, card_id: int, view_name: str, value: str) -> BoardCard:
    """Move a card identified by ID. Resolves the title and defers to move_card."""
    card = board.get_card(card_id)
    if card is None:
        raise NotFoundError(f"Card not found with ID: {card_id}")
    return move_card(board, card.title, view_name, value)
