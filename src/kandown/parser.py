"""Parse kandown markdown into a flat Document.

The grammar is line oriented: up to three level-1 sections (Properties,
Views, Cards, in that order), each a list of entries whose details live on
the indented lines below the entry's list item.
"""

import re

import yaml

from kandown.errors import InvalidPropertyType, ParseError
from kandown.models import (
    Card,
    ColumnSort,
    Document,
    Property,
    PropertyType,
    PropertyValue,
    SortType,
    View,
    ViewLayout,
)

TAB_WIDTH = 4

_LIST_ITEM = re.compile(r"^([ \t]*)(?:[-*+]|[0-9]+[.)])[ \t]+(\S.*?)\s*$")
_HEADING = re.compile(r"^#[ \t]*(.*?)\s*$")
_CARD_ID = re.compile(r"^[0-9]+$")
_BULLET_START = ("-", "*", "+")

_PROPERTY_TYPES = {t.value: t for t in PropertyType}
_LAYOUTS = {layout.value: layout for layout in ViewLayout}
_SORT_TYPES = {s.value: s for s in SortType}


def _indent(line: str) -> int:
    """Width of the leading whitespace, tabs counted as TAB_WIDTH columns."""
    stripped = line.lstrip(" \t")
    return len(line[: len(line) - len(stripped)].expandtabs(TAB_WIDTH))


def _is_blank(line: str) -> bool:
    return not line.strip()


def _list_item(line: str) -> tuple[int, str] | None:
    """Split a list item line into (indent, text), or None if it isn't one."""
    match = _LIST_ITEM.match(line)
    if not match:
        return None
    return _indent(line), match.group(2)


def _heading(line: str) -> str | None:
    """Return the text of a level-1 heading, or None."""
    match = _HEADING.match(line)
    if not match or match.group(1).startswith("#"):
        return None
    return match.group(1)


class _Cursor:
    """Position in the document's lines, with line numbers for errors."""

    def __init__(self, lines: list[str], first_lineno: int = 1) -> None:
        self.lines = lines
        self.pos = 0
        self.first_lineno = first_lineno

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.lines)

    @property
    def lineno(self) -> int:
        return self.first_lineno + self.pos

    def peek(self) -> str:
        return self.lines[self.pos]

    def advance(self) -> None:
        self.pos += 1

    def skip_blank(self) -> None:
        while not self.at_end and _is_blank(self.peek()):
            self.pos += 1

    def at_heading(self, title: str) -> bool:
        return not self.at_end and _heading(self.peek()) == title

    def in_section(self) -> bool:
        """True while the current line belongs to the open section."""
        return not self.at_end and _heading(self.peek()) is None

    def error(self, message: str, cls: type[ParseError] = ParseError) -> ParseError:
        line = None if self.at_end else self.peek()
        return cls(message, self.lineno, line)


def parse_document(text: str) -> Document:
    """Parse board markdown into a Document.

    Raises ParseError (or InvalidPropertyType) naming the offending line.
    Missing sections yield empty lists.
    """
    body, meta, consumed = _extract_front_matter(text)
    cursor = _Cursor(re.split(r"\r?\n", body), first_lineno=consumed + 1)
    cursor.skip_blank()

    properties = _parse_properties_section(cursor) if cursor.at_heading("Properties") else []
    views = _parse_views_section(cursor) if cursor.at_heading("Views") else []
    cards = _parse_cards_section(cursor) if cursor.at_heading("Cards") else []

    cursor.skip_blank()
    if not cursor.at_end:
        raise cursor.error(f"Unexpected content: {cursor.peek().strip()}")

    return Document(properties=properties, cards=cards, views=views, meta=meta)


# --- Properties ---


def _parse_properties_section(cursor: _Cursor) -> list[Property]:
    cursor.advance()
    cursor.skip_blank()
    properties: list[Property] = []
    seen: set[str] = set()
    while cursor.in_section():
        lineno = cursor.lineno
        prop = _parse_property(cursor)
        if prop.name in seen:
            raise ParseError(f"Duplicate property: {prop.name}", lineno)
        seen.add(prop.name)
        properties.append(prop)
        cursor.skip_blank()
    return properties


def _parse_property(cursor: _Cursor) -> Property:
    """Parse `- Name: Type`, plus the option items of a Select."""
    item = _list_item(cursor.peek())
    if item is None:
        raise cursor.error(f"Invalid property format: {cursor.peek().strip()}")
    indent, text = item

    parts = text.split(":")
    if len(parts) != 2 or not parts[0].strip():
        raise cursor.error(f"Invalid property format: {text}")
    name, type_name = parts[0].strip(), parts[1].strip()

    prop_type = _PROPERTY_TYPES.get(type_name)
    if prop_type is None:
        raise cursor.error(f"Unknown property type: {type_name}", InvalidPropertyType)
    cursor.advance()

    options: list[str] = []
    if prop_type is PropertyType.SELECT:
        while not cursor.at_end:
            option = _list_item(cursor.peek())
            if option is None or option[0] <= indent:
                break
            options.append(option[1])
            cursor.advance()

    return Property(name=name, type=prop_type, options=options)


# --- Views ---


def _parse_views_section(cursor: _Cursor) -> list[View]:
    cursor.advance()
    cursor.skip_blank()
    views: list[View] = []
    seen: set[str] = set()
    while cursor.in_section():
        lineno = cursor.lineno
        view = _parse_view(cursor)
        if view.name in seen:
            raise ParseError(f"Duplicate view: {view.name}", lineno)
        seen.add(view.name)
        views.append(view)
        cursor.skip_blank()
    return views


def _parse_view(cursor: _Cursor) -> View:
    """Parse a view item and its attribute block.

    Attribute lines sit one level below the item. A list item deeper than
    the attributes opens a manual-sort column; list items deeper still are
    the card ids of that column.
    """
    item = _list_item(cursor.peek())
    if item is None:
        raise cursor.error(f"Invalid view format: {cursor.peek().strip()}")
    indent, name = item
    cursor.advance()

    view = View(name=name)
    attr_indent: int | None = None
    column: ColumnSort | None = None
    column_indent = 0

    while not cursor.at_end:
        line = cursor.peek()
        width = _indent(line)
        if _is_blank(line) or width <= indent:
            break
        if attr_indent is None:
            attr_indent = width
        entry = _list_item(line)

        if column is not None and width > column_indent:
            value = entry[1] if entry is not None else line.strip()
            if not _CARD_ID.match(value):
                raise cursor.error(f"Expected number, got: {value}")
            column.order.append(int(value))
        elif entry is not None and width > attr_indent:
            column = ColumnSort(column=entry[1])
            column_indent = width
            view.column_sorts.append(column)
        else:
            column = None
            _apply_view_attribute(view, line.strip())
        cursor.advance()

    return view


def _apply_view_attribute(view: View, text: str) -> None:
    """Set a `Key: Value` attribute on view. Unknown keys are ignored."""
    key, sep, value = text.partition(":")
    if not sep:
        return
    key, value = key.strip(), value.strip()
    if key == "Layout":
        view.layout = _LAYOUTS.get(value, ViewLayout.BOARD)
    elif key == "Group":
        view.group = value
    elif key == "Filter":
        view.filter = value
    elif key == "Sort":
        view.sort_by = value
    elif key == "Sort Type":
        view.sort_type = _SORT_TYPES.get(value, SortType.NONE)
    elif key == "Display":
        view.display = value


# --- Cards ---


def _parse_cards_section(cursor: _Cursor) -> list[Card]:
    cursor.advance()
    cursor.skip_blank()
    cards: list[Card] = []
    while cursor.in_section():
        if _list_item(cursor.peek()) is None:
            if cursor.peek().lstrip().startswith(_BULLET_START):
                raise cursor.error("Could not parse card items")
            break
        cards.append(_parse_card(cursor))
        cursor.skip_blank()

    for idx, card in enumerate(cards):
        card.id = idx
    return cards


def _parse_card(cursor: _Cursor) -> Card:
    """Parse a card item: property lines, then description lines.

    A line with a colon is a property value until the first line without
    one; the contiguous colon-free lines form the description. Anything
    after the description is skipped. A line starting with `-` ends the
    card; other bullets and numbered lines are ordinary body text.
    """
    indent, title = _list_item(cursor.peek())
    cursor.advance()

    properties: list[PropertyValue] = []
    description: list[str] = []
    skipping = False

    while not cursor.at_end:
        line = cursor.peek()
        text = line.strip()
        if not text or _indent(line) <= indent or text.startswith("-"):
            break
        if skipping:
            pass
        elif ":" in text and not description:
            properties.append(_parse_card_property(cursor, text))
        elif ":" not in text:
            description.append(text)
        else:
            skipping = True
        cursor.advance()

    return Card(id=0, title=title, description="\n".join(description), properties=properties)


def _parse_card_property(cursor: _Cursor, text: str) -> PropertyValue:
    name, _, value = text.partition(":")
    if not name.strip():
        raise cursor.error(f"Invalid card property format: {text}")
    return PropertyValue(property_name=name.strip(), value=value.strip())


# --- Front-matter ---


def _extract_front_matter(text: str) -> tuple[str, dict, int]:
    """Extract YAML front-matter from text.

    Returns (remaining_text, meta, consumed_line_count).
    """
    if not text.startswith("---"):
        return text, {}, 0

    match = re.match(r"^---\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|$)", text, re.DOTALL)
    if not match:
        return text, {}, 0

    remaining = text[match.end() :]
    consumed = text[: match.end()].count("\n")

    try:
        meta = yaml.safe_load(match.group(1)) or {}
    except yaml.YAMLError:
        meta = {}
    if not isinstance(meta, dict):
        meta = {}

    return remaining, meta, consumed
