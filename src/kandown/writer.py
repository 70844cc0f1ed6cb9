"""Serialize a Document back to kandown markdown."""

import yaml

from kandown.models import Card, Document, Property, PropertyType, SortType, View

INDENT = "  "
OPTION_INDENT = "\t"
COLUMN_INDENT = INDENT * 2
CARD_ID_INDENT = INDENT * 3


def _property_lines(prop: Property) -> list[str]:
    lines = [f"- {prop.name}: {prop.type.value}"]
    if prop.type is PropertyType.SELECT:
        lines.extend(f"{OPTION_INDENT}- {option}" for option in prop.options)
    return lines


def _view_lines(view: View) -> list[str]:
    lines = [f"- {view.name}", f"{INDENT}Layout: {view.layout.value}"]
    if view.group is not None:
        lines.append(f"{INDENT}Group: {view.group}")
    if view.sort_by is not None:
        lines.append(f"{INDENT}Sort: {view.sort_by}")
    if view.sort_type is not SortType.NONE:
        lines.append(f"{INDENT}Sort Type: {view.sort_type.value}")
    if view.sort_type is SortType.MANUAL:
        for column_sort in view.column_sorts:
            lines.append(f"{COLUMN_INDENT}- {column_sort.column}")
            lines.extend(f"{CARD_ID_INDENT}- {card_id}" for card_id in column_sort.order)
    if view.filter is not None:
        lines.append(f"{INDENT}Filter: {view.filter}")
    if view.display is not None:
        lines.append(f"{INDENT}Display: {view.display}")
    return lines


def _card_lines(card: Card) -> list[str]:
    lines = [f"- {card.title}"]
    lines.extend(f"{INDENT}{pv.property_name}: {pv.value}" for pv in card.properties)
    if card.description:
        lines.extend(f"{INDENT}{line}" for line in card.description.split("\n"))
    return lines


def serialize_document(doc: Document) -> str:
    """Serialize a Document to markdown.

    Sections are written in the order Properties, Views, Cards and only
    when non-empty. Every entry is followed by a blank line. Meta becomes
    YAML front-matter if non-empty.
    """
    parts: list[str] = []

    if doc.meta:
        parts.append("---")
        parts.append(yaml.dump(doc.meta, default_flow_style=False, sort_keys=False).rstrip())
        parts.append("---")
        parts.append("")

    sections = (
        ("Properties", doc.properties, _property_lines),
        ("Views", doc.views, _view_lines),
        ("Cards", doc.cards, _card_lines),
    )
    for title, entries, render in sections:
        if not entries:
            continue
        parts.append(f"# {title}")
        for entry in entries:
            parts.extend(render(entry))
            parts.append("")

    if not parts:
        return ""
    return "\n".join(parts).rstrip() + "\n"
