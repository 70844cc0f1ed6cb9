"""Card ID generation and external card keys."""

from kandown.errors import ValidationError

CARD_KEY_PREFIX = "card_"


def max_id(ids) -> int | None:
    """Find the highest ID from an iterable, or None if empty."""
    return max(ids, default=None)


def next_id(current_max: int | None) -> int:
    """Generate the next ID after current_max.

    - If None (no cards yet), returns 0, matching parser-assigned IDs
    - Otherwise returns current_max + 1
    """
    if current_max is None:
        return 0
    return current_max + 1


def card_key(card_id: int) -> str:
    """External key for a card: 3 -> "card_3"."""
    return f"{CARD_KEY_PREFIX}{card_id}"


def parse_card_key(key: str | int) -> int:
    """Parse "card_3", "3" or 3 into the numeric card ID.

    Raises ValidationError for anything else.
    """
    if isinstance(key, int) and not isinstance(key, bool):
        if key < 0:
            raise ValidationError(f"Invalid card ID number: {key}")
        return key
    text = str(key).strip()
    if text.startswith(CARD_KEY_PREFIX):
        text = text[len(CARD_KEY_PREFIX) :]
    elif not text.isascii() or not text.isdigit():
        raise ValidationError(f"Invalid card ID format: {key}")
    if not text.isascii() or not text.isdigit():
        raise ValidationError(f"Invalid card ID number: {text}")
    return int(text)
