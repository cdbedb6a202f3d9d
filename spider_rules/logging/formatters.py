"""Short card codes for log and CLI output."""

from collections.abc import Sequence

from spider_rules.models.card import RANK_NAMES, Card, PlayableCard, Rank, Suit

# Suit codes for log output
SUIT_CODES: dict[Suit, str] = {
    Suit.CLUB: "C",
    Suit.DIAMOND: "D",
    Suit.HEART: "H",
    Suit.SPADE: "S",
}

# Rank codes reuse the display names
RANK_CODES: dict[Rank, str] = dict(RANK_NAMES)

FACE_DOWN_MARK = "*"
MISSING_MARK = "-"

_SUITS_BY_CODE = {code: suit for suit, code in SUIT_CODES.items()}
_RANKS_BY_CODE = {code: rank for rank, code in RANK_CODES.items()}


def card_code(suit: Suit, rank: Rank) -> str:
    """Format a suit and rank pair (e.g., "C7", "H10", "SA")."""
    return f"{SUIT_CODES[suit]}{RANK_CODES[rank]}"


def format_card(card: Card | None) -> str:
    """Format a single card to string.

    Args:
        card: Card to format, or None for a missing slot.

    Returns:
        Card code, with a trailing "*" for a face-down playable card.
    """
    if card is None:
        return MISSING_MARK
    code = card_code(card.suit, card.rank)
    if isinstance(card, PlayableCard) and not card.face_up:
        return code + FACE_DOWN_MARK
    return code


def format_cards(cards: Sequence[Card | None]) -> str:
    """Format cards to a comma-separated string.

    Returns:
        Comma-separated card codes (e.g., "C7,C6,C5"). Empty string if no cards.
    """
    return ",".join(format_card(c) for c in cards)


def parse_card(code: str, face_up: bool = True) -> PlayableCard:
    """Parse a card code into a playable card.

    Args:
        code: Card code such as "H10"; a trailing "*" marks it face down.
        face_up: Face state when the code carries no mark.

    Returns:
        New PlayableCard.

    Raises:
        ValueError: If the code is malformed.
    """
    text = code.strip().upper()
    if text.endswith(FACE_DOWN_MARK):
        text = text[:-1]
        face_up = False

    if len(text) < 2:
        raise ValueError(f"Invalid card code: {code!r}")

    suit = _SUITS_BY_CODE.get(text[0])
    rank = _RANKS_BY_CODE.get(text[1:])
    if suit is None or rank is None:
        raise ValueError(f"Invalid card code: {code!r}")

    return PlayableCard(suit=suit, rank=rank, face_up=face_up)


def parse_cards(text: str) -> list[PlayableCard]:
    """Parse a comma-separated list of card codes.

    Raises:
        ValueError: If any code is malformed.
    """
    return [parse_card(part) for part in text.split(",") if part.strip()]
