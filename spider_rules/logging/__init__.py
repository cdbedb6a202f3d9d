"""Card formatting for logs and command-line output."""

from .formatters import card_code, format_card, format_cards, parse_card, parse_cards

__all__ = [
    "card_code",
    "format_card",
    "format_cards",
    "parse_card",
    "parse_cards",
]
