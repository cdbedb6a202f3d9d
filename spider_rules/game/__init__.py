"""Game rules."""

from .deck import DeckBuilder, build_deck, card_front, deck_summary
from .validator import MoveValidator, ValidationResult, can_drop_sequence_on, can_lift_sequence

__all__ = [
    "DeckBuilder",
    "build_deck",
    "card_front",
    "deck_summary",
    "MoveValidator",
    "ValidationResult",
    "can_drop_sequence_on",
    "can_lift_sequence",
]
