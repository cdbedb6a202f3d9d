"""Spider Solitaire rules core: deck building and move validation."""

from .game import DeckBuilder, MoveValidator, build_deck, can_drop_sequence_on, can_lift_sequence
from .models import Card, GameVariant, InvalidVariant, PlayableCard, Rank, Suit

__version__ = "0.1.0"

__all__ = [
    "Card",
    "DeckBuilder",
    "GameVariant",
    "InvalidVariant",
    "MoveValidator",
    "PlayableCard",
    "Rank",
    "Suit",
    "build_deck",
    "can_drop_sequence_on",
    "can_lift_sequence",
]
