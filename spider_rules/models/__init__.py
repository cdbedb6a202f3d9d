"""Card and variant models."""

from .card import RANK_NAMES, SUIT_NAMES, SUIT_ORDER, Card, PlayableCard, Rank, Suit
from .variant import (
    DECK_SIZE,
    DEFAULT_VARIANT,
    SPIDER_VARIANTS,
    GameVariant,
    InvalidVariant,
    VariantSpec,
    variant_spec,
)

__all__ = [
    "Card",
    "PlayableCard",
    "Rank",
    "Suit",
    "RANK_NAMES",
    "SUIT_NAMES",
    "SUIT_ORDER",
    "DECK_SIZE",
    "DEFAULT_VARIANT",
    "SPIDER_VARIANTS",
    "GameVariant",
    "InvalidVariant",
    "VariantSpec",
    "variant_spec",
]
