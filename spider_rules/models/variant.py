"""Game variant models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict

from .card import SUIT_ORDER, Rank, Suit

DECK_SIZE = 104


class InvalidVariant(ValueError):
    """Raised for a variant token that names no known game mode."""

    def __init__(self, value: object):
        super().__init__(f"Unsupported spider solitaire mode: {value!r}")
        self.value = value


class GameVariant(str, Enum):
    """Spider Solitaire difficulty mode."""

    ONE_SUIT = "one-suit"
    TWO_SUIT = "two-suit"
    FOUR_SUIT = "four-suit"

    @classmethod
    def parse(cls, value: "GameVariant | str") -> "GameVariant":
        """Resolve a variant from a member or its string token.

        Raises:
            InvalidVariant: If the value is not a known variant.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidVariant(value)


DEFAULT_VARIANT = GameVariant.TWO_SUIT


class VariantSpec(BaseModel):
    """Suits used by a variant and how many times each suit run repeats."""

    model_config = ConfigDict(frozen=True)

    suits: tuple[Suit, ...]
    copies: int

    @property
    def deck_size(self) -> int:
        """Total number of cards in the variant's deck."""
        return self.copies * len(self.suits) * len(Rank)


SPIDER_VARIANTS: dict[GameVariant, VariantSpec] = {
    GameVariant.ONE_SUIT: VariantSpec(suits=(Suit.CLUB,), copies=8),
    GameVariant.TWO_SUIT: VariantSpec(suits=(Suit.CLUB, Suit.HEART), copies=4),
    GameVariant.FOUR_SUIT: VariantSpec(suits=SUIT_ORDER, copies=2),
}


def variant_spec(variant: GameVariant | str) -> VariantSpec:
    """Look up the deck layout for a variant.

    Raises:
        InvalidVariant: If the variant is not recognized.
    """
    return SPIDER_VARIANTS[GameVariant.parse(variant)]
