"""Deck construction for Spider Solitaire variants."""

import logging
from functools import lru_cache

from spider_rules.logging.formatters import card_code
from spider_rules.models.card import RANK_NAMES, SUIT_NAMES, Card, Rank, Suit
from spider_rules.models.variant import DEFAULT_VARIANT, GameVariant, variant_spec

logger = logging.getLogger(__name__)

DEFAULT_ASSET_DIR = "src/assets/cards"
DEFAULT_ASSET_EXTENSION = "svg"


def card_front(
    suit: Suit,
    rank: Rank,
    asset_dir: str = DEFAULT_ASSET_DIR,
    extension: str = DEFAULT_ASSET_EXTENSION,
) -> str:
    """Build the visual reference key for a card face.

    Args:
        suit: Card suit.
        rank: Card rank.
        asset_dir: Directory prefix understood by the asset resolver.
        extension: File extension of the card images.

    Returns:
        Lookup path such as "src/assets/cards/10-Hearts.svg".
    """
    name = f"{RANK_NAMES[rank]}-{SUIT_NAMES[suit]}.{extension}"
    if not asset_dir:
        return name
    return f"{asset_dir.rstrip('/')}/{name}"


@lru_cache(maxsize=None)
def _suit_template(suit: Suit, asset_dir: str, extension: str) -> tuple[Card, ...]:
    # Shared across the process; callers must copy before handing cards out.
    return tuple(
        Card(suit=suit, rank=rank, front=card_front(suit, rank, asset_dir, extension))
        for rank in Rank
    )


def _clone_cards(cards: tuple[Card, ...]) -> list[Card]:
    return [card.model_copy(deep=True) for card in cards]


class DeckBuilder:
    """Builds unshuffled decks for each game variant."""

    def __init__(
        self,
        asset_dir: str = DEFAULT_ASSET_DIR,
        extension: str = DEFAULT_ASSET_EXTENSION,
    ):
        """Initialize builder.

        Args:
            asset_dir: Directory prefix for card face keys.
            extension: File extension for card face keys.
        """
        self.asset_dir = asset_dir
        self.extension = extension

    def template(self, suit: Suit) -> list[Card]:
        """Get a fresh Ace-to-King run for one suit."""
        return _clone_cards(_suit_template(suit, self.asset_dir, self.extension))

    def build(self, variant: GameVariant | str = DEFAULT_VARIANT) -> list[Card]:
        """Build the full deck for a variant.

        Suits come in canonical order, each suit's copies back to back,
        ranks Ace to King within every copy. Every card is a new instance.

        Args:
            variant: Game variant or its string token.

        Returns:
            Newly allocated list of cards.

        Raises:
            InvalidVariant: If the variant is not recognized.
        """
        spec = variant_spec(variant)

        deck: list[Card] = []
        for suit in sorted(spec.suits):
            run = _suit_template(suit, self.asset_dir, self.extension)
            for _ in range(spec.copies):
                deck.extend(_clone_cards(run))

        suit_names = ", ".join(SUIT_NAMES[suit] for suit in spec.suits)
        logger.debug(f"Built {len(deck)}-card deck: {suit_names} x{spec.copies}")
        return deck


_default_builder = DeckBuilder()


def build_deck(variant: GameVariant | str = DEFAULT_VARIANT) -> list[Card]:
    """Build a deck with the default asset layout.

    Raises:
        InvalidVariant: If the variant is not recognized.
    """
    return _default_builder.build(variant)


def deck_summary(cards: list[Card]) -> dict[str, int]:
    """Count cards per suit and rank.

    Returns:
        Dict mapping card codes (e.g., "C7") to the number of copies, in
        suit then rank order.
    """
    ordered = sorted(cards, key=lambda c: (c.suit, c.rank))
    counts: dict[str, int] = {}
    for card in ordered:
        code = card_code(card.suit, card.rank)
        counts[code] = counts.get(code, 0) + 1
    return counts
