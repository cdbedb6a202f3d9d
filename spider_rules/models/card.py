"""Card models."""

from enum import IntEnum

from pydantic import BaseModel, ConfigDict


class Suit(IntEnum):
    """Card suit (declaration order is the canonical deck order)."""

    CLUB = 0
    DIAMOND = 1
    HEART = 2
    SPADE = 3


class Rank(IntEnum):
    """Card rank, Ace low.

    Values are the face values used by the adjacency rules (Ace=1, King=13).
    Out-of-range values raise ValueError instead of wrapping.
    """

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    @property
    def successor(self) -> "Rank | None":
        """Rank one above this one, or None for King."""
        if self is Rank.KING:
            return None
        return Rank(self + 1)

    @property
    def predecessor(self) -> "Rank | None":
        """Rank one below this one, or None for Ace."""
        if self is Rank.ACE:
            return None
        return Rank(self - 1)

    def is_one_above(self, other: "Rank") -> bool:
        """Check if this rank is exactly one step above `other`."""
        return other.successor is self


SUIT_ORDER: tuple[Suit, ...] = tuple(Suit)

# Map rank to display string
RANK_NAMES = {
    Rank.ACE: "A",
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}

SUIT_NAMES = {
    Suit.CLUB: "Clubs",
    Suit.DIAMOND: "Diamonds",
    Suit.HEART: "Hearts",
    Suit.SPADE: "Spades",
}

SUIT_SYMBOLS = {
    Suit.CLUB: "♣",
    Suit.DIAMOND: "♦",
    Suit.HEART: "♥",
    Suit.SPADE: "♠",
}


class Card(BaseModel):
    """Single physical card.

    A multi-copy deck holds several cards with the same suit and rank, so
    cards compare and hash by identity, not by value.
    """

    model_config = ConfigDict(frozen=True)

    suit: Suit
    rank: Rank
    front: str = ""  # Opaque key for the asset resolver

    def __eq__(self, other: object) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)

    def __str__(self) -> str:
        return f"{SUIT_SYMBOLS[self.suit]}{RANK_NAMES[self.rank]}"

    def __repr__(self) -> str:
        return str(self)


class PlayableCard(Card):
    """Card on the table with a face-up flag.

    The flag belongs to whoever manages the piles; rule checks only read it.
    """

    model_config = ConfigDict(frozen=False, validate_assignment=True)

    face_up: bool = False

    @classmethod
    def from_card(cls, card: Card, face_up: bool = False) -> "PlayableCard":
        """Wrap a dealt card for play."""
        return cls(suit=card.suit, rank=card.rank, front=card.front, face_up=face_up)

    def flip(self) -> None:
        """Turn the card over."""
        self.face_up = not self.face_up

    def __str__(self) -> str:
        face = "" if self.face_up else " (down)"
        return f"{super().__str__()}{face}"
