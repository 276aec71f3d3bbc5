"""Cards and the 40-card deck used in Sueca."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterator


class Rank(IntEnum):
    """Card ranks, ordered from weakest to strongest."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    QUEEN = 7
    JACK = 8
    KING = 9
    SEVEN = 10
    ACE = 11

    @property
    def label(self) -> str:
        return _RANK_INFO[self][0]

    @property
    def short(self) -> str:
        return _RANK_INFO[self][1]

    @property
    def points(self) -> int:
        return _RANK_INFO[self][2]


_RANK_INFO = {
    Rank.TWO: ("Two", "2", 0),
    Rank.THREE: ("Three", "3", 0),
    Rank.FOUR: ("Four", "4", 0),
    Rank.FIVE: ("Five", "5", 0),
    Rank.SIX: ("Six", "6", 0),
    Rank.QUEEN: ("Queen", "Q", 2),
    Rank.JACK: ("Jack", "J", 3),
    Rank.KING: ("King", "K", 4),
    Rank.SEVEN: ("Seven", "7", 10),
    Rank.ACE: ("Ace", "A", 11),
}


class Suit(Enum):
    """Card suits."""

    CLUBS = 0
    DIAMONDS = 1
    SPADES = 2
    HEARTS = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @property
    def short(self) -> str:
        return self.label[0]


@dataclass(frozen=True)
class Card:
    """A single playing card."""

    rank: Rank
    suit: Suit

    def name(self) -> str:
        """Full name, such as 'Ace of Hearts'."""
        return f"{self.rank.label} of {self.suit.label}"

    def short(self) -> str:
        """Short code, such as 'AH'."""
        return f"{self.rank.short}{self.suit.short}"

    def points(self) -> int:
        """Points the card is worth when captured."""
        return self.rank.points

    def __str__(self) -> str:
        return self.short()


_RANKS_BY_SHORT = {rank.short: rank for rank in Rank}
_SUITS_BY_SHORT = {suit.short: suit for suit in Suit}


def parse_card(text: str) -> Card:
    """Parse a short code such as 'QS' into a card."""
    if len(text) != 2:
        raise ValueError(f"invalid card code: {text!r}")
    rank_code, suit_code = text
    try:
        return Card(_RANKS_BY_SHORT[rank_code], _SUITS_BY_SHORT[suit_code])
    except KeyError:
        raise ValueError(f"invalid card code: {text!r}") from None


_DECK_SUIT_ORDER = (Suit.HEARTS, Suit.CLUBS, Suit.DIAMONDS, Suit.SPADES)


class Deck:
    """The 40 cards of a Sueca deck, in a mutable order."""

    def __init__(self) -> None:
        self._cards = [Card(rank, suit) for suit in _DECK_SUIT_ORDER for rank in Rank]
        self._by_short = {card.short(): card for card in self._cards}

    def shuffle(self, rng: random.Random | None = None) -> None:
        """Shuffle by swapping random pairs, once per card."""
        source = rng if rng is not None else random
        size = len(self._cards)
        for _ in range(size):
            first = source.randrange(size)
            second = source.randrange(size)
            self._cards[first], self._cards[second] = self._cards[second], self._cards[first]

    def find(self, short: str) -> Card:
        """Return the card with the given short code."""
        try:
            return self._by_short[short]
        except KeyError:
            raise KeyError(f"no such card: {short!r}") from None

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __getitem__(self, index: int) -> Card:
        return self._cards[index]