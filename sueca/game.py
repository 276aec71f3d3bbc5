"""Game engine: seating, dealing, tricks and scoring for a four-player Sueca match."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Hashable, Iterator, Sequence

from sueca.cards import Card, Deck, Suit

CARDS_PER_HAND = 10
PLAYER_COUNT = 4
TIED_LABEL = "(T)"


class PlayerRing:
    """Players seated in a circle, with a pointer to the current one."""

    def __init__(self, players: Sequence[Hashable]) -> None:
        self._players = list(players)
        if not self._players:
            raise ValueError("a ring needs at least one player")
        self._index = 0

    def current(self) -> Hashable:
        """The player the ring points at."""
        return self._players[self._index]

    def select(self, player: Hashable) -> None:
        """Point the ring at the given player."""
        try:
            self._index = self._players.index(player)
        except ValueError:
            raise ValueError(f"player not in ring: {player!r}") from None

    def move_to(self, index: int) -> None:
        """Point the ring at the player seated `index` places after the first."""
        self._index = index % len(self._players)

    def advance(self) -> Hashable:
        """Move to the next player and return them."""
        self._index = (self._index + 1) % len(self._players)
        return self._players[self._index]

    def __getitem__(self, offset: int) -> Hashable:
        return self._players[(self._index + offset) % len(self._players)]

    def __iter__(self) -> Iterator[Hashable]:
        """Every player once, starting from the current one."""
        for offset in range(len(self._players)):
            yield self[offset]

    def __len__(self) -> int:
        return len(self._players)

    def replace(self, old: Hashable, new: Hashable) -> None:
        """Put `new` in the seat of `old`, keeping the current seat."""
        try:
            seat = self._players.index(old)
        except ValueError:
            raise ValueError(f"player not in ring: {old!r}") from None
        self._players[seat] = new

    def copy(self) -> PlayerRing:
        """A ring with the same seating, pointing at the first seat."""
        return PlayerRing(self._players)


def trick_winner(played: Sequence[Card], trump_suit: Suit) -> int:
    """Index of the card that wins a trick, given the cards in play order."""
    if not played:
        raise ValueError("no cards were played")
    best_index = 0
    best = played[0]
    for index, card in enumerate(played[1:], start=1):
        beats_with_trump = card.suit == trump_suit and (
            best.suit != trump_suit or card.rank > best.rank
        )
        beats_in_suit = card.suit == best.suit and card.rank > best.rank
        if beats_with_trump or beats_in_suit:
            best, best_index = card, index
    return best_index


class MoveStatus(Enum):
    """Outcome of trying to play a card."""

    OK = "ok"
    TURN = "turn"
    INVALID = "invalid"
    DELAYED = "delayed"


@dataclass(frozen=True)
class RoundResult:
    """How a round was settled: winning team (0, 1 or None if tied) and games won."""

    winner: int | None
    games: int
    points: tuple[int, int]

    @property
    def labels(self) -> tuple[str, str]:
        """Short per-team markers shown next to the scores."""
        if self.winner is None:
            return (TIED_LABEL, TIED_LABEL)
        marks = ["", ""]
        marks[self.winner] = f"({self.games})"
        return (marks[0], marks[1])


@dataclass
class MatchScore:
    """Games won by each team; ties double the value of the next decided round."""

    games: list[int] = field(default_factory=lambda: [0, 0])
    multiplier: int = 1

    def __init__(self) -> None:
        self.games = [0, 0]
        self.multiplier = 1

    def settle_round(
        self, points1: int, points2: int, captured1: int, captured2: int
    ) -> RoundResult:
        """Record a finished round from each team's points and captured card counts."""
        difference = points1 - points2
        points = (points1, points2)
        if difference == 0:
            self.multiplier *= 2
            return RoundResult(None, 0, points)
        winner = 0 if difference > 0 else 1
        captured = captured1 if winner == 0 else captured2
        if captured == PLAYER_COUNT * CARDS_PER_HAND:
            games = 4
        elif abs(difference) > 60:
            games = 2
        else:
            games = 1
        games *= self.multiplier
        self.games[winner] += games
        self.multiplier = 1
        return RoundResult(winner, games, points)


class Game:
    """A match between two teams: seats 0 and 2 against seats 1 and 3."""

    def __init__(
        self, players: Sequence[Hashable], rng: random.Random | None = None
    ) -> None:
        seats = list(players)
        if len(seats) != PLAYER_COUNT or len(set(seats)) != PLAYER_COUNT:
            raise ValueError("a game needs four distinct players")
        self._rng = rng if rng is not None else random.Random()
        self._seats = seats
        self.players = PlayerRing(seats)
        self._round_order = self.players.copy()
        self._round_order.move_to(self._rng.randrange(PLAYER_COUNT))
        self.deck = Deck()
        self.score = MatchScore()
        self._hands: dict[Hashable, list[Card]] = {player: [] for player in seats}
        self.captured: tuple[list[Card], list[Card]] = ([], [])
        self.played: list[tuple[Hashable, Card]] = []
        self.trump: Card | None = None
        self.trump_owner: Hashable | None = None
        self.turns_left = 0
        self.playtime = False
        self.last_result: RoundResult | None = None

    def _team_of(self, player: Hashable) -> int:
        return self._seats.index(player) % 2

    def new_round(self) -> None:
        """Shuffle, deal ten cards each, turn up the trump and open the first trick."""
        self.turns_left = CARDS_PER_HAND
        self.deck.shuffle(self._rng)
        cards = iter(self.deck)
        for _ in range(PLAYER_COUNT):
            player = self._round_order.advance()
            self._hands[player] = [next(cards) for _ in range(CARDS_PER_HAND)]
        self.trump = self.deck[len(self.deck) - 1]
        self.trump_owner = self._round_order.current()
        self.captured = ([], [])
        self.played = []
        self.players.select(self._round_order.advance())
        self.playtime = True

    def hand(self, player: Hashable) -> list[Card]:
        """The cards the player still holds."""
        return list(self._hands[player])

    def is_valid_move(self, player: Hashable, card: Card) -> bool:
        """Whether the player holds the card and it follows suit when required."""
        held = self._hands[player]
        if card not in held:
            return False
        if not self.played:
            return True
        lead = self.played[0][1].suit
        if card.suit == lead:
            return True
        return all(other.suit != lead for other in held)

    def play(self, player: Hashable, card: Card) -> MoveStatus:
        """Try to play a card for a player."""
        if not self.playtime or player != self.players.current():
            return MoveStatus.TURN
        if not self.is_valid_move(player, card):
            return MoveStatus.INVALID
        self.played.append((player, card))
        self._hands[player].remove(card)
        self.players.advance()
        self.playtime = len(self.played) < PLAYER_COUNT
        return MoveStatus.OK

    def end_trick(self) -> Hashable:
        """Give a complete trick to its winner and return that player."""
        if len(self.played) != PLAYER_COUNT:
            raise RuntimeError("the trick is not complete")
        assert self.trump is not None
        cards = [card for _, card in self.played]
        winner = self.played[trick_winner(cards, self.trump.suit)][0]
        self.captured[self._team_of(winner)].extend(cards)
        self.played = []
        self.turns_left -= 1
        self.players.select(winner)
        if self.turns_left == 0:
            first, second = self.captured
            self.last_result = self.score.settle_round(
                sum(card.points() for card in first),
                sum(card.points() for card in second),
                len(first),
                len(second),
            )
            self.new_round()
        else:
            self.playtime = True
        return winner

    def replace_player(self, old: Hashable, new: Hashable) -> None:
        """Seat `new` in place of `old`, handing over the cards and the turn."""
        if new in self._hands:
            raise ValueError(f"player already seated: {new!r}")
        self.players.replace(old, new)
        self._round_order.replace(old, new)
        self._seats[self._seats.index(old)] = new
        self._hands[new] = self._hands.pop(old)
        self.played = [(new if who == old else who, card) for who, card in self.played]
        if self.trump_owner == old:
            self.trump_owner = new