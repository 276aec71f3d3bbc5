"""Messages the game host sends to networked players, one protocol line each."""

from __future__ import annotations

from typing import Iterable

from sueca.cards import Card

_SEPARATOR = ":"


def _line(*fields: str) -> str:
    return _SEPARATOR.join(fields)


def game_message(own_position: str, others: Iterable[tuple[str, str]]) -> str:
    """Announce a new game: the receiver's seat, then each other player's name and seat.

    `others` holds (name, position) pairs in seating order, starting with the
    player after the receiver.
    """
    fields = [own_position]
    for name, position in others:
        fields.extend((name, position))
    return _line("game", *fields)


def round_message(hand: Iterable[Card], trump: Card, owner_position: str) -> str:
    """Announce a new round: the receiver's hand, the trump card and who holds it."""
    shorts = [card.short() for card in hand]
    if not shorts:
        raise ValueError("a round starts with a non-empty hand")
    return _line("round", *shorts, trump.short(), owner_position)


def turn_message(position: str) -> str:
    """Announce that the player at `position` starts a trick."""
    return _line("turn", position)


def play_message(position: str, card: Card) -> str:
    """Announce that the player at `position` played `card`."""
    return _line("play", position, card.short())


def winner_message(position: str) -> str:
    """Announce that the player at `position` won the trick."""
    return _line("winner", position)


def your_turn_message() -> str:
    """Tell the receiver it is their turn to play."""
    return "play"


def name_message(position: str, new_name: str) -> str:
    """Announce that the player at `position` is now called `new_name`."""
    return _line("name", position, new_name)