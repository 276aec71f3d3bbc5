import pytest

from sueca.cards import parse_card
from sueca.netcommon import CommandReader, encode_line
from sueca.protocol import (
    game_message,
    name_message,
    play_message,
    round_message,
    turn_message,
    winner_message,
    your_turn_message,
)

COMMANDS = {"game": 1, "round": 2, "turn": 3, "play": 4, "winner": 5, "name": 6}


def _read(message):
    commands = CommandReader(COMMANDS).feed(encode_line(message))
    assert len(commands) == 1
    return commands[0]


def test_your_turn_is_bare_play():
    assert your_turn_message() == "play"


def test_play_message_fields():
    card = parse_card("AH")
    command = _read(play_message("P2", card))
    assert command.name == "play"
    assert command.params == ("P2", card.short())
    assert parse_card(command.params[1]) == card


def test_turn_and_winner_messages():
    assert _read(turn_message("P3")).params == ("P3",)
    assert _read(turn_message("P3")).name == "turn"
    assert _read(winner_message("P1")).name == "winner"
    assert _read(winner_message("P1")).params == ("P1",)


def test_name_message():
    command = _read(name_message("P1", "alice"))
    assert command.name == "name"
    assert command.params == ("P1", "alice")


def test_game_message_lists_others_after_own_seat():
    others = [("bob", "P3"), ("carol", "P4"), ("dave", "P1")]
    command = _read(game_message("P2", others))
    assert command.name == "game"
    assert command.params == ("P2", "bob", "P3", "carol", "P4", "dave", "P1")


def test_round_message_round_trip():
    hand = [parse_card(code) for code in ("2C", "QS", "7D", "AH")]
    trump = parse_card("KH")
    command = _read(round_message(hand, trump, "P4"))
    assert command.name == "round"
    *hand_codes, trump_code, owner = command.params
    assert [parse_card(code) for code in hand_codes] == hand
    assert parse_card(trump_code) == trump
    assert owner == "P4"


def test_round_message_rejects_empty_hand():
    with pytest.raises(ValueError):
        round_message([], parse_card("KH"), "P1")