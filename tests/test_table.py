import math

import pytest

from sueca.cards import parse_card
from sueca.table import CardMove, Sprite, Table


def _sprite(code, x=0, y=0, width=10, height=20, **kwargs):
    return Sprite(parse_card(code), x, y, width, height, **kwargs)


def test_sprite_contains_edges():
    sprite = _sprite("AH", x=5, y=5)
    assert sprite.contains(5, 5)
    assert sprite.contains(14, 24)
    assert not sprite.contains(15, 5)
    assert not sprite.contains(5, 25)
    assert not sprite.contains(4, 5)


def test_move_along_axis_reaches_destination():
    sprite = _sprite("AH")
    move = CardMove(sprite, (10, 0))
    steps = 0
    while not move.finished():
        assert move.step() is True
        steps += 1
        assert steps <= 20
    assert (sprite.x, sprite.y) == (10, 0)
    assert move.step() is False


def test_diagonal_move_gets_closer_each_step():
    sprite = _sprite("AH")
    move = CardMove(sprite, (30, 40))
    last = math.hypot(30, 40)
    for _ in range(100):
        if move.finished():
            break
        move.step()
        now = math.hypot(30 - move.x, 40 - move.y)
        assert now < last
        last = now
    assert move.finished()
    assert abs(sprite.x - 30) <= 1
    assert abs(sprite.y - 40) <= 1


def test_move_to_current_position_is_finished():
    sprite = _sprite("AH", x=3, y=4)
    move = CardMove(sprite, (3, 4))
    assert move.finished()
    assert move.step() is False
    assert (sprite.x, sprite.y) == (3, 4)


def test_add_puts_on_top_and_find_returns_topmost():
    table = Table()
    bottom = _sprite("2C")
    top = _sprite("AH")
    table.add(bottom)
    table.add(top)
    assert list(table) == [top, bottom]
    assert table.find(1, 1) == (top, 0)
    assert table.find(100, 100) is None


def test_remove_and_missing_card():
    table = Table()
    sprite = _sprite("QS")
    table.add(sprite)
    assert table.remove(sprite.card) is sprite
    assert len(table) == 0
    with pytest.raises(KeyError):
        table.remove(sprite.card)


def test_raise_and_restore_round_trip():
    table = Table()
    sprites = [_sprite(code) for code in ("2C", "3C", "4C")]
    for sprite in sprites:
        table.add(sprite)
    before = list(table)
    target = before[2]
    index = table.raise_card(target.card)
    assert index == 2
    assert list(table)[0] is target
    table.restore(target.card, index)
    assert list(table) == before


def test_clear_empties_table():
    table = Table()
    table.add(_sprite("7D"))
    table.add(_sprite("KD"))
    table.clear()
    assert list(table) == []
    assert table.find(1, 1) is None