# sueca

A pure-Python engine for **Sueca**, the Portuguese four-player trick-taking
card game. It is played with a 40-card deck that has no eights, nines or tens,
by two teams of two partners. The package has no dependencies outside the
standard library.

## Modules

### `sueca.cards`

- `Rank`: an `IntEnum` ordered from weakest to strongest (`TWO` … `SIX`,
  `QUEEN`, `JACK`, `KING`, `SEVEN`, `ACE`). Each rank has `label`, `short` and
  `points` properties.
- `Suit`: `CLUBS`, `DIAMONDS`, `SPADES`, `HEARTS`, each with `label` and `short`.
- `Card`: a frozen dataclass of `rank` and `suit`. `name()` gives a name such
  as `"Ace of Hearts"`, `short()` gives a code such as `"AH"` (also what
  `str()` returns), and `points()` gives the card's value.
- `parse_card(text)` turns a short code such as `"QS"` into a `Card`. It raises
  `ValueError` for anything else.
- `Deck`: the 40 cards in a mutable order. It supports `len()`, iteration and
  indexing. `shuffle(rng=None)` makes 40 random pair swaps and takes an
  optional `random.Random`. `find(short)` looks a card up by its code and
  raises `KeyError` if there is none.

### `sueca.game`

- `PlayerRing`: players seated in a circle, with a current seat. It has
  `current()`, `select(player)`, `move_to(index)`, `advance()`, indexing by
  offset from the current seat, iteration starting from the current player,
  `replace(old, new)` and `copy()`.
- `trick_winner(played, trump_suit)`: the index of the winning card in a trick.
- `MoveStatus`: `OK`, `TURN`, `INVALID` and `DELAYED`.
- `MatchScore.settle_round(points1, points2, captured1, captured2)` records a
  finished round and returns a `RoundResult` (`winner` is 0, 1 or `None`, plus
  `games`, `points` and `labels`). A win is worth 1 game, 2 when the margin is
  over 60 points, and 4 when the winners captured all 40 cards. A tie scores
  nothing and doubles the value of the next decided round.
- `Game(players, rng=None)`: a match between four distinct players. Seats 0
  and 2 play against seats 1 and 3.
  - `new_round()` shuffles, deals ten cards each, turns up the trump (`trump`,
    `trump_owner`) and points `players` at the first player to lead.
  - `hand(player)` returns the cards the player holds.
  - `is_valid_move(player, card)` checks that the player holds the card and
    follows suit when able.
  - `play(player, card)` returns a `MoveStatus`.
  - `end_trick()` gives a complete trick to its winner and returns that
    player. After the tenth trick it settles the round into `score` and
    `last_result`, then deals a new round.
  - `replace_player(old, new)` seats a new player in place of an old one,
    along with the hand and any cards already played.

### `sueca.netcommon`

A line-based text protocol whose fields are separated by `:`.

- `CommandReader(commands)` maps command names to codes. `feed(data)` takes
  `bytes` or `str` and returns the list of `Command`s completed by that data.
  Partial lines are kept in `pending`, and unknown commands are dropped.
- `Command` has `code`, `args` (the name first), `name` and `params`.
- `encode_line(text)` returns UTF-8 bytes ending in a newline.
- `valid_name(name, max_length)` returns the trimmed, truncated name. It raises
  `ValueError` if the name is empty or contains `:`.
- Constants: `PORT_MAX`, `FREE_SLOT`.

### `sueca.protocol`

Builders for the lines a host sends to remote players: `game_message`,
`round_message`, `turn_message`, `play_message`, `winner_message`,
`your_turn_message` and `name_message`.

### `sueca.chat`

- `ChatLog` collects messages through `write(message)` and
  `say(who, what)`, which writes `"who: what"`. `text()` returns the
  transcript, one message per line.
- `clean_message(text)` trims surrounding whitespace.

### `sueca.table`

A layout model for cards on a table.

- `Sprite` is a placed card with position, size and `turned` and `playable`
  flags. `contains(x, y)` is a hit test.
- `Table` keeps sprites in stacking order, topmost first, through
  `add`, `remove`, `find(x, y)`, `raise_card`, `restore`, `clear` and
  iteration.
- `CardMove(sprite, destination)` moves a sprite one unit of distance per
  `step()` until `finished()`.

## Card values

| Rank   | Ace | Seven | King | Jack | Queen | 6–2 |
|--------|-----|-------|------|------|-------|-----|
| Points | 11  | 10    | 4    | 3    | 2     | 0   |

The deck holds 120 points.

## Example

```python
import random
from sueca.game import Game, MoveStatus

game = Game(["Ana", "Bruno", "Carla", "Duarte"], random.Random(7))
game.new_round()
print("Trump:", game.trump.name())

for _ in range(4):
    player = game.players.current()
    card = next(c for c in game.hand(player) if game.is_valid_move(player, c))
    assert game.play(player, card) is MoveStatus.OK

print("Trick won by", game.end_trick())
```

## What the package does not do

This is a library only. It has no command to run, no graphical table and no
computer opponents; the caller chooses every card. It opens no sockets and
runs no server. `netcommon` and `protocol` only parse and build the text
lines, and moving them over a network is left to the caller.

## Running the tests

```
pip install -e .[test]
pytest
```