"""Card positions on the playing table: stacking, hit testing and card movement."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from sueca.cards import Card

STOP_PRECISION = 0.5


@dataclass
class Sprite:
    """A card placed on the table at an integer position."""

    card: Card
    x: int
    y: int
    width: int
    height: int
    turned: bool = False
    playable: bool = False

    def contains(self, x: int, y: int) -> bool:
        """Whether the point lies inside the card's rectangle."""
        return self.x <= x < self.x + self.width and self.y <= y < self.y + self.height


class CardMove:
    """Moves a sprite toward a destination one unit of distance per step."""

    def __init__(self, sprite: Sprite, destination: tuple[int, int]) -> None:
        self.sprite = sprite
        self.destination = (float(destination[0]), float(destination[1]))
        self.x = float(sprite.x)
        self.y = float(sprite.y)
        dx = self.destination[0] - self.x
        dy = self.destination[1] - self.y
        distance = math.hypot(dx, dy)
        if distance == 0:
            self._dx = self._dy = 0.0
        else:
            self._dx = dx / distance
            self._dy = dy / distance

    def finished(self) -> bool:
        """Whether the move is close enough to its destination to stop."""
        dx = self.destination[0] - self.x
        dy = self.destination[1] - self.y
        return dx * dx + dy * dy <= STOP_PRECISION

    def step(self) -> bool:
        """Advance one unit; return whether the sprite's on-screen position changed."""
        if self.finished():
            return False
        self.x += self._dx
        self.y += self._dy
        new_x, new_y = int(self.x), int(self.y)
        if (new_x, new_y) == (self.sprite.x, self.sprite.y):
            return False
        self.sprite.x, self.sprite.y = new_x, new_y
        return True


class Table:
    """Sprites in stacking order, topmost first."""

    def __init__(self) -> None:
        self._sprites: list[Sprite] = []

    def _index_of(self, card: Card) -> int:
        for index, sprite in enumerate(self._sprites):
            if sprite.card == card:
                return index
        raise KeyError(f"card not on the table: {card}")

    def add(self, sprite: Sprite) -> None:
        """Put a sprite on top of the stack."""
        self._sprites.insert(0, sprite)

    def remove(self, card: Card) -> Sprite:
        """Take a card off the table and return its sprite."""
        return self._sprites.pop(self._index_of(card))

    def find(self, x: int, y: int) -> tuple[Sprite, int] | None:
        """The topmost sprite under the point and its stacking index, if any."""
        for index, sprite in enumerate(self._sprites):
            if sprite.contains(x, y):
                return sprite, index
        return None

    def raise_card(self, card: Card) -> int:
        """Bring a card to the top; return the index it had before."""
        index = self._index_of(card)
        self._sprites.insert(0, self._sprites.pop(index))
        return index

    def restore(self, card: Card, index: int) -> None:
        """Put a card back at a given stacking index."""
        sprite = self.remove(card)
        self._sprites.insert(index, sprite)

    def clear(self) -> None:
        """Remove every sprite."""
        self._sprites.clear()

    def __iter__(self) -> Iterator[Sprite]:
        return iter(self._sprites)

    def __len__(self) -> int:
        return len(self._sprites)