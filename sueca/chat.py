"""Chat transcript kept alongside a game."""

from __future__ import annotations


def clean_message(text: str) -> str:
    """Trim surrounding whitespace from a message about to be sent."""
    return text.strip()


class ChatLog:
    """An append-only chat transcript, one message per line."""

    def __init__(self) -> None:
        self._lines: list[str] = []

    def write(self, message: str) -> None:
        """Append a message as a new line."""
        self._lines.append(message)

    def say(self, who: str, what: str) -> None:
        """Append a message said by someone."""
        self.write(f"{who}: {what}")

    def text(self) -> str:
        """The whole transcript."""
        return "\n".join(self._lines)