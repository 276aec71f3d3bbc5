"""Line-based command protocol helpers shared by server and clients."""

from __future__ import annotations

import codecs
import re
from dataclasses import dataclass
from typing import Hashable, Mapping

PORT_MAX = 65535
FREE_SLOT = "<free>"

_LINE_SPLIT = re.compile(r"[\r\n]+")


@dataclass(frozen=True)
class Command:
    """A recognised command: its code and its fields, the name first."""

    code: Hashable
    args: tuple[str, ...]

    @property
    def name(self) -> str:
        return self.args[0]

    @property
    def params(self) -> tuple[str, ...]:
        return self.args[1:]


def _split_fields(line: str) -> list[str]:
    fields = line.split(":")
    if len(fields) > 1 and fields[-1] == "":
        fields.pop()
    return fields


class CommandReader:
    """Turns a stream of incoming data into known commands, keeping partial lines."""

    def __init__(self, commands: Mapping[str, Hashable]) -> None:
        self._commands = dict(commands)
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._pending = ""

    @property
    def pending(self) -> str:
        """Text received so far that does not yet form a whole line."""
        return self._pending

    def feed(self, data: bytes | str) -> list[Command]:
        """Add received data; return the commands from the lines it completes."""
        text = self._decoder.decode(data) if isinstance(data, bytes) else data
        if not text:
            return []
        buffered = self._pending + text
        pieces = _LINE_SPLIT.split(buffered)
        if text.endswith("\n"):
            self._pending = ""
        else:
            self._pending = pieces.pop()
        return [command for command in map(self._parse, pieces) if command is not None]

    def _parse(self, line: str) -> Command | None:
        if not line:
            return None
        fields = _split_fields(line)
        code = self._commands.get(fields[0])
        if code is None:
            return None
        return Command(code, tuple(fields))


def encode_line(text: str) -> bytes:
    """Encode one protocol line, newline included."""
    return (text + "\n").encode("utf-8")


def valid_name(name: str, max_length: int) -> str:
    """Return the cleaned player name, or raise ValueError if it cannot be used."""
    cleaned = name.strip()[:max_length]
    if not cleaned:
        raise ValueError("player name is empty")
    if ":" in cleaned:
        raise ValueError("player name may not contain ':'")
    return cleaned