"""Cards, rules and scoring, table layout, chat and text protocol for the card game Sueca."""

__version__ = "0.1.0"
__all__ = ["cards", "chat", "game", "netcommon", "protocol", "table"]