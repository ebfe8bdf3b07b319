from __future__ import annotations

from collections.abc import Iterable

VALUES = ("Ace", "Two", "Three", "Four", "Five")
SUITS = ("Spades", "Clubs", "Hearts", "Diamonds")  # 花色顺序即发牌顺序

DECK_SIZE = len(VALUES) * len(SUITS)


def format_card(value: str, suit: str) -> str:
    return f"{value} of {suit}"


def create_deck() -> list[str]:
    """Fresh deck, suit-major: every value of Spades first, then Clubs, ..."""
    return [format_card(value, suit) for suit in SUITS for value in VALUES]


def contains(deck: Iterable[str], card: str) -> bool:
    return card in deck


__all__ = ["VALUES", "SUITS", "DECK_SIZE", "format_card", "create_deck", "contains"]
