from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from .cards import create_deck
from .rng import RNG

_LOG = logging.getLogger(__name__)


def shuffle(deck: Sequence[str] = (), *, rng: random.Random | None = None) -> list[str]:
    """Return a shuffled copy of ``deck``; the input is left untouched.

    Without ``rng`` a generator is built from the environment seed
    (``CARDS_SEED``), so runs are random unless that is set.
    """
    rnd = rng if rng is not None else RNG.from_env().create()
    out = list(deck)
    rnd.shuffle(out)
    return out


def deal(deck: Sequence[str], hand_size: int) -> tuple[list[str], list[str]]:
    """Split ``deck`` into ``(hand, rest)``.

    A ``hand_size`` beyond the deck clamps to the whole deck; negative sizes
    raise ``ValueError``.
    """
    if hand_size < 0:
        raise ValueError(f"hand_size must be >= 0, got {hand_size}")
    cards = list(deck)
    return cards[:hand_size], cards[hand_size:]


def create_hand(
    hand_size: int, *, rng: random.Random | None = None
) -> tuple[list[str], list[str]]:
    hand, rest = deal(shuffle(create_deck(), rng=rng), hand_size)
    _LOG.debug("create_hand: hand=%d rest=%d", len(hand), len(rest))
    return hand, rest


__all__ = ["shuffle", "deal", "create_hand"]
