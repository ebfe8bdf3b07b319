"""Persist decks to local files.

The on-disk blob is a NumPy ``.npz`` archive with two arrays: ``data`` holds
the UTF-8 bytes of every card back to back as ``uint8`` and ``lengths`` holds
the byte length of each card as ``int64``. Nothing in it is pickled. It is
private to this package: ``save`` writes it and ``load`` reads it back.
"""

from __future__ import annotations

import io
import logging
import os
import zipfile
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

import numpy as np

__all__ = [
    "DeckFormatError",
    "Loaded",
    "NotFound",
    "LoadResult",
    "save",
    "load",
]

_LOG = logging.getLogger(__name__)
_NPZ_MAGIC = b"PK\x03\x04"
# np.load / NpzFile 在坏文件上可能抛出的异常
_LOAD_ERRORS = (ValueError, OSError, EOFError, KeyError, zipfile.BadZipFile)


class DeckFormatError(RuntimeError):
    """Raised when a file exists but does not hold a saved deck."""


@dataclass(frozen=True)
class Loaded:
    deck: list[str]


@dataclass(frozen=True)
class NotFound:
    filename: str
    reason: str


LoadResult = Loaded | NotFound


def _encode(deck: Sequence[str]) -> bytes:
    encoded = [card.encode("utf-8") for card in deck]
    data = np.frombuffer(b"".join(encoded), dtype=np.uint8)
    lengths = np.array([len(b) for b in encoded], dtype=np.int64)
    buf = io.BytesIO()
    np.savez(buf, data=data, lengths=lengths)
    return buf.getvalue()


def _decode(blob: bytes, source: str) -> list[str]:
    if not blob.startswith(_NPZ_MAGIC):
        raise DeckFormatError(f"Not a saved deck: {source}")
    try:
        with np.load(io.BytesIO(blob), allow_pickle=False) as payload:
            data = payload["data"]
            lengths = payload["lengths"]
    except _LOAD_ERRORS as e:
        raise DeckFormatError(f"Corrupt deck file {source}: {e}") from e
    if data.dtype != np.uint8 or data.ndim != 1:
        raise DeckFormatError(f"Bad card data in {source}: {data.dtype} {data.shape}")
    if lengths.dtype.kind not in "iu" or lengths.ndim != 1:
        raise DeckFormatError(f"Bad card lengths in {source}: {lengths.dtype} {lengths.shape}")
    if (lengths < 0).any() or int(lengths.sum()) != data.size:
        raise DeckFormatError(f"Card lengths do not match data in {source}")

    raw = data.tobytes()
    cards: list[str] = []
    pos = 0
    try:
        for n in lengths.tolist():
            cards.append(raw[pos : pos + n].decode("utf-8"))
            pos += n
    except UnicodeDecodeError as e:
        raise DeckFormatError(f"Card is not valid UTF-8 in {source}: {e}") from e
    return cards


def save(deck: Sequence[str], filename: str | os.PathLike[str]) -> None:
    """Write ``deck`` to ``filename``, replacing any existing file.

    Write failures (missing directory, permissions, full disk) propagate as
    ``OSError``.
    """
    path = Path(filename)
    blob = _encode(deck)
    try:
        with path.open("wb") as fh:
            fh.write(blob)
    except OSError as e:
        _LOG.error("Failed to save deck to %s: %s", path, e, exc_info=True)
        raise
    _LOG.debug("Saved deck to %s (%d cards)", path, len(deck))


def load(filename: str | os.PathLike[str]) -> LoadResult:
    """Read a deck written by :func:`save`.

    Returns ``Loaded`` on success and ``NotFound`` when the file is missing
    or cannot be read. A readable file that is not a saved deck raises
    ``DeckFormatError``.
    """
    path = Path(filename)
    try:
        with path.open("rb") as fh:
            blob = fh.read()
    except OSError as e:
        _LOG.info("Deck file not loaded %s: %s", path, e)
        return NotFound(filename=str(path), reason=e.strerror or str(e))
    deck = _decode(blob, str(path))
    _LOG.debug("Loaded deck from %s (%d cards)", path, len(deck))
    return Loaded(deck=deck)
