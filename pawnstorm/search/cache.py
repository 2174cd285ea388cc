"""
Position Store

A key-value cache from a board encoding (Board.to_key()) to a previously
computed result: the best move in a move store, the search score in a
score store. The search consults them only when passed in; by default no
store is used and every search runs in full.

Stores:
    - InMemoryPositionStore: plain dict, lives as long as the object
    - FilePositionStore: dict loaded once from a text file and appended to
      on every put()

File format (one record per line):
    line 1: key    (board encoding)
    line 2: value  (move or score encoding)
    line 3: key
    line 4: value
    ...

Move encoding: "(x,y) (x,y)" - origin then destination, see encode_move().
Score encoding: the number as text ("-11", "inf"), see encode_score().

I/O errors are logged and swallowed: a broken cache file must never stop a
search or a game.
"""

import logging
import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Tuple

from pawnstorm.board.coordinate import Coordinate

logger = logging.getLogger(__name__)

_MOVE_PATTERN = re.compile(r"^\((\d),(\d)\) \((\d),(\d)\)$")


def encode_move(origin: Coordinate, destination: Coordinate) -> str:
    return f"{origin} {destination}"


def decode_move(value: str) -> Tuple[Coordinate, Coordinate]:
    """
    Parse a move encoded by encode_move().

    Raises:
        ValueError: If the value is malformed or off the board
    """
    match = _MOVE_PATTERN.match(value.strip())
    if match is None:
        raise ValueError(f"Malformed move encoding: {value!r}")
    fx, fy, tx, ty = (int(group) for group in match.groups())
    return Coordinate(fx, fy), Coordinate(tx, ty)


def encode_score(score: float) -> str:
    """Text form of a search score; infinite scores become 'inf' / '-inf'."""
    return str(score)


def decode_score(value: str) -> float:
    """
    Parse a score encoded by encode_score().

    Raises:
        ValueError: If the value is not a number
    """
    return float(value.strip())


class PositionStore(ABC):
    """
    Abstract position -> value store.

    Attributes:
        hits: Successful lookups
        misses: Failed lookups
    """

    def __init__(self):
        self.hits = 0
        self.misses = 0

    @abstractmethod
    def _get(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def put(self, key: str, value: str):
        """Record `value` for position `key`, replacing any previous value."""
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    def get(self, key: str) -> Optional[str]:
        value = self._get(key)
        if value is None:
            self.misses += 1
        else:
            self.hits += 1
        return value

    def __contains__(self, key: str) -> bool:
        return self._get(key) is not None

    def get_stats(self) -> Dict[str, float]:
        """Get statistics about store usage."""
        total_lookups = self.hits + self.misses
        hit_rate = (self.hits / total_lookups * 100) if total_lookups > 0 else 0
        return {
            'entries': len(self),
            'hits': self.hits,
            'misses': self.misses,
            'hit_rate': hit_rate,
        }

    def __repr__(self) -> str:
        stats = self.get_stats()
        return (
            f"{self.__class__.__name__}(entries={stats['entries']}, "
            f"hit_rate={stats['hit_rate']:.1f}%)"
        )


class InMemoryPositionStore(PositionStore):
    """Dictionary-backed store."""

    def __init__(self):
        super().__init__()
        self.table: Dict[str, str] = {}

    def _get(self, key: str) -> Optional[str]:
        return self.table.get(key)

    def put(self, key: str, value: str):
        self.table[key] = value

    def clear(self):
        """Remove all entries and reset statistics."""
        self.table.clear()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self.table)


class FilePositionStore(InMemoryPositionStore):
    """
    Store persisted as alternating key / value lines in a text file.

    The file is read once at construction; a missing file is an empty store.
    """

    def __init__(self, path: Path):
        super().__init__()
        self.path = Path(path)
        self.load()

    def load(self):
        """Read key / value pairs from the file into memory."""
        if not self.path.exists():
            logger.debug(f"No position file at {self.path}, starting empty")
            return

        try:
            with open(self.path, "r", encoding="utf-8") as handle:
                lines = [line.rstrip("\n") for line in handle]
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Could not read position file {self.path}: {e}")
            return

        # A trailing key without a value is dropped
        for key, value in zip(lines[0::2], lines[1::2]):
            self.table[key] = value

        logger.info(f"Loaded {len(self.table)} positions from {self.path}")

    def put(self, key: str, value: str):
        super().put(key, value)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "a", encoding="utf-8") as handle:
                handle.write(f"{key}\n{value}\n")
        except OSError as e:
            logger.error(f"Could not write position file {self.path}: {e}")
