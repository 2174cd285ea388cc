"""
Engine configuration.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class EngineConfig:
    """Configuration for the engine front ends (game session, text protocol).

    The search itself takes plain arguments; this dataclass gathers the
    values the front ends pass to it along with logging settings.
    """

    depth: int = 3
    """How many plies the engine looks ahead"""

    move_cache_path: Optional[Path] = None
    """File backing the position -> move store (None disables the store)"""

    score_cache_path: Optional[Path] = None
    """File backing the position -> score store (None disables the store)"""

    log_dir: Path = Path.home() / ".pawnstorm"
    """Directory for the protocol driver's log file"""

    debug: bool = False
    """Log at DEBUG level instead of INFO"""

    name: str = "Pawnstorm"
    author: str = "Pawnstorm developers"

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.log_dir = Path(self.log_dir)
        if self.move_cache_path is not None:
            self.move_cache_path = Path(self.move_cache_path)
        if self.score_cache_path is not None:
            self.score_cache_path = Path(self.score_cache_path)

        if self.depth < 1:
            raise ValueError(f"depth must be at least 1, got {self.depth}")

    @property
    def log_file(self) -> Path:
        return self.log_dir / "engine.log"
