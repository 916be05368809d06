"""Configuration dataclasses for rendering and the puzzle server."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderConfig:
    """Symbols used by the debug text rendering.

    Supports JSON serialization so a display can ship its own symbol set.
    """

    wall: str = "W"
    exit: str = "E"
    lizard: str = "L"
    empty: str = "."

    def __post_init__(self) -> None:
        for name, symbol in self.to_dict().items():
            if len(symbol) != 1:
                raise ValueError(
                    f"Render symbol '{name}' must be a single character."
                )

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Render config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> RenderConfig:
        """Load config from a JSON file."""
        return cls(**json.loads(Path(path).read_text()))


@dataclass(frozen=True)
class ServerConfig:
    """Bounds on the in-memory puzzle session registry."""

    max_sessions: int = 1_000
    max_solved_sessions: int = 100

    def __post_init__(self) -> None:
        if self.max_sessions < 1:
            raise ValueError("max_sessions must be at least 1.")
        if self.max_solved_sessions < 0:
            raise ValueError("max_solved_sessions must be >= 0.")
