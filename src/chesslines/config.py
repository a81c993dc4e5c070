"""User-configurable settings for setting up a game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from random import Random


class Variant(Enum):
    """Starting-position family."""

    STANDARD = "standard"
    CHESS960 = "chess960"


@dataclass
class GameSettings:
    """All user-configurable game setup values."""

    variant: Variant = Variant.STANDARD

    # Chess960: explicit position id (0–959), else one is drawn from ``seed``
    chess960_id: int | None = None
    seed: int | None = None

    # Overrides the variant setup when given
    start_fen: str | None = None

    def rng(self) -> Random:
        """Random source for the setup; deterministic when ``seed`` is set."""
        return Random(self.seed)
