"""Signal data models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Direction(int, Enum):
    """Trade direction."""

    LONG = 1
    SHORT = -1
    FLAT = 0


class Signal(BaseModel):
    """Directional opinion produced by an analyzer.

    ``weight`` is in the analyzer's own unit (price distance, volume or
    percent) and is not comparable across analyzers. ``kill`` is reserved for
    downstream risk logic and is never set by an analyzer.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    direction: Direction = Direction.FLAT
    weight: float = Field(default=0.0, ge=0)
    confidence: float = Field(default=0.0, ge=0, le=1)
    kill: bool = False

    @classmethod
    def neutral(cls) -> "Signal":
        """No opinion: FLAT, zero weight, zero confidence."""
        return cls(direction=Direction.FLAT, weight=0.0, confidence=0.0, kill=False)

    @property
    def is_neutral(self) -> bool:
        return self.direction == Direction.FLAT

    @property
    def score(self) -> float:
        """Signed confidence in [-1, 1]: 1 strong buy, -1 strong sell, 0 hold."""
        return self.direction.value * self.confidence
