"""
Scale models - serializable snapshot of a bound scale.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from diatonic_scale.constants import DEGREES_PER_SCALE
from diatonic_scale.core.scale import Scale


class ScaleSummary(BaseModel):
    """Lightweight description of a scale for display or export."""

    name: str
    tonic: int = Field(..., ge=0, le=11)
    pattern: list[int] = Field(..., description="Pitch classes, tonic first")
    offsets: list[int] = Field(..., description="Semitones above the tonic for each degree")

    model_config = {"frozen": True}

    @classmethod
    def from_scale(cls, scale: Scale) -> ScaleSummary:
        """Create a summary from a scale."""
        return cls(
            name=scale.name,
            tonic=int(scale.tonic),
            pattern=[int(p) for p in scale.pattern],
            offsets=[scale.note_offset(n) for n in range(DEGREES_PER_SCALE)],
        )
