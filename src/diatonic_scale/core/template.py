"""
Scale templates - named interval patterns that are not yet bound to a tonic.

A template is the shape of a scale (major, dorian, ...). Binding it to a
tonic produces a concrete Scale.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from itertools import accumulate

from diatonic_scale.constants import DEGREES_PER_SCALE, SEMITONES_PER_OCTAVE, ErrorMessages
from diatonic_scale.errors import TemplateError

from .pitch import PitchClass


@dataclass(frozen=True)
class ScaleTemplate:
    """
    A 7-note scale defined by its interval pattern.

    The steps are from one degree to the next (not cumulative), ending
    with the step back up to the octave. A major scale is:
    W W H W W W H (2 2 1 2 2 2 1 semitones)

    Immutable and hashable.
    """

    steps: tuple[int, ...]
    name: str = ""

    def __post_init__(self) -> None:
        try:
            steps = tuple(int(s) for s in self.steps)
        except (TypeError, ValueError) as e:
            raise TemplateError(ErrorMessages.NON_INTEGER_STEPS.format(steps=self.steps)) from e
        if len(steps) != DEGREES_PER_SCALE:
            raise TemplateError(
                ErrorMessages.WRONG_STEP_COUNT.format(expected=DEGREES_PER_SCALE, count=len(steps))
            )
        if any(s <= 0 for s in steps):
            raise TemplateError(ErrorMessages.NON_POSITIVE_STEP.format(steps=list(steps)))
        total = sum(steps)
        if total != SEMITONES_PER_OCTAVE:
            raise TemplateError(ErrorMessages.STEPS_NOT_OCTAVE.format(total=total))
        object.__setattr__(self, "steps", steps)

    @classmethod
    def from_offsets(cls, offsets: Sequence[int], name: str = "") -> ScaleTemplate:
        """
        Build a template from cumulative semitone offsets above the tonic.

        Args:
            offsets: 7 ascending offsets starting at 0, e.g. (0, 2, 4, 5, 7, 9, 11)
            name: Template name

        Returns:
            The equivalent step-based template
        """
        try:
            offsets = [int(o) for o in offsets]
        except (TypeError, ValueError) as e:
            raise TemplateError(ErrorMessages.NON_INTEGER_OFFSETS.format(offsets=offsets)) from e
        ascending = all(a < b for a, b in zip(offsets, offsets[1:]))
        if not offsets or offsets[0] != 0 or not ascending or offsets[-1] >= SEMITONES_PER_OCTAVE:
            raise TemplateError(ErrorMessages.OFFSETS_NOT_ASCENDING.format(offsets=offsets))
        steps = [b - a for a, b in zip(offsets, offsets[1:] + [SEMITONES_PER_OCTAVE])]
        return cls(tuple(steps), name)

    @property
    def offsets(self) -> tuple[int, ...]:
        """Semitones from the tonic to each degree, tonic first (7 values)."""
        return (0, *accumulate(self.steps[:-1]))

    def transpose(self, tonic: PitchClass | int) -> tuple[PitchClass, ...]:
        """
        Get the pitch classes of this scale built on a tonic.

        Returns 7 pitches in ascending degree order (the octave is not included).
        """
        root = PitchClass(tonic)
        return tuple(root.transpose(offset) for offset in self.offsets)

    def __str__(self) -> str:
        return self.name or f"ScaleTemplate({self.steps})"
