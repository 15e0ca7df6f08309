"""
Note primitive - a pitch class placed in a specific octave.
"""

from __future__ import annotations

from dataclasses import dataclass

from diatonic_scale.constants import SEMITONES_PER_OCTAVE, ErrorMessages

from .pitch import PitchClass


@dataclass(frozen=True, order=True)
class Note:
    """
    A concrete pitch: octave plus pitch class.

    Octaves change at C, so Note(4, PitchClass.B) is directly below
    Note(5, PitchClass.C). Ordering follows pitch height.

    `pitch` is the note's pitch class (what a scale lookup reads) and
    `octave` its octave number; both are plain attributes.

    Examples:
        Note(4, PitchClass.E) = E4
        Note(5, 0) = C5
    """

    octave: int
    pitch: PitchClass

    def __post_init__(self) -> None:
        if not 0 <= self.pitch < SEMITONES_PER_OCTAVE:
            raise ValueError(ErrorMessages.INVALID_PITCH.format(pitch=self.pitch))
        # Accept plain ints for the pitch class
        object.__setattr__(self, "pitch", PitchClass(self.pitch))

    @property
    def semitones(self) -> int:
        """Absolute position in semitones, counted from C of octave 0."""
        return self.octave * SEMITONES_PER_OCTAVE + self.pitch.value

    @classmethod
    def from_semitones(cls, semitones: int) -> Note:
        """Build a note from an absolute semitone position (may be negative)."""
        octave, pitch = divmod(semitones, SEMITONES_PER_OCTAVE)
        return cls(octave, PitchClass(pitch))

    def __repr__(self) -> str:
        return f"Note({self.octave}, {self.pitch!r})"
