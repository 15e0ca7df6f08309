"""
Pitch primitives - PitchClass and the note-symbol table.

PitchClass represents the 12 chromatic pitches (octave-independent),
counted in semitones from C.
"""

from __future__ import annotations

from enum import IntEnum

from diatonic_scale.constants import SEMITONES_PER_OCTAVE

# Symbol for each pitch class, used when naming scales
NOTE_SYMBOLS: tuple[str, ...] = (
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
)


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic equivalents share the same value (C# == Db == 1).
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % SEMITONES_PER_OCTAVE)

    def semitones_to(self, other: PitchClass) -> int:
        """Ascending distance in semitones from this pitch class to another (0-11)."""
        return (other.value - self.value) % SEMITONES_PER_OCTAVE

    def spell(self) -> str:
        """Get the note symbol for this pitch class."""
        return NOTE_SYMBOLS[self.value]
