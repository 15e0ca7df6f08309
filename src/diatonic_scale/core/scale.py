"""
Scale - a template bound to a tonic, with diatonic interval arithmetic.

Offsets, lookups and transpositions are all measured in scale degrees,
so transposing a note always lands on another member of the scale.
"""

from __future__ import annotations

import logging
from dataclasses import InitVar, dataclass, field

from diatonic_scale.constants import (
    DEGREES_PER_SCALE,
    MAX_TONIC,
    SEMITONES_PER_OCTAVE,
    ErrorMessages,
)
from diatonic_scale.errors import NoteNotInScaleError

from .note import Note
from .pitch import PitchClass
from .template import ScaleTemplate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Found:
    """Lookup result: the pitch sits at this 0-based degree index."""

    index: int


@dataclass(frozen=True)
class NotInScale:
    """Lookup result: the pitch is not a member of the scale."""

    pitch: PitchClass | int
    scale_name: str

    def error(self) -> NoteNotInScaleError:
        """Build the exception that reports this miss."""
        return NoteNotInScaleError(self.pitch, self.scale_name)


NoteLookup = Found | NotInScale


@dataclass(frozen=True)
class Scale:
    """
    A scale template applied to a tonic.

    The template is only read during construction; the scale keeps the
    transposed pattern and the derived name.

    Examples:
        Scale(PitchClass.C, major) - pattern C D E F G A B
        Scale(2, dorian) - pattern D E F G A B C
    """

    tonic: PitchClass
    template: InitVar[ScaleTemplate]
    pattern: tuple[PitchClass, ...] = field(init=False)
    name: str = field(init=False)

    def __post_init__(self, template: ScaleTemplate) -> None:
        assert 0 <= self.tonic < MAX_TONIC, ErrorMessages.INVALID_TONIC.format(
            max_tonic=MAX_TONIC, tonic=self.tonic
        )
        tonic = PitchClass(self.tonic)
        pattern = tuple(template.transpose(tonic))
        assert len(pattern) == DEGREES_PER_SCALE

        object.__setattr__(self, "tonic", tonic)
        object.__setattr__(self, "pattern", pattern)
        object.__setattr__(self, "name", tonic.spell() + template.name)
        logger.debug(f"Built scale {self.name} with pattern {[int(p) for p in pattern]}")

    def note_offset(self, n: int) -> int:
        """
        Semitones from the tonic up to the nth scale degree (0 = tonic).

        Degrees past 6 continue into higher octaves, each 7 degrees adding
        exactly 12 semitones. Negative degrees use floored division and
        wrap downward the same way, so note_offset(-1) is the leading tone
        one octave below.
        """
        octaves, degree = divmod(n, DEGREES_PER_SCALE)
        within_octave = (self.pattern[degree] - self.tonic) % SEMITONES_PER_OCTAVE
        return octaves * SEMITONES_PER_OCTAVE + within_octave

    def find(self, note: Note | PitchClass | int) -> NoteLookup:
        """
        Look up the degree index of a pitch class or note.

        Returns Found with the first matching index, or NotInScale if the
        pitch class is not a member of this scale.
        """
        pitch = note.pitch if isinstance(note, Note) else note
        for i, p in enumerate(self.pattern):
            if p == pitch:
                return Found(i)
        return NotInScale(pitch, self.name)

    def note_index(self, note: Note | PitchClass | int) -> int:
        """
        Get the 0-based degree index of a pitch class or note.

        Raises:
            NoteNotInScaleError: If the pitch class is not in the scale
        """
        result = self.find(note)
        if isinstance(result, NotInScale):
            raise result.error()
        return result.index

    def interval(self, note: Note, degrees: int) -> Note:
        """
        Move a note up or down by a number of scale degrees.

        Args:
            note: Starting note, which must belong to the scale
            degrees: Scale degrees to move (negative moves down)

        Returns:
            A new note on the scale

        Raises:
            NoteNotInScaleError: If the starting note is not in the scale
        """
        index = self.note_index(note)
        shift = self.note_offset(index + degrees) - self.note_offset(index)
        return Note.from_semitones(note.semitones + shift)

    def __contains__(self, note: object) -> bool:
        if isinstance(note, bool) or not isinstance(note, (Note, int)):
            return False
        return isinstance(self.find(note), Found)

    def __str__(self) -> str:
        return self.name
