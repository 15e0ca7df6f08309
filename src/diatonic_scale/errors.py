"""
Exceptions raised by the scale library.

Programming-contract violations (such as an out-of-range tonic) are
assertions, not members of this hierarchy.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from diatonic_scale.constants import ErrorMessages

if TYPE_CHECKING:
    from diatonic_scale.core.pitch import PitchClass


class ScaleError(Exception):
    """Base class for recoverable scale errors."""


class NoteNotInScaleError(ScaleError, LookupError):
    """A pitch class was looked up in a scale that does not contain it."""

    def __init__(self, pitch: PitchClass | int, scale_name: str) -> None:
        self.pitch = pitch
        self.scale_name = scale_name
        super().__init__(ErrorMessages.NOTE_NOT_IN_SCALE.format(pitch=int(pitch), scale=scale_name))


class TemplateError(ScaleError, ValueError):
    """A scale template is malformed or could not be loaded."""
