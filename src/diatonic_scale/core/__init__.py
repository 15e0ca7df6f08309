"""
Core scale primitives.

These are the value types the scale arithmetic composes on:
- PitchClass: The 12 chromatic pitch classes (0-11)
- Note: A pitch class in a specific octave
- ScaleTemplate: Named 7-step interval pattern
- Scale: Template bound to a tonic, with degree offsets and diatonic intervals
- Found / NotInScale: Typed result of looking a pitch up in a scale
"""

from diatonic_scale.core.note import Note
from diatonic_scale.core.pitch import NOTE_SYMBOLS, PitchClass
from diatonic_scale.core.scale import Found, NoteLookup, NotInScale, Scale
from diatonic_scale.core.template import ScaleTemplate

__all__ = [
    # Pitch
    "NOTE_SYMBOLS",
    "PitchClass",
    "Note",
    # Template
    "ScaleTemplate",
    # Scale
    "Scale",
    "Found",
    "NotInScale",
    "NoteLookup",
]
