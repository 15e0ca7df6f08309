"""
Diatonic scale arithmetic.

Bind a scale template to a tonic, then look notes up by scale degree and
transpose them by diatonic intervals.
"""

from diatonic_scale.core import (
    NOTE_SYMBOLS,
    Found,
    Note,
    NoteLookup,
    NotInScale,
    PitchClass,
    Scale,
    ScaleTemplate,
)
from diatonic_scale.errors import NoteNotInScaleError, ScaleError, TemplateError
from diatonic_scale.models import ScaleSummary, ScaleTemplateDefinition
from diatonic_scale.templates import TemplateLoader

__all__ = [
    # Core
    "NOTE_SYMBOLS",
    "PitchClass",
    "Note",
    "ScaleTemplate",
    "Scale",
    "Found",
    "NotInScale",
    "NoteLookup",
    # Errors
    "ScaleError",
    "NoteNotInScaleError",
    "TemplateError",
    # Models
    "ScaleTemplateDefinition",
    "ScaleSummary",
    # Templates
    "TemplateLoader",
]
