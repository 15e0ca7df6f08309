#!/usr/bin/env python3
"""
Example: Diatonic intervals.

This demonstrates binding templates to tonics, reading degree offsets and
transposing notes by scale degrees. Templates are written to a temporary
directory and read back through the loader.

Usage:
    python examples/diatonic_intervals.py
"""

import tempfile
from pathlib import Path

from diatonic_scale import (
    Note,
    NoteNotInScaleError,
    NotInScale,
    PitchClass,
    Scale,
    ScaleSummary,
    ScaleTemplate,
    TemplateLoader,
)


def main() -> None:
    """Demonstrate scale-degree arithmetic."""
    print("Diatonic Scale Demo")
    print("=" * 40)
    print()

    with tempfile.TemporaryDirectory() as tmp:
        loader = TemplateLoader(base_path=Path(tmp))

        # Save a couple of templates, then load them back
        loader.save(ScaleTemplate.from_offsets((0, 2, 4, 5, 7, 9, 11), "maj"), "major")
        loader.save(ScaleTemplate((2, 1, 2, 2, 1, 2, 2), "m"), "minor", description="aeolian")

        major = loader.load("major")
        minor = loader.load("minor")

    c_major = Scale(PitchClass.C, major)
    g_major = Scale(PitchClass.G, major)
    d_minor = Scale(PitchClass.D, minor)

    print("Scales:")
    for scale in (c_major, g_major, d_minor):
        summary = ScaleSummary.from_scale(scale)
        pitches = " ".join(PitchClass(p).spell() for p in summary.pattern)
        print(f"  {summary.name}: {pitches}  offsets={summary.offsets}")
    print()

    # Degree offsets keep climbing past the octave
    print(f"{c_major.name} offsets for degrees 0-9:")
    print(f"  {[c_major.note_offset(n) for n in range(10)]}")
    print()

    # Walk a third up and down from E4
    e4 = Note(4, PitchClass.E)
    print(f"Intervals from E4 in {c_major.name}:")
    for degrees in (-3, -1, 0, 1, 2, 5, 7):
        result = c_major.interval(e4, degrees)
        print(f"  {degrees:+d} degrees -> {result.pitch.spell()}{result.octave}")
    print()

    # Chromatic notes are reported, not guessed
    lookup = c_major.find(PitchClass.Fs)
    if isinstance(lookup, NotInScale):
        print(f"F# is not in {lookup.scale_name}")
    try:
        c_major.interval(Note(4, PitchClass.Fs), 1)
    except NoteNotInScaleError as e:
        print(f"  interval failed: {e}")


if __name__ == "__main__":
    main()
