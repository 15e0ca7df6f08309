"""
Tests for Scale.

Tests cover:
- Construction, naming and the tonic contract
- note_offset across octaves and below the tonic
- find / note_index lookups and the not-in-scale result
- Diatonic intervals
"""

import logging

import pytest

from diatonic_scale.core import Found, Note, NotInScale, PitchClass, Scale, ScaleTemplate
from diatonic_scale.errors import NoteNotInScaleError, ScaleError


class TestScaleConstruction:
    """Tests for building a Scale."""

    def test_pattern(self, c_major: Scale) -> None:
        """Pattern is the template transposed to the tonic."""
        assert c_major.tonic == PitchClass.C
        assert c_major.pattern == (0, 2, 4, 5, 7, 9, 11)
        assert all(isinstance(p, PitchClass) for p in c_major.pattern)

    def test_pattern_wraps(self, g_major: Scale) -> None:
        """Pattern wraps past B for higher tonics."""
        assert g_major.pattern == (7, 9, 11, 0, 2, 4, 6)

    def test_name(self, major: ScaleTemplate, minor: ScaleTemplate) -> None:
        """Name is the tonic symbol followed by the template name."""
        assert Scale(PitchClass.C, major).name == "Cmaj"
        assert Scale(PitchClass.G, major).name == "Gmaj"
        assert Scale(PitchClass.Cs, minor).name == "C#m"
        assert str(Scale(PitchClass.D, minor)) == "Dm"

    def test_int_tonic(self, major: ScaleTemplate) -> None:
        """Plain int tonics become PitchClass members."""
        scale = Scale(2, major)
        assert scale.tonic is PitchClass.D
        assert scale.name == "Dmaj"

    @pytest.mark.parametrize("tonic", [8, 11, PitchClass.A, -1])
    def test_tonic_out_of_range(self, major: ScaleTemplate, tonic: int) -> None:
        """Tonics outside 0-7 violate the constructor contract."""
        with pytest.raises(AssertionError):
            Scale(tonic, major)

    def test_highest_tonic(self, major: ScaleTemplate) -> None:
        """Tonic 7 is the highest accepted."""
        assert Scale(7, major).name == "Gmaj"

    def test_immutable(self, c_major: Scale) -> None:
        """Scales cannot be modified in place."""
        with pytest.raises(AttributeError):
            c_major.name = "other"  # type: ignore[misc]

    def test_template_not_kept(self, c_major: Scale) -> None:
        """The template is only used during construction."""
        assert "template" not in vars(c_major)

    def test_equality(self, major: ScaleTemplate) -> None:
        """Scales built from the same inputs are equal and hash alike."""
        assert Scale(0, major) == Scale(PitchClass.C, major)
        assert len({Scale(0, major), Scale(0, major), Scale(7, major)}) == 2

    def test_logs_construction(
        self, major: ScaleTemplate, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Construction is logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="diatonic_scale.core.scale"):
            Scale(PitchClass.E, major)
        assert "Built scale Emaj" in caplog.text


class TestNoteOffset:
    """Tests for Scale.note_offset."""

    def test_first_octave(self, c_major: Scale) -> None:
        """Offsets within the first octave follow the template."""
        assert [c_major.note_offset(n) for n in range(7)] == [0, 2, 4, 5, 7, 9, 11]

    def test_concrete_values(self, c_major: Scale) -> None:
        """Known C major offsets."""
        assert c_major.note_offset(0) == 0
        assert c_major.note_offset(2) == 4
        assert c_major.note_offset(7) == 12

    def test_wraps_upward(self, c_major: Scale) -> None:
        """Each 7 degrees adds an octave."""
        assert c_major.note_offset(9) == 16
        assert c_major.note_offset(14) == 24
        assert c_major.note_offset(20) == 35

    def test_relative_to_tonic(self, g_major: Scale) -> None:
        """Offsets are measured from the tonic, not from C."""
        assert [g_major.note_offset(n) for n in range(8)] == [0, 2, 4, 5, 7, 9, 11, 12]

    def test_negative_degrees(self, c_major: Scale) -> None:
        """Negative degrees wrap downward by whole octaves."""
        assert c_major.note_offset(-1) == -1
        assert c_major.note_offset(-2) == -3
        assert c_major.note_offset(-7) == -12
        assert c_major.note_offset(-8) == -13

    def test_minor_offsets(self, minor: ScaleTemplate) -> None:
        """Minor template offsets from a D tonic."""
        d_minor = Scale(PitchClass.D, minor)
        assert [d_minor.note_offset(n) for n in range(7)] == [0, 2, 3, 5, 7, 8, 10]


class TestNoteLookup:
    """Tests for find, note_index and membership."""

    def test_find_pitch_class(self, c_major: Scale) -> None:
        """Finding a member returns its index."""
        assert c_major.find(PitchClass.C) == Found(0)
        assert c_major.find(PitchClass.E) == Found(2)
        assert c_major.find(11) == Found(6)

    def test_find_note(self, c_major: Scale) -> None:
        """Notes are looked up by pitch class, ignoring octave."""
        assert c_major.find(Note(4, PitchClass.E)) == Found(2)
        assert c_major.find(Note(-2, PitchClass.E)) == Found(2)

    def test_find_missing(self, c_major: Scale) -> None:
        """Finding a non-member returns NotInScale."""
        result = c_major.find(PitchClass.Cs)
        assert isinstance(result, NotInScale)
        assert result.pitch == PitchClass.Cs
        assert result.scale_name == "Cmaj"

    def test_note_index(self, g_major: Scale) -> None:
        """note_index returns the degree index."""
        assert g_major.note_index(PitchClass.G) == 0
        assert g_major.note_index(PitchClass.C) == 3
        assert g_major.note_index(Note(5, PitchClass.Fs)) == 6

    def test_note_index_missing(self, c_major: Scale) -> None:
        """note_index raises a typed error for a non-member."""
        with pytest.raises(NoteNotInScaleError) as exc_info:
            c_major.note_index(PitchClass.Fs)
        assert exc_info.value.pitch == PitchClass.Fs
        assert exc_info.value.scale_name == "Cmaj"
        assert "not in scale 'Cmaj'" in str(exc_info.value)

    def test_missing_is_lookup_error(self, c_major: Scale) -> None:
        """The not-in-scale error is a LookupError and a ScaleError."""
        with pytest.raises(LookupError):
            c_major.note_index(Note(4, PitchClass.Gs))
        with pytest.raises(ScaleError):
            c_major.note_index(Note(4, PitchClass.Gs))

    def test_not_in_scale_error(self) -> None:
        """NotInScale builds the matching exception."""
        error = NotInScale(PitchClass.As, "Cmaj").error()
        assert isinstance(error, NoteNotInScaleError)
        assert error.pitch == PitchClass.As

    def test_contains(self, c_major: Scale) -> None:
        """Membership checks accept pitch classes and notes."""
        assert PitchClass.E in c_major
        assert Note(4, PitchClass.B) in c_major
        assert PitchClass.Cs not in c_major
        assert Note(4, PitchClass.Cs) not in c_major
        assert "E" not in c_major

    def test_contains_ignores_bool(self, major: ScaleTemplate) -> None:
        """Booleans are not treated as pitch classes."""
        d_major = Scale(PitchClass.D, major)
        assert PitchClass.Cs in d_major
        assert True not in d_major
        assert False not in Scale(PitchClass.C, major)


class TestInterval:
    """Tests for Scale.interval."""

    def test_step_up(self, c_major: Scale) -> None:
        """E4 up one degree is F4."""
        assert c_major.interval(Note(4, PitchClass.E), 1) == Note(4, PitchClass.F)

    def test_crosses_octave(self, c_major: Scale) -> None:
        """E4 up five degrees is C5."""
        assert c_major.interval(Note(4, PitchClass.E), 5) == Note(5, PitchClass.C)

    def test_unison(self, c_major: Scale) -> None:
        """Zero degrees returns the same note."""
        e4 = Note(4, PitchClass.E)
        result = c_major.interval(e4, 0)
        assert result == e4

    def test_octave(self, c_major: Scale) -> None:
        """Seven degrees is one octave."""
        assert c_major.interval(Note(4, PitchClass.E), 7) == Note(5, PitchClass.E)
        assert c_major.interval(Note(4, PitchClass.E), 14) == Note(6, PitchClass.E)

    def test_step_down(self, c_major: Scale) -> None:
        """C4 down one degree is B3."""
        assert c_major.interval(Note(4, PitchClass.C), -1) == Note(3, PitchClass.B)

    def test_large_descent(self, c_major: Scale) -> None:
        """Descending past several octaves."""
        assert c_major.interval(Note(4, PitchClass.C), -7) == Note(3, PitchClass.C)
        assert c_major.interval(Note(4, PitchClass.G), -11) == Note(3, PitchClass.C)

    def test_other_tonic(self, g_major: Scale) -> None:
        """Intervals in G major stay on G major pitches."""
        assert g_major.interval(Note(4, PitchClass.Fs), 1) == Note(4, PitchClass.G)
        assert g_major.interval(Note(4, PitchClass.B), 1) == Note(5, PitchClass.C)
        assert g_major.interval(Note(5, PitchClass.C), 1) == Note(5, PitchClass.D)
        assert g_major.interval(Note(4, PitchClass.G), 2) == Note(4, PitchClass.B)

    def test_other_tonic_unison(self, g_major: Scale) -> None:
        """Pitch classes below the tonic keep their octave on a unison."""
        c5 = Note(5, PitchClass.C)
        assert g_major.interval(c5, 0) == c5

    def test_input_unchanged(self, c_major: Scale) -> None:
        """The starting note is not modified."""
        e4 = Note(4, PitchClass.E)
        c_major.interval(e4, 3)
        assert e4 == Note(4, PitchClass.E)

    def test_note_not_in_scale(self, c_major: Scale) -> None:
        """Chromatic starting notes propagate the lookup failure."""
        with pytest.raises(NoteNotInScaleError):
            c_major.interval(Note(4, PitchClass.Ds), 1)
