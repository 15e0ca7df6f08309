"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
from pathlib import Path

import pytest
from hypothesis import settings

from diatonic_scale.core import PitchClass, Scale, ScaleTemplate

settings.register_profile("fast", max_examples=50)
if os.environ.get("HYPO_SLOW") != "1":
    settings.load_profile("fast")


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def major() -> ScaleTemplate:
    """Major (ionian) template."""
    return ScaleTemplate.from_offsets((0, 2, 4, 5, 7, 9, 11), "maj")


@pytest.fixture
def minor() -> ScaleTemplate:
    """Natural minor (aeolian) template."""
    return ScaleTemplate((2, 1, 2, 2, 1, 2, 2), "m")


@pytest.fixture
def c_major(major: ScaleTemplate) -> Scale:
    """C major scale."""
    return Scale(PitchClass.C, major)


@pytest.fixture
def g_major(major: ScaleTemplate) -> Scale:
    """G major scale (tonic above most of its pitch classes)."""
    return Scale(PitchClass.G, major)
