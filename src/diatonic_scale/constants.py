"""
Constants for scale arithmetic.

No magic numbers - the octave size, the diatonic scale length and the
accepted tonic range live here.
"""

from typing import Literal

# Semitones per octave (number of distinct pitch classes)
SEMITONES_PER_OCTAVE = 12

# Number of degrees in a diatonic scale pattern
DEGREES_PER_SCALE = 7

# Tonics are accepted in [0, MAX_TONIC)
MAX_TONIC = 8

# Schema versions - frozen for v1
SchemaVersion = Literal["scale-template/v1"]

TEMPLATE_SCHEMA: SchemaVersion = "scale-template/v1"


class ErrorMessages:
    """Standardized error messages."""

    INVALID_TONIC = "Tonic must be between 0 and {max_tonic} (exclusive), got {tonic}."
    NOTE_NOT_IN_SCALE = "Pitch class {pitch} is not in scale '{scale}'."
    INVALID_PITCH = "Pitch class must be between 0 and 11, got {pitch}."
    WRONG_STEP_COUNT = "Scale template needs {expected} steps, got {count}."
    NON_INTEGER_STEPS = "Scale template steps must be a list of integers, got {steps!r}."
    NON_POSITIVE_STEP = "Scale template steps must be positive, got {steps}."
    STEPS_NOT_OCTAVE = "Scale template steps must sum to 12 semitones, got {total}."
    NON_INTEGER_OFFSETS = "Scale template offsets must be a list of integers, got {offsets!r}."
    OFFSETS_NOT_ASCENDING = (
        "Scale template offsets must start at 0 and ascend below 12, got {offsets}."
    )
    TEMPLATE_NOT_FOUND = "Scale template file not found: {path}"
    TEMPLATE_UNREADABLE = "Could not parse scale template file {path}: {reason}"
    TEMPLATE_MISSING_PATTERN = "Scale template '{name}' must define either 'steps' or 'offsets'."
    TEMPLATE_BOTH_PATTERNS = "Scale template '{name}' must define only one of 'steps' or 'offsets'."
