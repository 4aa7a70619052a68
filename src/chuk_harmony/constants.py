"""
Constants for the harmony system.

No magic numbers - tuning references, spelling tables and messages live here.
"""

from typing import Final

# Step number of the tuning reference (A4 in MIDI numbering)
REFERENCE_STEP: Final[int] = 69

# Default concert pitch in Hz
DEFAULT_CONCERT_PITCH: Final[float] = 440.0

# Environment variable that overrides the default concert pitch
CONCERT_PITCH_ENV: Final[str] = "CHUK_HARMONY_CONCERT_PITCH"

SEMITONES_PER_OCTAVE: Final[int] = 12

# Display names (sharps, except the conventional E-flat and B-flat)
DISPLAY_NAMES: Final[tuple[str, ...]] = (
    "C",
    "C♯",
    "D",
    "E♭",
    "E",
    "F",
    "F♯",
    "G",
    "G♯",
    "A",
    "B♭",
    "B",
)

SHARP_NAMES: Final[tuple[str, ...]] = (
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
FLAT_NAMES: Final[tuple[str, ...]] = (
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
)


class ErrorMessages:
    """Standardized error messages."""

    PITCH_CLASS_OUT_OF_RANGE = "Pitch class index must be 0-11, got {index}."
    UNKNOWN_PITCH_CLASS = "Unknown pitch class: '{name}'."
    UNKNOWN_PITCH = "Unknown pitch: '{name}'. Expected a name like 'C4' or 'F♯-1'."
    EMPTY_INTERVALS = "A scale needs at least one interval."
    EMPTY_CHORD = "A chord needs at least one tone."
    INVALID_INTERVAL = "Scale intervals must be positive, got {interval}."
    INVALID_INVERSION = "Inversion must be 0-{max_inversion} for a {size}-note chord, got {inversion}."
    NEGATIVE_INDEX = "Chord indices must be >= 0, got {index}."
    INDEX_OUT_OF_RANGE = "Index {index} is out of range for a {size}-pitch set."
    DEGREE_OUT_OF_RANGE = "Scale degree must be >= 1, got {degree}."
    EMPTY_SCALE = "Cannot resolve degree {degree}: the scale produced no pitches."
