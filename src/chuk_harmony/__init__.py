"""
chuk-harmony - a typed algebra of pitch and harmony.

Pitch classes, continuous pitches tuned from a concert-pitch reference,
ordered pitch sets, and composable harmonizers (scales, chords and
functional harmony) that expand a root pitch into pitch sets.
"""

from chuk_harmony.core import (
    Addition,
    Chord,
    ChordHarmonizer,
    DegreeChord,
    HarmonicFunction,
    Harmonizer,
    HarmonizerCatalog,
    IntervalChord,
    Major,
    Minor,
    Pitch,
    PitchClass,
    PitchSet,
    Scale,
    ScaleHarmonizer,
    TuningContext,
    get_concert_pitch,
    get_tuning,
    progression,
    retuned,
    set_concert_pitch,
)
from chuk_harmony.errors import (
    DegreeOutOfRangeError,
    EmptyIntervalListError,
    HarmonyError,
    IndexOutOfRangeError,
    InvalidIntervalError,
    InvalidInversionError,
    OutOfRangeError,
)

__version__ = "0.1.0"

__all__ = [
    "Addition",
    "Chord",
    "ChordHarmonizer",
    "DegreeChord",
    "HarmonicFunction",
    "Harmonizer",
    "HarmonizerCatalog",
    "IntervalChord",
    "Major",
    "Minor",
    "Pitch",
    "PitchClass",
    "PitchSet",
    "Scale",
    "ScaleHarmonizer",
    "TuningContext",
    "get_concert_pitch",
    "get_tuning",
    "progression",
    "retuned",
    "set_concert_pitch",
    # Errors
    "HarmonyError",
    "OutOfRangeError",
    "EmptyIntervalListError",
    "InvalidIntervalError",
    "InvalidInversionError",
    "IndexOutOfRangeError",
    "DegreeOutOfRangeError",
]
