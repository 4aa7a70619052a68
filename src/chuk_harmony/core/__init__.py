"""
Core harmony primitives.

The data algebra everything else composes on:
- TuningContext: Concert pitch reference for frequencies
- PitchClass: The 12 chromatic pitch classes (0-11)
- Pitch: A point on the continuous step-number line
- PitchSet: Ordered unique pitches with set algebra
- Harmonizer: The function type Pitch -> PitchSet
- Scale: Scale harmonizers and custom interval scales
- Chord: Chord harmonizers with inversions and additions
- HarmonicFunction, Major, Minor: Roman-numeral functional harmony
- progression: Many harmonizers applied to one root
"""

from chuk_harmony.core.chord import (
    Addition,
    Chord,
    ChordHarmonizer,
    DegreeChord,
    IntervalChord,
)
from chuk_harmony.core.harmonizer import Harmonizer, HarmonizerCatalog, progression
from chuk_harmony.core.harmony import HarmonicFunction, Major, Minor
from chuk_harmony.core.pitch import Pitch, PitchClass
from chuk_harmony.core.pitch_set import PitchSet
from chuk_harmony.core.scale import Scale, ScaleHarmonizer
from chuk_harmony.core.tuning import (
    TuningContext,
    get_concert_pitch,
    get_tuning,
    retuned,
    set_concert_pitch,
)

__all__ = [
    # Tuning
    "TuningContext",
    "get_tuning",
    "get_concert_pitch",
    "set_concert_pitch",
    "retuned",
    # Pitch
    "PitchClass",
    "Pitch",
    "PitchSet",
    # Harmonizers
    "Harmonizer",
    "HarmonizerCatalog",
    "progression",
    # Scale
    "Scale",
    "ScaleHarmonizer",
    # Chord
    "Addition",
    "Chord",
    "ChordHarmonizer",
    "IntervalChord",
    "DegreeChord",
    # Functional harmony
    "HarmonicFunction",
    "Major",
    "Minor",
]
