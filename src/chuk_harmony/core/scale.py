"""
Scale harmonizers - interval patterns walked up from a root.

A scale is defined by the intervals from one degree to the next (not
cumulative). A major scale is W W H W W W H (2 2 1 2 2 2 1 semitones); the
last interval returns to the octave and is not emitted, so a seven-interval
pattern yields seven pitches. Intervals may be fractional for microtonal scales.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import ClassVar

from chuk_harmony.constants import ErrorMessages
from chuk_harmony.core.harmonizer import Harmonizer, HarmonizerCatalog
from chuk_harmony.core.pitch import Pitch
from chuk_harmony.core.pitch_set import PitchSet
from chuk_harmony.errors import EmptyIntervalListError, InvalidIntervalError


@dataclass(frozen=True)
class ScaleHarmonizer(Harmonizer):
    """
    A scale defined by its interval pattern.

    Immutable and hashable.
    """

    intervals: tuple[float, ...]
    name: str = ""

    def __post_init__(self) -> None:
        intervals = tuple(self.intervals)
        if not intervals:
            raise EmptyIntervalListError(ErrorMessages.EMPTY_INTERVALS)
        for interval in intervals:
            if interval <= 0:
                raise InvalidIntervalError(ErrorMessages.INVALID_INTERVAL.format(interval=interval))
        object.__setattr__(self, "intervals", intervals)

    @property
    def size(self) -> int:
        """Number of pitches per octave."""
        return len(self.intervals)

    @property
    def span(self) -> float:
        """Total semitones covered by the pattern (12 for octave-repeating scales)."""
        return sum(self.intervals)

    def __call__(self, root: Pitch) -> PitchSet:
        pitches = [root]
        current = root
        for interval in self.intervals[:-1]:  # Last interval returns to the octave
            current = current.transpose(interval)
            pitches.append(current)
        return PitchSet(pitches)

    def __str__(self) -> str:
        return self.name or f"ScaleHarmonizer({self.intervals})"


class Scale(HarmonizerCatalog):
    """
    Common scale harmonizers.

    Examples:
        Scale.MAJOR(Pitch(69)) = [A4, B4, C♯5, D5, E5, F♯5, G♯5]
        Scale.create([2.4, 2.4, 2.4, 2.4, 2.4]) = equidistant pentatonic
    """

    CHROMATIC: ClassVar[ScaleHarmonizer]
    MAJOR: ClassVar[ScaleHarmonizer]
    MINOR: ClassVar[ScaleHarmonizer]
    HARMONIC_MINOR: ClassVar[ScaleHarmonizer]
    MELODIC_MINOR: ClassVar[ScaleHarmonizer]
    IONIAN: ClassVar[ScaleHarmonizer]
    DORIAN: ClassVar[ScaleHarmonizer]
    PHRYGIAN: ClassVar[ScaleHarmonizer]
    LYDIAN: ClassVar[ScaleHarmonizer]
    MIXOLYDIAN: ClassVar[ScaleHarmonizer]
    AEOLIAN: ClassVar[ScaleHarmonizer]
    LOCRIAN: ClassVar[ScaleHarmonizer]
    WHOLE_TONE: ClassVar[ScaleHarmonizer]
    OCTATONIC_1: ClassVar[ScaleHarmonizer]
    OCTATONIC_2: ClassVar[ScaleHarmonizer]
    MAJOR_PENTATONIC: ClassVar[ScaleHarmonizer]
    MINOR_PENTATONIC: ClassVar[ScaleHarmonizer]
    BLUES: ClassVar[ScaleHarmonizer]

    @staticmethod
    def create(intervals: Sequence[float], name: str = "") -> ScaleHarmonizer:
        """
        Create a custom scale from semitone intervals.

        Args:
            intervals: Semitones from each degree to the next, including the
                step back to the octave (a single interval is a one-pitch scale)
            name: Optional display name

        Raises:
            EmptyIntervalListError: if no intervals are given
            InvalidIntervalError: if an interval is zero or negative
        """
        return ScaleHarmonizer(tuple(intervals), name)


Scale.CHROMATIC = Scale.create([1] * 12, "chromatic")
Scale.MAJOR = Scale.create([2, 2, 1, 2, 2, 2, 1], "major")
Scale.MINOR = Scale.create([2, 1, 2, 2, 1, 2, 2], "minor")
Scale.HARMONIC_MINOR = Scale.create([2, 1, 2, 2, 1, 3, 1], "harmonic minor")
Scale.MELODIC_MINOR = Scale.create([2, 1, 2, 2, 2, 2, 1], "melodic minor")
Scale.IONIAN = Scale.create([2, 2, 1, 2, 2, 2, 1], "ionian")
Scale.DORIAN = Scale.create([2, 1, 2, 2, 2, 1, 2], "dorian")
Scale.PHRYGIAN = Scale.create([1, 2, 2, 2, 1, 2, 2], "phrygian")
Scale.LYDIAN = Scale.create([2, 2, 2, 1, 2, 2, 1], "lydian")
Scale.MIXOLYDIAN = Scale.create([2, 2, 1, 2, 2, 1, 2], "mixolydian")
Scale.AEOLIAN = Scale.create([2, 1, 2, 2, 1, 2, 2], "aeolian")
Scale.LOCRIAN = Scale.create([1, 2, 2, 1, 2, 2, 2], "locrian")
Scale.WHOLE_TONE = Scale.create([2] * 6, "whole tone")
Scale.OCTATONIC_1 = Scale.create([1, 2] * 4, "octatonic (half-whole)")
Scale.OCTATONIC_2 = Scale.create([2, 1] * 4, "octatonic (whole-half)")
Scale.MAJOR_PENTATONIC = Scale.create([2, 2, 3, 2, 3], "major pentatonic")
Scale.MINOR_PENTATONIC = Scale.create([3, 2, 2, 3, 2], "minor pentatonic")
Scale.BLUES = Scale.create([3, 2, 1, 1, 3, 2], "blues")
