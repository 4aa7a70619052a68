"""
Functional harmony - scale-degree chords relative to a tonic.

A HarmonicFunction is a roman numeral: given a tonic, it finds a scale degree
and builds a chord there. Because the chord is itself any harmonizer, functions
nest: V7 of V is the dominant seventh function rooted on the fifth degree.

This is how theorists think about harmony:
- I, ii, iii, IV, V, vi, vii° in major
- i, ii°, III, iv, v, VI, VII in minor (V and vii° borrowed from harmonic minor)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from chuk_harmony.constants import ErrorMessages
from chuk_harmony.core.chord import Chord
from chuk_harmony.core.harmonizer import (
    Harmonizer,
    HarmonizerCatalog,
    extend_degree,
    period_of,
)
from chuk_harmony.core.pitch import Pitch
from chuk_harmony.core.pitch_set import PitchSet
from chuk_harmony.core.scale import Scale
from chuk_harmony.errors import DegreeOutOfRangeError


@dataclass(frozen=True)
class HarmonicFunction(Harmonizer):
    """
    A chord rooted on a scale degree of the tonic.

    Degree is 1-based (1 = tonic, 5 = dominant). Degrees past the end of the
    scale continue by the scale's span (an octave for ordinary scales), so
    degree 9 of a major scale is the second degree an octave up.

    Examples:
        HarmonicFunction(Scale.MAJOR, 5, Chord.MAJOR) = V
        HarmonicFunction(Scale.MAJOR, 5, Major.V7) = V7 of V
    """

    scale: Harmonizer
    degree: int
    chord: Harmonizer
    name: str = ""

    def __post_init__(self) -> None:
        if self.degree < 1:
            raise DegreeOutOfRangeError(ErrorMessages.DEGREE_OUT_OF_RANGE.format(degree=self.degree))

    @classmethod
    def create(
        cls, scale: Harmonizer, degree: int, chord: Harmonizer, name: str = ""
    ) -> HarmonicFunction:
        """
        Create a functional harmonizer.

        Args:
            scale: Scale giving the degrees (evaluated at the tonic)
            degree: 1-based scale degree to build the chord on
            chord: Chord quality (or another harmonic function) rooted on that degree

        Raises:
            DegreeOutOfRangeError: if degree is below 1
        """
        return cls(scale, degree, chord, name)

    def degree_root(self, tonic: Pitch) -> Pitch:
        """The pitch of this function's scale degree above the tonic."""
        pitches = self.scale(tonic)
        if not pitches:
            raise DegreeOutOfRangeError(ErrorMessages.EMPTY_SCALE.format(degree=self.degree))
        return extend_degree(pitches, self.degree, period_of(self.scale))

    def __call__(self, tonic: Pitch) -> PitchSet:
        return self.chord(self.degree_root(tonic))

    def __str__(self) -> str:
        return self.name or f"{self.chord} on degree {self.degree} of {self.scale}"


def _major(degree: int, chord: Harmonizer, name: str) -> HarmonicFunction:
    return HarmonicFunction(Scale.MAJOR, degree, chord, name)


def _minor(degree: int, chord: Harmonizer, name: str) -> HarmonicFunction:
    return HarmonicFunction(Scale.MINOR, degree, chord, name)


def _harmonic_minor(degree: int, chord: Harmonizer, name: str) -> HarmonicFunction:
    return HarmonicFunction(Scale.HARMONIC_MINOR, degree, chord, name)


def _neapolitan() -> HarmonicFunction:
    # Major triad on the lowered second degree
    return HarmonicFunction(Scale.PHRYGIAN, 2, Chord.MAJOR, "bII")


class Major(HarmonizerCatalog):
    """Diatonic functional harmony in a major key."""

    I: ClassVar[HarmonicFunction] = _major(1, Chord.MAJOR, "I")  # noqa: E741
    ii: ClassVar[HarmonicFunction] = _major(2, Chord.MINOR, "ii")
    iii: ClassVar[HarmonicFunction] = _major(3, Chord.MINOR, "iii")
    IV: ClassVar[HarmonicFunction] = _major(4, Chord.MAJOR, "IV")
    V: ClassVar[HarmonicFunction] = _major(5, Chord.MAJOR, "V")
    vi: ClassVar[HarmonicFunction] = _major(6, Chord.MINOR, "vi")
    vii_dim: ClassVar[HarmonicFunction] = _major(7, Chord.DIMINISHED, "vii°")

    I7: ClassVar[HarmonicFunction] = _major(1, Chord.MAJOR_7, "IΔ7")
    ii7: ClassVar[HarmonicFunction] = _major(2, Chord.MINOR_7, "ii7")
    iii7: ClassVar[HarmonicFunction] = _major(3, Chord.MINOR_7, "iii7")
    IV7: ClassVar[HarmonicFunction] = _major(4, Chord.MAJOR_7, "IVΔ7")
    V7: ClassVar[HarmonicFunction] = _major(5, Chord.DOMINANT_7, "V7")
    vi7: ClassVar[HarmonicFunction] = _major(6, Chord.MINOR_7, "vi7")
    vii_half_dim7: ClassVar[HarmonicFunction] = _major(7, Chord.HALF_DIMINISHED_7, "viiø7")

    bII: ClassVar[HarmonicFunction] = _neapolitan()


class Minor(HarmonizerCatalog):
    """Diatonic functional harmony in a minor key."""

    i: ClassVar[HarmonicFunction] = _minor(1, Chord.MINOR, "i")
    ii_dim: ClassVar[HarmonicFunction] = _minor(2, Chord.DIMINISHED, "ii°")
    III: ClassVar[HarmonicFunction] = _minor(3, Chord.MAJOR, "III")
    iv: ClassVar[HarmonicFunction] = _minor(4, Chord.MINOR, "iv")
    v: ClassVar[HarmonicFunction] = _minor(5, Chord.MINOR, "v")
    V: ClassVar[HarmonicFunction] = _harmonic_minor(5, Chord.MAJOR, "V")
    VI: ClassVar[HarmonicFunction] = _minor(6, Chord.MAJOR, "VI")
    VII: ClassVar[HarmonicFunction] = _minor(7, Chord.MAJOR, "VII")
    vii_dim: ClassVar[HarmonicFunction] = _harmonic_minor(7, Chord.DIMINISHED, "vii°")

    i7: ClassVar[HarmonicFunction] = _minor(1, Chord.MINOR_7, "i7")
    ii_half_dim7: ClassVar[HarmonicFunction] = _minor(2, Chord.HALF_DIMINISHED_7, "iiø7")
    III7: ClassVar[HarmonicFunction] = _minor(3, Chord.MAJOR_7, "IIIΔ7")
    iv7: ClassVar[HarmonicFunction] = _minor(4, Chord.MINOR_7, "iv7")
    v7: ClassVar[HarmonicFunction] = _minor(5, Chord.MINOR_7, "v7")
    V7: ClassVar[HarmonicFunction] = _harmonic_minor(5, Chord.DOMINANT_7, "V7")
    VI7: ClassVar[HarmonicFunction] = _minor(6, Chord.MAJOR_7, "VIΔ7")
    VII7: ClassVar[HarmonicFunction] = _minor(7, Chord.DOMINANT_7, "VII7")
    vii_dim7: ClassVar[HarmonicFunction] = _harmonic_minor(7, Chord.DIMINISHED_7, "vii°7")

    bII: ClassVar[HarmonicFunction] = _neapolitan()
