"""
Chord harmonizers - interval stacks, inversions and additions.

Chords are measured from the root, not stacked: a major triad is
root + M3 + P5 (0, 4, 7 semitones). Any chord can be inverted (its lowest
tones raised an octave) and extended with additions (ninths, elevenths,
thirteenths). Chord.create derives a chord from any other harmonizer,
typically a scale, by picking pitches by index; its additions are degrees
of that scale rather than fixed semitone offsets.
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import ClassVar

from chuk_harmony.constants import ErrorMessages
from chuk_harmony.core.harmonizer import (
    Harmonizer,
    HarmonizerCatalog,
    extend_degree,
    period_of,
)
from chuk_harmony.core.pitch import Pitch
from chuk_harmony.core.pitch_set import PitchSet
from chuk_harmony.errors import (
    EmptyIntervalListError,
    IndexOutOfRangeError,
    InvalidInversionError,
)


class Addition(IntEnum):
    """
    Extension tones, in semitones above the root.

    Each addition is also a scale degree with an alteration (NINE is degree 9,
    FLAT_NINE degree 9 lowered a semitone). Interval chords use the semitone
    value; chords derived from a scale use the degree of that scale.
    """

    FLAT_NINE = 13
    NINE = 14
    SHARP_NINE = 15
    ELEVEN = 17
    SHARP_ELEVEN = 18
    FLAT_THIRTEEN = 20
    THIRTEEN = 21

    @property
    def degree(self) -> int:
        """1-based scale degree (9, 11 or 13)."""
        return _ADDITION_DEGREES[self][0]

    @property
    def alteration(self) -> int:
        """Semitones the degree is raised (+1) or lowered (-1)."""
        return _ADDITION_DEGREES[self][1]


_ADDITION_DEGREES: dict[Addition, tuple[int, int]] = {
    Addition.FLAT_NINE: (9, -1),
    Addition.NINE: (9, 0),
    Addition.SHARP_NINE: (9, 1),
    Addition.ELEVEN: (11, 0),
    Addition.SHARP_ELEVEN: (11, 1),
    Addition.FLAT_THIRTEEN: (13, -1),
    Addition.THIRTEEN: (13, 0),
}


class ChordHarmonizer(Harmonizer):
    """
    Base class for chords.

    Subclasses supply the chord tones for a root; this class applies the
    inversion and the additions. Subclasses are frozen dataclasses with
    ``inversion`` and ``additions`` fields.
    """

    inversion: int
    additions: tuple[Addition, ...]

    @property
    @abstractmethod
    def size(self) -> int:
        """Number of chord tones before additions."""

    @abstractmethod
    def tones(self, root: Pitch) -> list[Pitch]:
        """Chord tones in root position."""

    def _check_voicing(self) -> None:
        object.__setattr__(self, "additions", tuple(Addition(a) for a in self.additions))
        if not 0 <= self.inversion < self.size:
            raise InvalidInversionError(
                ErrorMessages.INVALID_INVERSION.format(
                    max_inversion=self.size - 1, size=self.size, inversion=self.inversion
                )
            )

    def inverted(self, inversion: int) -> ChordHarmonizer:
        """
        The same chord with its lowest ``inversion`` tones raised an octave.

        The inversion is always counted from root position and replaces any
        inversion the chord already had: Chord.MAJOR.inverted(1).inverted(2)
        is the second inversion. To compose inversions, invert the evaluated
        PitchSet instead (PitchSet.invert).

        Raises:
            InvalidInversionError: if inversion is negative or >= the chord size
        """
        return replace(self, inversion=inversion)  # type: ignore[type-var]

    def with_additions(self, *additions: Addition) -> ChordHarmonizer:
        """The same chord with extra extension tones."""
        return replace(self, additions=self.additions + additions)  # type: ignore[type-var]

    def voiced(self, inversion: int = 0, additions: Sequence[Addition] = ()) -> ChordHarmonizer:
        """The same chord with the given inversion and additions (replacing both)."""
        return replace(self, inversion=inversion, additions=tuple(additions))  # type: ignore[type-var]

    def addition_pitches(self, root: Pitch) -> list[Pitch]:
        """Pitches of the additions: fixed semitone offsets from the root."""
        return [root.transpose(addition.value) for addition in self.additions]

    def __call__(self, root: Pitch) -> PitchSet:
        pitches = PitchSet(self.tones(root)).invert(self.inversion)
        for pitch in self.addition_pitches(root):
            pitches.insert(pitch)
        return pitches


@dataclass(frozen=True)
class IntervalChord(ChordHarmonizer):
    """
    A chord defined by its intervals from the root.

    Immutable and hashable.
    """

    intervals: tuple[float, ...]
    name: str = ""
    inversion: int = 0
    additions: tuple[Addition, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "intervals", tuple(self.intervals))
        if not self.intervals:
            raise EmptyIntervalListError(ErrorMessages.EMPTY_CHORD)
        self._check_voicing()

    @property
    def size(self) -> int:
        return len(self.intervals)

    def tones(self, root: Pitch) -> list[Pitch]:
        return [root.transpose(interval) for interval in self.intervals]

    def __str__(self) -> str:
        return self.name or f"IntervalChord({self.intervals})"


@dataclass(frozen=True)
class DegreeChord(ChordHarmonizer):
    """
    A chord picked out of another harmonizer's pitch set by index.

    Chord.create(Scale.MAJOR, [0, 2, 4, 6]) is a major seventh chord built
    from the first, third, fifth and seventh scale degrees.
    """

    harmonizer: Harmonizer
    indices: tuple[int, ...]
    name: str = ""
    inversion: int = 0
    additions: tuple[Addition, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "indices", tuple(self.indices))
        if not self.indices:
            raise EmptyIntervalListError(ErrorMessages.EMPTY_CHORD)
        for index in self.indices:
            if index < 0:
                raise IndexOutOfRangeError(ErrorMessages.NEGATIVE_INDEX.format(index=index))
        self._check_voicing()

    @property
    def size(self) -> int:
        return len(self.indices)

    def tones(self, root: Pitch) -> list[Pitch]:
        pitches = self.harmonizer(root)
        for index in self.indices:
            if index >= len(pitches):
                raise IndexOutOfRangeError(
                    ErrorMessages.INDEX_OUT_OF_RANGE.format(index=index, size=len(pitches))
                )
        return [pitches[index] for index in self.indices]

    def addition_pitches(self, root: Pitch) -> list[Pitch]:
        """
        Pitches of the additions as degrees of the source set.

        NINE is degree 9 of the source, counted past its top the way
        HarmonicFunction counts degrees, so a Phrygian-derived chord gets a
        flat ninth from Addition.NINE.
        The alteration is applied on top of that degree.
        """
        if not self.additions:
            return []
        pitches = self.harmonizer(root)
        period = period_of(self.harmonizer)
        return [
            extend_degree(pitches, addition.degree, period).transpose(addition.alteration)
            for addition in self.additions
        ]

    def __str__(self) -> str:
        return self.name or f"{self.harmonizer} {list(self.indices)}"


class Chord(HarmonizerCatalog):
    """
    Common chord harmonizers, in root position.

    Examples:
        Chord.MAJOR(Pitch(60)) = [C4, E4, G4]
        Chord.MINOR.voiced(1, [Addition.NINE])(Pitch(69)) = [C5, E5, A5, B5]
    """

    MAJOR: ClassVar[IntervalChord]
    MINOR: ClassVar[IntervalChord]
    AUGMENTED: ClassVar[IntervalChord]
    DIMINISHED: ClassVar[IntervalChord]
    SUS2: ClassVar[IntervalChord]
    SUS4: ClassVar[IntervalChord]
    POWER: ClassVar[IntervalChord]
    MAJOR_6: ClassVar[IntervalChord]
    MINOR_6: ClassVar[IntervalChord]
    DOMINANT_7: ClassVar[IntervalChord]
    MAJOR_7: ClassVar[IntervalChord]
    MINOR_7: ClassVar[IntervalChord]
    MINOR_MAJOR_7: ClassVar[IntervalChord]
    HALF_DIMINISHED_7: ClassVar[IntervalChord]
    DIMINISHED_7: ClassVar[IntervalChord]
    AUGMENTED_7: ClassVar[IntervalChord]
    AUGMENTED_MAJOR_7: ClassVar[IntervalChord]

    @staticmethod
    def create(harmonizer: Harmonizer, indices: Sequence[int], name: str = "") -> DegreeChord:
        """
        Create a chord from selected pitches of another harmonizer.

        Args:
            harmonizer: Usually a scale
            indices: Zero-based positions in the harmonizer's pitch set

        Raises:
            IndexOutOfRangeError: for a negative index here, or an index past
                the end of the pitch set when the chord is evaluated
        """
        return DegreeChord(harmonizer, tuple(indices), name)

    @staticmethod
    def from_intervals(intervals: Sequence[float], name: str = "") -> IntervalChord:
        """Create a chord from semitone intervals above the root."""
        return IntervalChord(tuple(intervals), name)


Chord.MAJOR = Chord.from_intervals([0, 4, 7], "major")
Chord.MINOR = Chord.from_intervals([0, 3, 7], "minor")
Chord.AUGMENTED = Chord.from_intervals([0, 4, 8], "augmented")
Chord.DIMINISHED = Chord.from_intervals([0, 3, 6], "diminished")
Chord.SUS2 = Chord.from_intervals([0, 2, 7], "sus2")
Chord.SUS4 = Chord.from_intervals([0, 5, 7], "sus4")
Chord.POWER = Chord.from_intervals([0, 7], "power")
Chord.MAJOR_6 = Chord.from_intervals([0, 4, 7, 9], "major 6")
Chord.MINOR_6 = Chord.from_intervals([0, 3, 7, 9], "minor 6")
Chord.DOMINANT_7 = Chord.from_intervals([0, 4, 7, 10], "dominant 7")
Chord.MAJOR_7 = Chord.from_intervals([0, 4, 7, 11], "major 7")
Chord.MINOR_7 = Chord.from_intervals([0, 3, 7, 10], "minor 7")
Chord.MINOR_MAJOR_7 = Chord.from_intervals([0, 3, 7, 11], "minor-major 7")
Chord.HALF_DIMINISHED_7 = Chord.from_intervals([0, 3, 6, 10], "half-diminished 7")
Chord.DIMINISHED_7 = Chord.from_intervals([0, 3, 6, 9], "diminished 7")
Chord.AUGMENTED_7 = Chord.from_intervals([0, 4, 8, 10], "augmented 7")
Chord.AUGMENTED_MAJOR_7 = Chord.from_intervals([0, 4, 8, 11], "augmented major 7")
