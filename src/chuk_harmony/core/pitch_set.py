"""
PitchSet - an ordered collection of unique pitches.

Pitches are kept strictly increasing by step number. Inserting a pitch that
is already present, or removing one that is absent, changes nothing. The set
algebra (union, difference, projection) returns new sets and leaves its
operands untouched.
"""

from __future__ import annotations

import math
from bisect import bisect_left
from collections.abc import Iterable, Iterator
from typing import overload

from chuk_harmony.constants import SEMITONES_PER_OCTAVE, ErrorMessages
from chuk_harmony.core.pitch import Pitch, PitchClass
from chuk_harmony.errors import InvalidInversionError


class PitchSet:
    """
    Unique pitches ordered by step number.

    Examples:
        PitchSet([Pitch(36), Pitch(40), Pitch(43)]) prints as [C2, E2, G2]
        a + b is the union, a - b the difference, a / PitchClass.F adds an F bass
    """

    __slots__ = ("_pitches",)

    def __init__(self, pitches: Iterable[Pitch] = ()) -> None:
        self._pitches: list[Pitch] = sorted(set(pitches))

    def insert(self, pitch: Pitch) -> None:
        """Insert a pitch, keeping order. No-op if the step is already present."""
        index = bisect_left(self._pitches, pitch)
        if index < len(self._pitches) and self._pitches[index] == pitch:
            return
        self._pitches.insert(index, pitch)

    def remove(self, pitch: Pitch) -> None:
        """Remove a pitch by step. No-op if absent."""
        index = bisect_left(self._pitches, pitch)
        if index < len(self._pitches) and self._pitches[index] == pitch:
            del self._pitches[index]

    def union(self, other: PitchSet) -> PitchSet:
        """All pitches of both sets."""
        return PitchSet([*self._pitches, *other._pitches])

    def difference(self, other: PitchSet) -> PitchSet:
        """Pitches of this set whose step is not in the other."""
        excluded = set(other._pitches)
        return PitchSet(p for p in self._pitches if p not in excluded)

    def project(self, pitch_class: PitchClass) -> PitchSet:
        """
        Add a bass note of the given pitch class (slash chord).

        The new pitch is the highest one of that class strictly below the
        lowest member. Empty sets, and sets whose lowest member already has
        the class, come back unchanged.

        C major [C2, E2, G2] / F = [F1, C2, E2, G2]
        """
        result = self.copy()
        lowest = self.lowest
        if lowest is None or lowest.pitch_class == pitch_class:
            return result
        below = math.ceil(lowest.step) - 1
        below -= (below - pitch_class.value) % SEMITONES_PER_OCTAVE
        result.insert(Pitch(below))
        return result

    def gamut(self) -> list[PitchClass]:
        """Distinct pitch classes in order of first (lowest) occurrence."""
        classes: list[PitchClass] = []
        for pitch in self._pitches:
            pitch_class = pitch.pitch_class
            if pitch_class is not None and pitch_class not in classes:
                classes.append(pitch_class)
        return classes

    def transpose(self, semitones: float) -> PitchSet:
        """Transpose every pitch by the same number of semitones."""
        return PitchSet(p.transpose(semitones) for p in self._pitches)

    def invert(self, inversion: int) -> PitchSet:
        """
        Raise the lowest ``inversion`` pitches by an octave.

        For a set spanning less than an octave, inverting by n and then by
        len - n gives the original set an octave up.

        Raises:
            InvalidInversionError: unless inversion is 0 or within 0 < inversion < len
        """
        size = len(self._pitches)
        if inversion != 0 and not 0 < inversion < size:
            raise InvalidInversionError(
                ErrorMessages.INVALID_INVERSION.format(
                    max_inversion=size - 1, size=size, inversion=inversion
                )
            )
        raised = [p.transpose(SEMITONES_PER_OCTAVE) for p in self._pitches[:inversion]]
        return PitchSet(self._pitches[inversion:] + raised)

    def copy(self) -> PitchSet:
        result = PitchSet()
        result._pitches = list(self._pitches)
        return result

    @property
    def lowest(self) -> Pitch | None:
        return self._pitches[0] if self._pitches else None

    @property
    def highest(self) -> Pitch | None:
        return self._pitches[-1] if self._pitches else None

    @property
    def steps(self) -> tuple[float, ...]:
        """Step numbers in ascending order."""
        return tuple(p.step for p in self._pitches)

    def __add__(self, other: object) -> PitchSet:
        if not isinstance(other, PitchSet):
            return NotImplemented
        return self.union(other)

    def __sub__(self, other: object) -> PitchSet:
        if not isinstance(other, PitchSet):
            return NotImplemented
        return self.difference(other)

    def __truediv__(self, other: object) -> PitchSet:
        if not isinstance(other, PitchClass):
            return NotImplemented
        return self.project(other)

    def __len__(self) -> int:
        return len(self._pitches)

    def __iter__(self) -> Iterator[Pitch]:
        return iter(self._pitches)

    def __contains__(self, pitch: object) -> bool:
        if not isinstance(pitch, Pitch):
            return False
        index = bisect_left(self._pitches, pitch)
        return index < len(self._pitches) and self._pitches[index] == pitch

    @overload
    def __getitem__(self, index: int) -> Pitch: ...

    @overload
    def __getitem__(self, index: slice) -> PitchSet: ...

    def __getitem__(self, index: int | slice) -> Pitch | PitchSet:
        if isinstance(index, slice):
            return PitchSet(self._pitches[index])
        return self._pitches[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PitchSet):
            return NotImplemented
        return self._pitches == other._pitches

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "[" + ", ".join(p.name for p in self._pitches) + "]"

    def __repr__(self) -> str:
        return f"PitchSet({self._pitches!r})"
