"""
Harmonizer - the function type Pitch -> PitchSet.

Scales, chords and functional harmony are all harmonizers: stateless values
that expand a root pitch into a PitchSet. Because they share one signature
they compose freely, and a list of them applied to one root is a progression.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable

from chuk_harmony.constants import SEMITONES_PER_OCTAVE
from chuk_harmony.core.pitch import Pitch
from chuk_harmony.core.pitch_set import PitchSet

logger = logging.getLogger(__name__)


class Harmonizer(ABC):
    """
    A pure function from a root pitch to a pitch set.

    Subclasses are immutable and deterministic given the root.
    """

    name: str = ""

    @abstractmethod
    def __call__(self, root: Pitch) -> PitchSet:
        """Expand the root into a pitch set."""

    def __str__(self) -> str:
        return self.name or type(self).__name__


def extend_degree(pitches: PitchSet, degree: int, period: float = SEMITONES_PER_OCTAVE) -> Pitch:
    """
    The pitch of a 1-based degree in a pitch set, continuing past its top.

    Degrees beyond the set repeat it transposed up by ``period`` (the span of
    the scale that produced it), so degree 9 of a 7-note octave scale is the
    second degree an octave up.

    Args:
        pitches: A non-empty pitch set, usually one octave of a scale
        degree: 1-based degree
        period: Semitones between repetitions of the set
    """
    octaves, index = divmod(degree - 1, len(pitches))
    return pitches[index].transpose(octaves * period)


def period_of(harmonizer: Harmonizer) -> float:
    """Semitones after which a harmonizer's pitches repeat (12 unless it has a span)."""
    return getattr(harmonizer, "span", SEMITONES_PER_OCTAVE)


class HarmonizerCatalog:
    """
    A namespace of named harmonizer constants.

    Subclasses declare harmonizers as class attributes; catalog() enumerates
    them by attribute name in declaration order.
    """

    @classmethod
    def catalog(cls) -> dict[str, Harmonizer]:
        """All harmonizers declared on this catalog, keyed by name."""
        return {
            name: value for name, value in vars(cls).items() if isinstance(value, Harmonizer)
        }

    @classmethod
    def get(cls, name: str) -> Harmonizer:
        """
        Look up a harmonizer by attribute name ('vii_dim') or display name ('vii°').

        Raises:
            KeyError: if nothing matches
        """
        entries = cls.catalog()
        if name in entries:
            return entries[name]
        for harmonizer in entries.values():
            if str(harmonizer) == name:
                return harmonizer
        raise KeyError(f"{cls.__name__} has no harmonizer named '{name}'")


def progression(harmonizers: Iterable[Harmonizer], root: Pitch) -> list[PitchSet]:
    """
    Apply each harmonizer to the same root, in order.

    Args:
        harmonizers: The harmonizers to apply (e.g., [Major.IV, Major.I])
        root: The shared root (tonic) pitch

    Returns:
        One PitchSet per harmonizer
    """
    result = []
    for harmonizer in harmonizers:
        pitches = harmonizer(root)
        logger.debug(f"{harmonizer} at {root} -> {pitches}")
        result.append(pitches)
    return result
