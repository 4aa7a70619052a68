"""
Pitch primitives - PitchClass and Pitch.

These are the foundational types for all pitch-related operations.
PitchClass represents the 12 chromatic pitches (octave-independent).
Pitch is a point on the continuous step-number line, where integral steps
line up with MIDI note numbers and fractional steps are microtonal.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Decimal
from enum import IntEnum
from numbers import Integral, Real

from chuk_harmony.constants import (
    DISPLAY_NAMES,
    FLAT_NAMES,
    SEMITONES_PER_OCTAVE,
    SHARP_NAMES,
    ErrorMessages,
)
from chuk_harmony.core.tuning import TuningContext, get_tuning
from chuk_harmony.errors import OutOfRangeError

_PITCH_NAME = re.compile(r"^([A-G](?:#|b)?)(-?\d+)$")


def _normalize_accidentals(name: str) -> str:
    return name.strip().replace("♯", "#").replace("♭", "b")


def _is_real(value: object) -> bool:
    return isinstance(value, (Real, Decimal)) and not isinstance(value, bool)


def _as_step(value: object) -> float:
    """Plain int or float for any real number (Fraction and Decimal become float)."""
    if not _is_real(value):
        raise TypeError(f"Step must be a real number, got {value!r}")
    if type(value) in (int, float):
        return value  # type: ignore[return-value]
    if isinstance(value, Integral):
        return int(value)
    return float(value)  # type: ignore[arg-type]


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic equivalents share the same value (C# == Db == 1).

    Adding an integer transposes modulo 12, so PitchClass.C + 2 is D.
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    @classmethod
    def _missing_(cls, value: object) -> PitchClass | None:
        if isinstance(value, int):
            raise OutOfRangeError(ErrorMessages.PITCH_CLASS_OUT_OF_RANGE.format(index=value))
        return None

    @classmethod
    def from_index(cls, index: int) -> PitchClass:
        """Create a pitch class from its index, raising OutOfRangeError outside 0-11."""
        return cls(index)

    @classmethod
    def from_step(cls, step: int) -> PitchClass:
        """Extract pitch class from an integral step (MIDI note) number."""
        return cls(step % SEMITONES_PER_OCTAVE)

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % SEMITONES_PER_OCTAVE)

    def interval_to(self, other: PitchClass) -> int:
        """Ascending semitones from this pitch class to another (0-11)."""
        return (other.value - self.value) % SEMITONES_PER_OCTAVE

    def __add__(self, semitones: object) -> PitchClass:
        if not isinstance(semitones, int):
            return NotImplemented
        return self.transpose(semitones)

    def __sub__(self, semitones: object) -> PitchClass:
        if not isinstance(semitones, int):
            return NotImplemented
        return self.transpose(-semitones)

    @property
    def symbol(self) -> str:
        """Display name with unicode accidentals (C♯, E♭, ...)."""
        return DISPLAY_NAMES[self.value]

    def spell(self, prefer_flats: bool = False) -> str:
        """Get an ASCII name."""
        names = FLAT_NAMES if prefer_flats else SHARP_NAMES
        return names[self.value]

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """Parse a pitch class from a string like 'C', 'C#', 'Db', 'B♭'."""
        raw = name.strip()
        name = _normalize_accidentals(raw)

        if name in SHARP_NAMES:
            return cls(SHARP_NAMES.index(name))

        if name in FLAT_NAMES:
            return cls(FLAT_NAMES.index(name))

        # Enum names (C, Cs, D, Ds, etc.)
        name_upper = name.upper()
        for member in cls:
            if member.name.upper() == name_upper:
                return member

        raise ValueError(ErrorMessages.UNKNOWN_PITCH_CLASS.format(name=raw))

    def __str__(self) -> str:
        return self.symbol

    def __format__(self, format_spec: str) -> str:
        return format(self.symbol, format_spec)

    def __repr__(self) -> str:
        return f"PitchClass.{self.name}"


@dataclass(frozen=True, order=True)
class Pitch:
    """
    A pitch on the continuous step-number line.

    Step 60 is C4 and step 69 is A4. Fractional steps are microtonal and
    have no pitch class. Equality and ordering compare step numbers exactly;
    frequency is derived from a tuning context on every call, never stored.

    Examples:
        Pitch(69) = A4 (440 Hz at the default tuning)
        Pitch(69.5) = a quarter tone above A4
        Pitch.from_pitch_class(PitchClass.D, 5) = D5

    Any real step is accepted; Fraction and Decimal steps are stored as float.
    """

    step: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "step", _as_step(self.step))
        if not math.isfinite(self.step):
            raise ValueError(f"Step must be finite, got {self.step}")

    @classmethod
    def from_pitch_class(cls, pitch_class: PitchClass, octave: int) -> Pitch:
        """Create a pitch from a pitch class and an octave (C4 = 60)."""
        return cls(pitch_class.value + SEMITONES_PER_OCTAVE * (octave + 1))

    @classmethod
    def parse(cls, name: str) -> Pitch:
        """Parse a pitch from a name like 'A4', 'C#5', 'B♭-1'."""
        match = _PITCH_NAME.match(_normalize_accidentals(name))
        if match is None:
            raise ValueError(ErrorMessages.UNKNOWN_PITCH.format(name=name))
        pitch_class = PitchClass.parse(match.group(1))
        return cls.from_pitch_class(pitch_class, int(match.group(2)))

    @property
    def is_microtonal(self) -> bool:
        """True when the step is not an integer."""
        return not float(self.step).is_integer()

    @property
    def pitch_class(self) -> PitchClass | None:
        """The pitch class, or None for microtonal pitches."""
        if self.is_microtonal:
            return None
        return PitchClass.from_step(int(self.step))

    @property
    def octave(self) -> int:
        """Octave number, C4 = middle C. Fractional steps are floored."""
        return math.floor(self.step / SEMITONES_PER_OCTAVE) - 1

    def frequency(self, tuning: TuningContext | None = None) -> float:
        """
        Frequency in Hz.

        Args:
            tuning: Tuning context to use (default: the process-wide context,
                read at call time)
        """
        if tuning is None:
            tuning = get_tuning()
        return tuning.frequency(self.step)

    @property
    def name(self) -> str:
        """
        Human-readable name.

        Integral steps render as pitch class plus octave ('C♯5'). Microtonal
        steps render as the pitch below plus a cent offset ('A4+50c').
        """
        pitch_class = self.pitch_class
        if pitch_class is not None:
            return f"{pitch_class.symbol}{self.octave}"
        below = math.floor(self.step)
        # never 100c, which would name the next semitone
        cents = min(round((self.step - below) * 100, 2), 99.99)
        return f"{Pitch(below).name}+{cents:g}c"

    def transpose(self, semitones: float) -> Pitch:
        """Transpose by a (possibly fractional) number of semitones."""
        return Pitch(self.step + _as_step(semitones))

    def __add__(self, semitones: object) -> Pitch:
        if not _is_real(semitones):
            return NotImplemented
        return self.transpose(semitones)

    def __sub__(self, other: object) -> Pitch | float:
        """Pitch - Pitch is a distance in semitones; Pitch - n transposes down."""
        if isinstance(other, Pitch):
            return self.step - other.step
        if not _is_real(other):
            return NotImplemented
        return self.transpose(-other)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Pitch({self.step!r})"
