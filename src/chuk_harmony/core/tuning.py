"""
Tuning context - the reference frequency behind every Pitch.

A TuningContext maps step numbers to frequencies in 12-tone equal temperament,
anchored at step 69 (A4). Frequency computations take an explicit context; when
none is given, the process-wide default context is read at call time, so
retuning it affects every existing Pitch uniformly.
"""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from pydantic import BaseModel, Field, ValidationError

from chuk_harmony.constants import (
    CONCERT_PITCH_ENV,
    DEFAULT_CONCERT_PITCH,
    REFERENCE_STEP,
    SEMITONES_PER_OCTAVE,
)

logger = logging.getLogger(__name__)


class TuningContext(BaseModel):
    """
    Concert pitch reference for frequency computation.

    The concert pitch is the frequency of step 69. It must be a positive,
    finite number; assignments are validated too.
    """

    concert_pitch: float = Field(
        DEFAULT_CONCERT_PITCH,
        gt=0,
        allow_inf_nan=False,
        description="Frequency of step 69 (A4) in Hz",
    )

    model_config = {"validate_assignment": True}

    def frequency(self, step: float) -> float:
        """Frequency in Hz of a (possibly fractional) step number."""
        return self.concert_pitch * 2 ** ((step - REFERENCE_STEP) / SEMITONES_PER_OCTAVE)

    @classmethod
    def from_env(cls, strict: bool = True) -> TuningContext:
        """
        Build a context from the environment.

        Reads CHUK_HARMONY_CONCERT_PITCH; falls back to 440 Hz when unset.

        Args:
            strict: Raise on an invalid value. When False, log a warning and
                use 440 Hz instead; the default context is built this way.

        Raises:
            ValidationError: if strict and the value is not a positive number
        """
        raw = os.environ.get(CONCERT_PITCH_ENV)
        if raw is None or not raw.strip():
            return cls()
        try:
            return cls(concert_pitch=raw.strip())
        except ValidationError:
            if strict:
                raise
            logger.warning(
                f"Ignoring invalid {CONCERT_PITCH_ENV}={raw!r}; "
                f"using {DEFAULT_CONCERT_PITCH} Hz"
            )
            return cls()


_default_context = TuningContext.from_env(strict=False)
_lock = threading.Lock()


def get_tuning() -> TuningContext:
    """The process-wide default tuning context."""
    return _default_context


def get_concert_pitch() -> float:
    """Current default concert pitch in Hz."""
    with _lock:
        return _default_context.concert_pitch


def set_concert_pitch(frequency: float) -> None:
    """
    Retune the process-wide default context.

    Concurrent frequency reads during a retune observe either the old or the
    new value; retuning is expected to be rare and explicit.
    """
    with _lock:
        previous = _default_context.concert_pitch
        _default_context.concert_pitch = frequency
    logger.info(f"Concert pitch changed from {previous} Hz to {frequency} Hz")


@contextmanager
def retuned(frequency: float) -> Iterator[TuningContext]:
    """Temporarily retune the default context, restoring the old pitch on exit."""
    previous = get_concert_pitch()
    set_concert_pitch(frequency)
    try:
        yield _default_context
    finally:
        set_concert_pitch(previous)
