"""
Pytest configuration and shared fixtures.
"""

from collections.abc import Iterator

import pytest

from chuk_harmony import Pitch, PitchSet, get_concert_pitch, set_concert_pitch
from chuk_harmony.constants import DEFAULT_CONCERT_PITCH


@pytest.fixture(autouse=True)
def default_tuning() -> Iterator[None]:
    """Run every test at 440 Hz and restore whatever was set before."""
    previous = get_concert_pitch()
    set_concert_pitch(DEFAULT_CONCERT_PITCH)
    yield
    set_concert_pitch(previous)


@pytest.fixture
def c_major_triad() -> PitchSet:
    """[C2, E2, G2]"""
    return PitchSet([Pitch(36), Pitch(40), Pitch(43)])


@pytest.fixture
def f_sharp_major_triad() -> PitchSet:
    """[F♯2, B♭2, C♯3]"""
    return PitchSet([Pitch(42), Pitch(46), Pitch(49)])
