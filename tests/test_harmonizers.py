"""
Tests for harmonizers.

Tests cover:
- Scale and ScaleHarmonizer (scale.py)
- Chord, IntervalChord, DegreeChord, Addition (chord.py)
- HarmonicFunction, Major, Minor (harmony.py)
- progression and catalogs (harmonizer.py)
"""

import logging

import pytest

from chuk_harmony import (
    Addition,
    Chord,
    DegreeOutOfRangeError,
    EmptyIntervalListError,
    HarmonicFunction,
    Harmonizer,
    IndexOutOfRangeError,
    InvalidIntervalError,
    InvalidInversionError,
    Major,
    Minor,
    Pitch,
    PitchClass,
    PitchSet,
    Scale,
    progression,
)

A4 = Pitch(69)
C4 = Pitch(60)
C5 = Pitch(72)


class Octaves(Harmonizer):
    """A user-defined harmonizer: the root and two octaves above."""

    name = "octaves"

    def __call__(self, root: Pitch) -> PitchSet:
        return PitchSet([root, root + 12, root + 24])


class Doubler(Harmonizer):
    """A harmonizer without a name."""

    def __call__(self, root: Pitch) -> PitchSet:
        return PitchSet([root, root + 12])


class TestScale:
    """Tests for scale harmonizers."""

    def test_major_scale(self) -> None:
        """A major from A4."""
        assert str(Scale.MAJOR(A4)) == "[A4, B4, C♯5, D5, E5, F♯5, G♯5]"

    def test_minor_scale(self) -> None:
        """Natural minor from A3."""
        assert str(Scale.MINOR(Pitch(57))) == "[A3, B3, C4, D4, E4, F4, G4]"

    def test_harmonic_minor(self) -> None:
        """Harmonic minor raises the seventh."""
        assert Scale.HARMONIC_MINOR(Pitch(57))[-1] == Pitch(68)

    def test_scale_size(self) -> None:
        """One pitch per interval, without the octave return."""
        assert len(Scale.CHROMATIC(C4)) == 12
        assert len(Scale.WHOLE_TONE(C4)) == 6
        assert len(Scale.MAJOR_PENTATONIC(C4)) == 5

    def test_custom_microtonal_scale(self) -> None:
        """Custom scales may use fractional intervals."""
        equidistant = Scale.create([2.4, 2.4, 2.4, 2.4, 2.4])
        pitches = equidistant(C4)
        assert len(pitches) == 5
        assert list(pitches.steps) == pytest.approx([60, 62.4, 64.8, 67.2, 69.6])
        assert pitches[0].pitch_class == PitchClass.C
        assert pitches[1].pitch_class is None

    def test_empty_intervals(self) -> None:
        """A scale needs intervals."""
        with pytest.raises(EmptyIntervalListError):
            Scale.create([])

    def test_non_positive_interval(self) -> None:
        """Intervals must move upward."""
        with pytest.raises(InvalidIntervalError):
            Scale.create([2, 0, 10])
        with pytest.raises(InvalidIntervalError):
            Scale.create([7, -2])

    def test_single_interval_scale(self) -> None:
        """A one-interval scale is just the root."""
        assert Scale.create([12])(C4) == PitchSet([C4])

    def test_builtins_span_an_octave(self) -> None:
        """Every built-in scale repeats at the octave."""
        for name, scale in Scale.catalog().items():
            assert scale.span == 12, name

    def test_catalog(self) -> None:
        """Scales are enumerable and can be looked up."""
        catalog = Scale.catalog()
        assert len(catalog) == 18
        assert catalog["MAJOR"] is Scale.MAJOR
        assert Scale.get("dorian") is Scale.DORIAN
        with pytest.raises(KeyError):
            Scale.get("bebop")

    def test_scales_are_values(self) -> None:
        """Scales with the same pattern compare equal."""
        assert Scale.create([2, 2, 1, 2, 2, 2, 1], "major") == Scale.MAJOR
        assert hash(Scale.create([2, 2, 1, 2, 2, 2, 1], "major")) == hash(Scale.MAJOR)


class TestChord:
    """Tests for chord harmonizers."""

    def test_major_triad(self) -> None:
        """Root position major triad."""
        assert str(Chord.MAJOR(C4)) == "[C4, E4, G4]"

    def test_minor_first_inversion_with_ninth(self) -> None:
        """Inversion raises the root; the ninth is measured from the root."""
        minor = Chord.MINOR.voiced(inversion=1, additions=[Addition.NINE])
        assert str(minor(A4)) == "[C5, E5, A5, B5]"
        assert Chord.MINOR.inverted(1).with_additions(Addition.NINE)(A4) == minor(A4)

    def test_second_inversion(self) -> None:
        """Second inversion raises the two lowest tones."""
        assert str(Chord.MAJOR.inverted(2)(C4)) == "[G4, C5, E5]"

    def test_thirteenth(self) -> None:
        """Additions can sit above the octave."""
        chord = Chord.DOMINANT_7.with_additions(Addition.THIRTEEN)
        assert str(chord(Pitch(55))) == "[G3, B3, D4, F4, E5]"

    def test_additions_accept_integers(self) -> None:
        """Plain semitone counts are converted to additions."""
        chord = Chord.MAJOR.voiced(additions=[14])
        assert chord.additions == (Addition.NINE,)

    def test_invalid_inversion(self) -> None:
        """Inversion must be smaller than the chord size."""
        with pytest.raises(InvalidInversionError):
            Chord.MAJOR.inverted(3)
        with pytest.raises(InvalidInversionError):
            Chord.MAJOR.inverted(-1)
        Chord.DOMINANT_7.inverted(3)

    def test_inversion_preserves_gamut(self) -> None:
        """Inversions n and size - n keep the pitch classes of the chord."""
        for chord in (Chord.MAJOR, Chord.MINOR_7, Chord.SUS4):
            root_position = chord(C4)
            for n in range(1, chord.size):
                first = chord.inverted(n)(C4)
                second = chord.inverted(chord.size - n)(C4)
                assert set(first.gamut()) == set(root_position.gamut())
                assert set(second.gamut()) == set(root_position.gamut())
                assert first != root_position
                back_to_root = first.invert(chord.size - n)
                assert back_to_root == root_position.transpose(12)
                assert back_to_root.gamut() == root_position.gamut()

    def test_inverted_replaces_inversion(self) -> None:
        """inverted() counts from root position instead of accumulating."""
        assert Chord.MAJOR.inverted(1).inverted(2) == Chord.MAJOR.inverted(2)
        assert Chord.MAJOR.inverted(2).inverted(0)(C4) == Chord.MAJOR(C4)

    def test_create_from_scale(self) -> None:
        """Chords can be picked out of a scale by index."""
        chord = Chord.create(Scale.MAJOR, [0, 2, 4, 6])
        assert str(chord(A4)) == "[A4, C♯5, E5, G♯5]"

    def test_create_with_inversion(self) -> None:
        """Derived chords invert like interval chords."""
        triad = Chord.create(Scale.MAJOR, [0, 2, 4]).inverted(1)
        assert str(triad(C4)) == "[E4, G4, C5]"

    def test_create_from_custom_harmonizer(self) -> None:
        """Any harmonizer can be the source."""
        chord = Chord.create(Octaves(), [0, 2])
        assert chord(C4).steps == (60, 84)

    def test_create_additions_follow_scale(self) -> None:
        """Additions on a derived chord are degrees of its scale."""
        phrygian = Chord.create(Scale.PHRYGIAN, [0, 2, 4]).with_additions(Addition.NINE)
        assert phrygian(C4).steps == (60, 63, 67, 73)
        major = Chord.create(Scale.MAJOR, [0, 2, 4]).with_additions(Addition.NINE)
        assert major(A4) == Chord.MAJOR.with_additions(Addition.NINE)(A4)
        dorian = Chord.create(Scale.DORIAN, [0, 2, 4, 6])
        assert dorian.with_additions(Addition.ELEVEN, Addition.THIRTEEN)(C4).steps == (
            60, 63, 67, 70, 77, 81
        )

    def test_create_altered_additions(self) -> None:
        """Sharps and flats alter the scale degree by a semitone."""
        triad = Chord.create(Scale.MAJOR, [0, 2, 4])
        assert triad.with_additions(Addition.SHARP_ELEVEN)(C4).steps == (60, 64, 67, 78)
        assert triad.with_additions(Addition.FLAT_NINE)(C4).steps == (60, 64, 67, 73)

    def test_create_additions_use_scale_span(self) -> None:
        """Additions on a non-octave scale repeat at the scale's span."""
        diminished = Scale.create([3, 3, 3], "diminished")
        chord = Chord.create(diminished, [0, 1, 2]).with_additions(Addition.NINE)
        # degree 9 of a 3-note, 9-semitone scale: the third pitch, two spans up
        assert chord(C4).steps == (60, 63, 66, 84)

    def test_addition_degrees(self) -> None:
        """Every addition names a degree and an alteration."""
        assert (Addition.NINE.degree, Addition.NINE.alteration) == (9, 0)
        assert (Addition.FLAT_NINE.degree, Addition.FLAT_NINE.alteration) == (9, -1)
        assert (Addition.SHARP_ELEVEN.degree, Addition.SHARP_ELEVEN.alteration) == (11, 1)
        assert (Addition.FLAT_THIRTEEN.degree, Addition.FLAT_THIRTEEN.alteration) == (13, -1)

    def test_create_index_out_of_range(self) -> None:
        """Indices past the end of the source set fail on evaluation."""
        chord = Chord.create(Scale.MAJOR, [0, 7])
        with pytest.raises(IndexOutOfRangeError):
            chord(C4)

    def test_create_negative_index(self) -> None:
        """Negative indices fail immediately."""
        with pytest.raises(IndexOutOfRangeError):
            Chord.create(Scale.MAJOR, [-1])

    def test_empty_chord(self) -> None:
        """A chord needs at least one tone."""
        with pytest.raises(EmptyIntervalListError):
            Chord.from_intervals([])
        with pytest.raises(EmptyIntervalListError):
            Chord.create(Scale.MAJOR, [])

    def test_names(self) -> None:
        """Chords print their names."""
        assert str(Chord.DOMINANT_7) == "dominant 7"
        assert str(Chord.create(Scale.MAJOR, [0, 2, 4])) == "major [0, 2, 4]"

    def test_catalog(self) -> None:
        """Chords are enumerable."""
        catalog = Chord.catalog()
        assert len(catalog) == 17
        assert catalog["HALF_DIMINISHED_7"] is Chord.HALF_DIMINISHED_7


class TestHarmonicFunction:
    """Tests for functional harmony."""

    def test_tonic_equals_chord(self) -> None:
        """I in C is the C major triad."""
        assert Major.I(C4) == Chord.MAJOR(C4)

    def test_dominant(self) -> None:
        """V in C is G major."""
        assert str(Major.V(C4)) == "[G4, B4, D5]"

    def test_leading_tone(self) -> None:
        """vii° in C is B diminished."""
        assert str(Major.vii_dim(C4)) == "[B4, D5, F5]"

    def test_neapolitan(self) -> None:
        """bII is a major triad on the lowered second degree."""
        assert Major.bII(C5).steps == (73, 77, 80)
        assert str(Major.bII(C5)) == "[C♯5, F5, G♯5]"

    def test_v7_of_v(self) -> None:
        """Functions nest: V7 of V."""
        v7_of_v = HarmonicFunction.create(Scale.MAJOR, 5, Major.V7)
        assert str(v7_of_v(C5)) == "[D6, F♯6, A6, C7]"

    def test_minor_dominants(self) -> None:
        """Minor keys borrow V and vii° from harmonic minor."""
        a3 = Pitch(57)
        assert str(Minor.v(a3)) == "[E4, G4, B4]"
        assert str(Minor.V(a3)) == "[E4, G♯4, B4]"
        assert str(Minor.vii_dim7(a3)) == "[G♯4, B4, D5, F5]"

    def test_degree_past_octave(self) -> None:
        """Degrees beyond the scale continue into the next octave."""
        ninth = HarmonicFunction.create(Scale.MAJOR, 9, Chord.MAJOR)
        assert ninth.degree_root(C4) == Pitch(74)
        assert str(ninth(C4)) == "[D5, F♯5, A5]"

    def test_degree_wraps_by_scale_span(self) -> None:
        """Degrees past a non-octave scale continue by its span."""
        diminished = Scale.create([3, 3, 3])
        fourth = HarmonicFunction.create(diminished, 4, Chord.POWER)
        assert fourth.degree_root(C4) == Pitch(69)
        assert HarmonicFunction.create(diminished, 7, Chord.POWER).degree_root(C4) == Pitch(78)
        assert HarmonicFunction.create(Scale.MAJOR, 8, Chord.MAJOR).degree_root(C4) == C5

    def test_unnamed_harmonizers(self) -> None:
        """Harmonizers without a name print as their class."""
        function = HarmonicFunction.create(Scale.MAJOR, 5, Doubler())
        assert function(C4).steps == (67, 79)
        assert str(function) == "Doubler on degree 5 of major"
        on_doubler = HarmonicFunction.create(Doubler(), 2, Chord.MAJOR)
        assert on_doubler(C4).steps == (72, 76, 79)

    def test_degree_out_of_range(self) -> None:
        """Degrees are 1-based."""
        with pytest.raises(DegreeOutOfRangeError):
            HarmonicFunction.create(Scale.MAJOR, 0, Chord.MAJOR)

    def test_empty_scale(self) -> None:
        """A scale with no pitches cannot resolve a degree."""

        class Silence(Harmonizer):
            name = "silence"

            def __call__(self, root: Pitch) -> PitchSet:
                return PitchSet()

        function = HarmonicFunction.create(Silence(), 1, Chord.MAJOR)
        with pytest.raises(DegreeOutOfRangeError):
            function(C4)

    def test_diatonic_functions_stay_in_key(self) -> None:
        """Every diatonic major function uses only scale tones."""
        key = set(Scale.MAJOR(C4).gamut())
        for name, function in Major.catalog().items():
            if name == "bII":
                continue
            assert set(function(C4).gamut()) <= key, name

    def test_catalogs(self) -> None:
        """Functions are enumerable and looked up by name or symbol."""
        assert len(Major.catalog()) == 15
        assert len(Minor.catalog()) == 19
        assert Major.get("V7") is Major.V7
        assert Major.get("vii°") is Major.vii_dim
        assert Minor.get("ii_dim") is Minor.ii_dim
        with pytest.raises(KeyError):
            Major.get("VIII")

    def test_names(self) -> None:
        """Functions print as roman numerals."""
        assert str(Major.vii_half_dim7) == "viiø7"
        assert str(Minor.III7) == "IIIΔ7"


class TestProgression:
    """Tests for the progression combinator."""

    def test_plagal_cadence(self) -> None:
        """IV - I in G."""
        g4 = Pitch.from_pitch_class(PitchClass.G, 4)
        cadence = progression([Major.IV, Major.I], g4)
        assert [str(chord) for chord in cadence] == ["[C5, E5, G5]", "[G4, B4, D5]"]

    def test_mixed_harmonizers(self) -> None:
        """Scales, chords and functions mix freely."""
        result = progression([Scale.MAJOR, Chord.MAJOR, Major.V], C4)
        assert [len(pitches) for pitches in result] == [7, 3, 3]

    def test_unnamed_harmonizer(self, caplog: pytest.LogCaptureFixture) -> None:
        """A harmonizer that only defines __call__ works in a progression."""
        caplog.set_level(logging.DEBUG, logger="chuk_harmony.core.harmonizer")
        assert str(Doubler()) == "Doubler"
        assert progression([Doubler()], C4) == [PitchSet([C4, C5])]
        assert "Doubler at C4" in caplog.text

    def test_empty(self) -> None:
        """No harmonizers, no pitch sets."""
        assert progression([], C4) == []

    def test_logs_each_step(self, caplog: pytest.LogCaptureFixture) -> None:
        """Each evaluation is logged at debug level."""
        caplog.set_level(logging.DEBUG, logger="chuk_harmony.core.harmonizer")
        progression([Major.ii, Major.V7, Major.I], C4)
        assert "V7 at C4" in caplog.text
