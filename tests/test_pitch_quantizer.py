"""
Tests for src/pitch_quantizer.py — Hz ↔ pitch number ↔ note name.
"""

import pytest

from pitch_quantizer import (
    _round_half_away,
    frequency_to_pitch,
    pitch_to_name,
)

# ---------------------------------------------------------------------------
# frequency_to_pitch
# ---------------------------------------------------------------------------


class TestFrequencyToPitch:
    def test_a4_is_69(self):
        assert frequency_to_pitch(440.0) == 69

    def test_c4_is_60(self):
        assert frequency_to_pitch(261.63) == 60

    def test_a3_is_57(self):
        assert frequency_to_pitch(220.0) == 57

    @pytest.mark.parametrize("freq", [0.0, -1.0, -440.0, float("nan"), float("-inf")])
    def test_non_positive_is_no_pitch(self, freq):
        assert frequency_to_pitch(freq) is None

    def test_above_range_is_no_pitch(self):
        assert frequency_to_pitch(1_000_000.0) is None

    def test_infinite_frequency_is_no_pitch(self):
        """+inf passes the positivity check but has no pitch number."""
        assert frequency_to_pitch(float("inf")) is None

    def test_below_range_is_no_pitch(self):
        """7.5 Hz rounds to pitch -1."""
        assert frequency_to_pitch(7.5) is None

    def test_lowest_pitch(self):
        assert frequency_to_pitch(8.1758) == 0

    def test_highest_pitch(self):
        assert frequency_to_pitch(12543.85) == 127

    def test_custom_reference(self):
        """A4 tuned to 432 Hz."""
        assert frequency_to_pitch(432.0, reference_freq=432.0) == 69
        assert frequency_to_pitch(440.0, reference_freq=432.0) == 69

    def test_custom_reference_pitch(self):
        assert frequency_to_pitch(440.0, reference_pitch=57) == 57

    def test_rejects_bad_reference(self):
        with pytest.raises(ValueError, match="reference_freq"):
            frequency_to_pitch(440.0, reference_freq=0.0)


class TestRoundHalfAway:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(69.5, 70), (2.5, 3), (-0.5, -1), (-1.4, -1), (68.49, 68), (0.0, 0)],
    )
    def test_rounding(self, value, expected):
        assert _round_half_away(value) == expected


# ---------------------------------------------------------------------------
# pitch_to_name
# ---------------------------------------------------------------------------


class TestPitchToName:
    @pytest.mark.parametrize(
        ("pitch", "name"),
        [(69, "A4"), (60, "C4"), (61, "C#4"), (72, "C5"), (127, "G9"), (24, "C1")],
    )
    def test_names(self, pitch, name):
        assert pitch_to_name(pitch) == name

    def test_octave_never_negative(self):
        assert pitch_to_name(0) == "C0"
        assert pitch_to_name(11) == "B0"
        assert pitch_to_name(12) == "C0"

    def test_round_trip_a4(self):
        assert pitch_to_name(frequency_to_pitch(440.0)) == "A4"

    def test_round_trip_middle_c(self):
        assert pitch_to_name(frequency_to_pitch(261.63)) == "C4"

