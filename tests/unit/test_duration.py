"""Unit tests for duration parsing."""

import pytest


@pytest.mark.core
@pytest.mark.tra("Domain.Duration")
class TestParseDurationMs:
    """Tests for parse_duration_ms()."""

    @pytest.mark.parametrize(
        ("duration", "expected"),
        [
            ("1d", 86_400_000),
            ("2h", 7_200_000),
            ("30m", 1_800_000),
            ("45s", 45_000),
            ("100u", 100),
            ("1d12h", 129_600_000),
            ("1h30m", 5_400_000),
            ("3d12h", 302_400_000),
        ],
    )
    def test_known_units(self, duration: str, expected: int) -> None:
        """Each unit should be scaled to milliseconds and pairs summed."""
        from swmanifest.core.duration import parse_duration_ms

        assert parse_duration_ms(duration) == expected

    def test_repeated_units_are_summed(self) -> None:
        """The same unit may appear more than once."""
        from swmanifest.core.duration import parse_duration_ms

        assert parse_duration_ms("1s1s") == 2_000

    def test_unknown_unit_raises(self) -> None:
        """"5x" should fail with MalformedDurationError."""
        from swmanifest.core.duration import parse_duration_ms
        from swmanifest.core.exceptions import MalformedDurationError

        with pytest.raises(MalformedDurationError) as exc_info:
            parse_duration_ms("5x")

        assert exc_info.value.duration == "5x"
        assert exc_info.value.unit == "x"

    @pytest.mark.parametrize("duration", ["5dd", "1d 2h", "10ms"])
    def test_unit_must_match_whole_token(self, duration: str) -> None:
        """Units with extra characters are rejected, not partially matched."""
        from swmanifest.core.duration import parse_duration_ms
        from swmanifest.core.exceptions import MalformedDurationError

        with pytest.raises(MalformedDurationError):
            parse_duration_ms(duration)

    @pytest.mark.parametrize("duration", ["", "abc", "12"])
    def test_input_without_pairs_is_zero(self, duration: str) -> None:
        """Strings without any <digits><unit> pair parse to 0."""
        from swmanifest.core.duration import parse_duration_ms

        assert parse_duration_ms(duration) == 0

    def test_error_has_recovery_hint(self) -> None:
        """The error should explain the accepted units."""
        from swmanifest.core.duration import parse_duration_ms
        from swmanifest.core.exceptions import MalformedDurationError

        with pytest.raises(MalformedDurationError) as exc_info:
            parse_duration_ms("7w")

        hint = exc_info.value.recovery_hint
        assert "d, h, m, s" in hint
