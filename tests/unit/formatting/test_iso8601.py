"""Unit tests for ISO 8601 formatters."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

import pytest
from pydantic import ValidationError

from format_time.config import ConfigError, ConfigValidationError, Iso8601Options
from format_time.formatting.fields import floor_seconds2, seconds2, seconds_ms
from format_time.formatting.iso8601 import (
    LEADING_MARKERS,
    SECONDS_FORMATTERS,
    SEPARATORS,
    human_iso8601,
    iso8601,
    iso8601_from_config,
    resolve_options,
)
from format_time.types import Time


class TestIso8601:
    """Test suite for the iso8601 factory."""

    def test_default_keeps_fraction(self, sample_time: Time) -> None:
        """Test default options: extended, no rounding, leading T."""
        assert iso8601()(sample_time) == "T11:58:27.63981"

    def test_round_seconds(self, sample_time: Time) -> None:
        """Test whole-second truncation."""
        assert iso8601(round="seconds")(sample_time) == "T11:58:27"

    def test_round_ms(self, sample_time: Time) -> None:
        """Test millisecond truncation."""
        assert iso8601(round="ms")(sample_time) == "T11:58:27.639"

    def test_basic_format(self, sample_time: Time) -> None:
        """Test basic format drops the separators."""
        assert iso8601(format="basic")(sample_time) == "T115827.63981"

    def test_without_leading_t(self, sample_time: Time) -> None:
        """Test the leading marker can be omitted."""
        assert iso8601(leading_t=False)(sample_time) == "11:58:27.63981"

    def test_midnight(self) -> None:
        """Test a zeroed time."""
        assert iso8601()(Time()) == "T00:00:00"

    def test_whole_seconds_without_rounding(self) -> None:
        """Test integral seconds render without a fraction."""
        assert iso8601()(Time(hours=13, minutes=5, seconds=30)) == "T13:05:30"

    def test_all_options_combined(self, sample_time: Time) -> None:
        """Test basic format, ms rounding and no marker together."""
        formatter = iso8601(format="basic", round="ms", leading_t=False)
        assert formatter(sample_time) == "115827.639"

    def test_mapping_with_alias(self, sample_time: Time) -> None:
        """Test options given as a mapping using the leadingT alias."""
        formatter = iso8601({"leadingT": False, "round": "seconds"})
        assert formatter(sample_time) == "11:58:27"

    def test_options_model(self, sample_time: Time) -> None:
        """Test options given as an Iso8601Options instance."""
        options = Iso8601Options(format="basic", round="seconds")
        assert iso8601(options)(sample_time) == "T115827"

    def test_keyword_overrides_win(self, sample_time: Time) -> None:
        """Test keyword arguments override the options argument."""
        formatter = iso8601({"leadingT": True, "format": "basic"}, leading_t=False)
        assert formatter(sample_time) == "115827.63981"

    def test_out_of_range_values_are_not_clamped(self) -> None:
        """Test the formatter renders whatever values it receives."""
        time = Time(hours=25, minutes=61, seconds=75)
        assert iso8601()(time) == "T25:61:75"


class TestIso8601Configuration:
    """Test that invalid options fail when the formatter is built."""

    @pytest.mark.parametrize(
        "overrides",
        [
            {"round": "hours"},
            {"format": "compact"},
            {"leading_t": "yes"},
            {"separator": "-"},
        ],
    )
    def test_invalid_option_raises(self, overrides: dict[str, object]) -> None:
        """Test each kind of invalid option raises ConfigValidationError."""
        with pytest.raises(ConfigValidationError):
            _ = iso8601(**overrides)

    def test_error_names_option_and_value(self) -> None:
        """Test the message names the offending option and value."""
        with pytest.raises(ConfigValidationError, match="'round'='hours'") as exc_info:
            _ = iso8601(round="hours")

        assert isinstance(exc_info.value, ConfigError)
        assert isinstance(exc_info.value.__cause__, ValidationError)
        errors = exc_info.value.context["validation_errors"]
        assert errors[0]["field"] == "round"
        assert errors[0]["input"] == "hours"

    def test_invalid_mapping_raises(self) -> None:
        """Test invalid values in a mapping are rejected too."""
        with pytest.raises(ConfigValidationError, match="'format'='compact'"):
            _ = iso8601({"format": "compact"})

    def test_resolve_options_defaults(self) -> None:
        """Test resolving no options yields the defaults."""
        assert resolve_options() == Iso8601Options()


class TestLookupTables:
    """Test the option-to-part lookup tables."""

    def test_tables_cover_every_option_value(self) -> None:
        """Test each option value maps to exactly one part."""
        assert dict(LEADING_MARKERS) == {True: "T", False: ""}
        assert dict(SEPARATORS) == {"basic": "", "extended": ":"}
        assert dict(SECONDS_FORMATTERS) == {
            "none": seconds2,
            "seconds": floor_seconds2,
            "ms": seconds_ms,
        }

    def test_construction_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test the selected options are logged at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="format_time"):
            _ = iso8601(round="ms")
        assert "round=ms" in caplog.text


class TestHumanIso8601:
    """Test suite for the human_iso8601 constant."""

    def test_human_iso8601(self) -> None:
        """Test HH:MM:SS with no marker."""
        assert human_iso8601(Time(hours=13, minutes=5, seconds=30)) == "13:05:30"

    def test_truncates_fraction(self, sample_time: Time) -> None:
        """Test fractional seconds are truncated, not rounded."""
        assert human_iso8601(sample_time) == "11:58:27"
        assert human_iso8601(Time(hours=9, minutes=0, seconds=59.99)) == "09:00:59"

    def test_matches_factory(self, sample_time: Time) -> None:
        """Test the constant equals the equivalent factory call."""
        equivalent = iso8601({"round": "seconds", "leadingT": False})
        assert human_iso8601(sample_time) == equivalent(sample_time)


class TestIso8601FromConfig:
    """Test suite for iso8601_from_config."""

    def test_from_yaml_file(
        self, write_config: Callable[[str], Path], sample_time: Time
    ) -> None:
        """Test options are read from a YAML file."""
        path = write_config("format: basic\nround: ms\n")
        assert iso8601_from_config(path)(sample_time) == "T115827.639"

    def test_environment_overrides_file(
        self,
        write_config: Callable[[str], Path],
        sample_time: Time,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test environment variables take precedence over the file."""
        path = write_config("leadingT: true\nround: ms\n")
        monkeypatch.setenv("FORMAT_TIME_ISO8601_LEADING_T", "false")
        assert iso8601_from_config(path)(sample_time) == "11:58:27.639"

    def test_defaults_without_sources(self, sample_time: Time) -> None:
        """Test no file and no environment gives the default formatter."""
        assert iso8601_from_config()(sample_time) == iso8601()(sample_time)
