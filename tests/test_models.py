"""Tests for interval, window and config models."""

from datetime import date, time, timedelta

import pytest
from pydantic import ValidationError

from obswindow.errors import InvalidIntervalLabel, InvalidTimeOfDay
from obswindow.models import (
    STEP_RULES,
    IntervalLabel,
    ServiceConfig,
    StepKind,
    StepRule,
    TimeWindow,
    hour_choices,
    interval_choices,
    parse_hour,
    parse_time_of_day,
)
from obswindow.models.config import CouncilServer, parse_servers


class TestIntervals:
    def test_every_label_has_a_rule(self):
        assert set(STEP_RULES) == set(IntervalLabel)

    def test_rules(self):
        assert IntervalLabel.TWENTY_FOUR_HOURS.rule == StepRule(StepKind.HOURS, 24)
        assert IntervalLabel.ONE_WEEK.rule == StepRule(StepKind.DAYS, 7)
        assert IntervalLabel.SIX_MONTHS.rule == StepRule(StepKind.MONTHS, 6)
        assert IntervalLabel.TWELVE_MONTHS.rule == StepRule(StepKind.YEARS, 1)

    def test_is_hourly(self):
        hourly = [label.value for label in IntervalLabel if label.is_hourly]
        assert hourly == ["1 hour", "3 hours", "6 hours", "12 hours", "24 hours"]

    def test_describe(self):
        assert StepRule(StepKind.HOURS, 1).describe() == "+1 hour"
        assert StepRule(StepKind.MONTHS, 3).describe() == "+3 months"

    def test_choices_are_shortest_first(self):
        choices = interval_choices()
        assert "24 hours" in choices
        assert choices[0] == "1 hour"
        assert choices[-1] == "12 months"
        assert len(choices) == 16

    def test_hour_choices(self):
        hours = hour_choices()
        assert len(hours) == 24
        assert hours[0] == "00:00:00"
        assert hours[9] == "09:00:00"
        assert hours[-1] == "23:00:00"

    def test_parse_rejects_unknown(self):
        with pytest.raises(InvalidIntervalLabel, match="2 weeks"):
            IntervalLabel.parse("2 weeks")


class TestTimeOfDay:
    @pytest.mark.parametrize("value,expected", [
        ("00", time(0)),
        ("09", time(9)),
        ("23:30", time(23, 30)),
        ("07:05:09", time(7, 5, 9)),
        (" 12:00:00 ", time(12)),
    ])
    def test_parse(self, value, expected):
        assert parse_time_of_day(value) == expected

    def test_parse_hour(self):
        assert parse_hour("18:00:00") == 18

    def test_rejects_non_string(self):
        with pytest.raises(InvalidTimeOfDay):
            parse_time_of_day(9)


class TestTimeWindow:
    def test_properties(self):
        window = TimeWindow(
            start_date=date(2014, 8, 1),
            start_time="23",
            end_date=date(2014, 8, 2),
            end_time="00:00:00",
        )

        assert window.start.isoformat() == "2014-08-01T23:00:00"
        assert window.end.isoformat() == "2014-08-02T00:00:00"
        assert window.duration == timedelta(hours=1)
        assert window.interval is None

    def test_format_end_date(self):
        window = TimeWindow(
            start_date=date(2014, 8, 1),
            start_time="00",
            end_date=date(2014, 8, 2),
            end_time="00",
        )

        assert window.format_end_date() == "02-Aug-2014"

    def test_end_must_follow_start(self):
        with pytest.raises(ValidationError):
            TimeWindow(
                start_date=date(2014, 8, 2),
                start_time="00",
                end_date=date(2014, 8, 1),
                end_time="00",
            )

    def test_rejects_bad_time(self):
        with pytest.raises(ValidationError):
            TimeWindow(
                start_date=date(2014, 8, 1),
                start_time="25:00:00",
                end_date=date(2014, 8, 2),
                end_time="00",
            )

    def test_frozen(self):
        window = TimeWindow(
            start_date=date(2014, 8, 1),
            start_time="00",
            end_date=date(2014, 8, 2),
            end_time="00",
        )

        with pytest.raises(ValidationError):
            window.end_time = "01"


class TestServiceConfig:
    def test_defaults(self):
        config = ServiceConfig()

        assert [s.name for s in config.servers] == ["Northland", "Horizons", "Marlborough"]
        assert config.servers[0].service_url == "http://hilltop.nrc.govt.nz/data.hts"
        assert config.default_interval is IntervalLabel.ONE_DAY
        assert config.timezone == "Pacific/Auckland"

    def test_base_url_gets_trailing_slash(self, horizons):
        assert horizons.service_url == "http://hilltopserver.horizons.govt.nz/data.hts"

    def test_get_server(self):
        config = ServiceConfig()

        assert config.get_server().name == "Northland"
        assert config.get_server("marlborough").name == "Marlborough"
        with pytest.raises(LookupError, match="Otago"):
            config.get_server("Otago")

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("OBSWINDOW_DEFAULT_INTERVAL", "3 months")
        monkeypatch.setenv("OBSWINDOW_DEFAULT_TIME", "09:00:00")
        monkeypatch.setenv("OBSWINDOW_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("OBSWINDOW_SERVERS", "Otago=http://gisdata.orc.govt.nz/, ")
        monkeypatch.setenv("OBSWINDOW_MEASUREMENTS", "Flow, Stage")

        config = ServiceConfig.from_env()

        assert config.default_interval is IntervalLabel.THREE_MONTHS
        assert config.default_time_of_day == "09:00:00"
        assert config.log_level == "DEBUG"
        assert config.servers == [CouncilServer(name="Otago", base_url="http://gisdata.orc.govt.nz/")]
        assert config.measurements == ["Flow", "Stage"]

    def test_from_env_file(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("OBSWINDOW_TIMEZONE=UTC\n")
        # Registered so teardown removes the value load_dotenv sets
        monkeypatch.setenv("OBSWINDOW_TIMEZONE", "")
        monkeypatch.delenv("OBSWINDOW_TIMEZONE")

        config = ServiceConfig.from_env()

        assert config.timezone == "UTC"

    def test_from_env_rejects_unknown_interval(self, monkeypatch):
        monkeypatch.setenv("OBSWINDOW_DEFAULT_INTERVAL", "fortnight")

        with pytest.raises(InvalidIntervalLabel):
            ServiceConfig.from_env()

    def test_parse_servers_rejects_missing_url(self):
        with pytest.raises(ValueError, match="name=url"):
            parse_servers("Otago")
