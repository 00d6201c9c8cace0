"""Tests for schedule models and loading."""

import json
from datetime import date

import pytest

from supportroster.domain.models import Epoch, Schedule, Shift, load_schedule
from supportroster.errors import RosterError, ScheduleLoadError


class TestShift:
    """Tests for Shift."""

    def test_duration_in_hours(self):
        shift = Shift(agent="@jane", start=0, end=4)
        assert shift.duration_hours == 2
        assert shift.unit_count == 4

    def test_odd_length_duration(self):
        assert Shift(agent="@jane", start=1, end=4).duration_hours == 1.5

    def test_units_exclude_end(self):
        assert list(Shift(agent="@jane", start=2, end=5).units()) == [2, 3, 4]

    def test_display_name_strips_contact(self):
        shift = Shift(agent="Jane Doe <jane@example.com>", start=0, end=2)
        assert shift.display_name == "Jane Doe"

    def test_from_dict(self):
        shift = Shift.from_dict({"agent": "@bob", "start": 16, "end": 34})
        assert shift == Shift(agent="@bob", start=16, end=34)


class TestEpoch:
    """Tests for Epoch."""

    def test_day_from_plain_date(self):
        assert Epoch(start_date="2019-11-18").day == date(2019, 11, 18)

    def test_day_from_timestamp_keeps_written_date(self):
        assert Epoch(start_date="2019-11-18T00:00:00Z").day == date(2019, 11, 18)
        assert Epoch(start_date="2019-11-18T23:30:00-08:00").day == date(2019, 11, 18)

    def test_total_hours(self):
        epoch = Epoch(
            start_date="2019-11-18",
            shifts=[Shift("@a", 0, 4), Shift("@b", 10, 13)],
        )
        assert epoch.total_hours == 3.5


class TestLoadSchedule:
    """Tests for reading scheduler output files."""

    @pytest.fixture
    def schedule_data(self):
        return [
            {
                "start_date": "2019-11-18",
                "shifts": [
                    {"agent": "@alice <alice@example.com>", "start": 16, "end": 32},
                    {"agent": "@bob", "start": 20, "end": 36},
                ],
            },
            {
                "start_date": "2019-11-19",
                "shifts": [{"agent": "@carol", "start": 14, "end": 30}],
            },
        ]

    def test_loads_epochs_in_order(self, tmp_path, schedule_data):
        path = tmp_path / "schedule.json"
        path.write_text(json.dumps(schedule_data))

        schedule = load_schedule(path)

        assert schedule.num_epochs == 2
        assert schedule.start_date == "2019-11-18"
        assert [e.start_date for e in schedule.epochs] == ["2019-11-18", "2019-11-19"]
        assert schedule.epochs[0].shifts[1] == Shift("@bob", 20, 36)

    def test_from_json_matches_load(self, tmp_path, schedule_data):
        path = tmp_path / "schedule.json"
        path.write_text(json.dumps(schedule_data))
        assert load_schedule(str(path)) == Schedule.from_json(schedule_data)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ScheduleLoadError, match="cannot read"):
            load_schedule(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("[{not json")
        with pytest.raises(ScheduleLoadError, match="not valid JSON"):
            load_schedule(path)

    def test_load_error_is_roster_error(self, tmp_path):
        with pytest.raises(RosterError):
            load_schedule(tmp_path / "missing.json")

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'[{"start_date": "2019-11-18", "shifts": [{"agent": "\xff", "start": 0, "end": 2}]}]')
        with pytest.raises(ScheduleLoadError, match="not UTF-8"):
            load_schedule(path)

    def test_empty_schedule(self, tmp_path):
        path = tmp_path / "empty.json"
        path.write_text("[]")
        with pytest.raises(ScheduleLoadError, match="no epochs"):
            load_schedule(path)
