"""Tests for roster text generation."""

import pytest

from supportroster.domain.models import Epoch, Schedule, Shift
from supportroster.errors import LegacyLayoutError, OutputWriteError
from supportroster.output.roster_generator import RosterGenerator

WEEK = ["2019-11-18", "2019-11-19", "2019-11-20", "2019-11-21", "2019-11-22"]


def week_schedule(days: int = 5) -> Schedule:
    """A schedule with one four-hour shift per day, starting Monday."""
    dates = WEEK + ["2019-11-23", "2019-11-24"]
    return Schedule(
        epochs=[
            Epoch(start_date=d, shifts=[Shift(f"@agent{i}", 18, 26)])
            for i, d in enumerate(dates[:days])
        ]
    )


class TestRosterGenerator:
    """Tests for RosterGenerator."""

    @pytest.fixture
    def generator(self):
        return RosterGenerator()

    @pytest.fixture
    def small_schedule(self):
        return Schedule(
            epochs=[
                Epoch(
                    start_date="2019-11-18",
                    shifts=[
                        Shift("@alice <alice@example.com>", 0, 4),
                        Shift("@bob", 1, 3),
                    ],
                )
            ]
        )

    def test_full_output(self, generator, small_schedule):
        expected = (
            "\nShifts for Monday, November 18th\n"
            "00:00 - 02:00 (2 hours) - @alice\n"
            "00:30 - 01:30 (1 hours) - @bob\n"
            "\n#rollcall\n\n"
            "Support hours\n-------------\n"
            "alice: 2\n"
            "bob: 1\n"
            "\n\nAgents per day \n\n"
            " \t\tMon"
            "\n0\t\t1.5"
            "\n1\t\t1.5"
            + "".join(f"\n{i}\t\t0" for i in range(2, 24))
            + "".join(f"\n{i}\t\t0" for i in range(3))
        )
        assert generator.generate_to_string(small_schedule) == expected

    def test_one_header_per_epoch_in_order(self, generator):
        content = generator.generate_to_string(week_schedule())
        assert content.count("Shifts for ") == 5
        positions = [
            content.index(f"Shifts for {day}")
            for day in [
                "Monday, November 18th",
                "Tuesday, November 19th",
                "Wednesday, November 20th",
                "Thursday, November 21st",
                "Friday, November 22nd",
            ]
        ]
        assert positions == sorted(positions)

    def test_half_hour_shift_line(self, generator):
        schedule = Schedule(
            epochs=[Epoch(start_date="2019-11-18", shifts=[Shift("Jane Doe <jane@example.com>", 17, 34)])]
        )
        content = generator.generate_to_string(schedule)
        assert "08:30 - 17:00 (8.5 hours) - Jane Doe\n" in content
        assert "Jane Doe: 8.5\n" in content
        assert "jane@example.com" not in content

    def test_support_hours_descending(self, generator):
        schedule = Schedule(
            epochs=[
                Epoch(start_date="2019-11-18", shifts=[Shift("@a", 0, 2), Shift("@b", 0, 4)]),
                Epoch(start_date="2019-11-19", shifts=[Shift("@a", 10, 14), Shift("@b", 10, 16)]),
            ]
        )
        content = generator.generate_to_string(schedule)
        assert "Support hours\n-------------\nb: 5\na: 3\n" in content

    def test_table_width_follows_epoch_count(self, generator):
        content = generator.generate_to_string(week_schedule(3))
        table = content.split("Agents per day \n\n", 1)[1]
        rows = table.split("\n")

        assert rows[0] == " \t\tMon\t\tTue\t\tWed"
        assert len(rows) == 28
        assert rows[10] == "9\t\t1\t\t1\t\t1"
        assert rows[25] == "0\t\t0\t\t0\t\t0"

    def test_content_has_no_trailing_newline(self, generator):
        assert not generator.generate_to_string(week_schedule()).endswith("\n")

    def test_generate_writes_file(self, generator, small_schedule, tmp_path):
        path = tmp_path / "beautified-schedule.txt"
        content = generator.generate(small_schedule, path)
        assert path.read_text(encoding="utf-8") == content

    def test_generate_overwrites_existing_file(self, generator, small_schedule, tmp_path):
        path = tmp_path / "beautified-schedule.txt"
        path.write_text("stale")
        generator.generate(small_schedule, path)
        assert "stale" not in path.read_text(encoding="utf-8")

    def test_write_failure_raises(self, generator, small_schedule, tmp_path):
        with pytest.raises(OutputWriteError):
            generator.generate(small_schedule, tmp_path / "missing" / "roster.txt")


class TestLegacyColumns:
    """The original table always rendered exactly five day columns."""

    @pytest.fixture
    def generator(self):
        return RosterGenerator(legacy_columns=True)

    def test_five_epochs_match_default_layout(self, generator):
        schedule = week_schedule(5)
        assert generator.generate_to_string(schedule) == RosterGenerator().generate_to_string(schedule)

    def test_extra_epochs_are_left_out_of_rows(self, generator):
        content = generator.generate_to_string(week_schedule(7))
        table = content.split("Agents per day \n\n", 1)[1]
        rows = table.split("\n")

        assert rows[0].count("\t\t") == 7
        assert all(row.count("\t\t") == 5 for row in rows[1:])

    def test_fewer_than_five_epochs(self, generator):
        with pytest.raises(LegacyLayoutError):
            generator.generate_to_string(week_schedule(4))
