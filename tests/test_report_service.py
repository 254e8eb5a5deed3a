"""Unit tests for the reporting projection — pure functions, no database."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from datetime import date, datetime, timedelta
from mileage_tracker.models.mileage_entry import MileageEntry
from mileage_tracker.models.vehicle import Vehicle
from mileage_tracker.services import report_service

TODAY = date(2026, 3, 10)


def make_vehicle(vid="v1", name="Patrol 1", plate="ABC-123", active=True):
    return Vehicle(id=vid, name=name, license_plate=plate, is_active=active)


def make_entry(day, miles=10, vehicle_id="v1", supervisor="Jordan Lee", shift="first", status="completed",
               start=1000):
    completed = status == "completed"
    return MileageEntry(
        id=f"{vehicle_id}-{day.isoformat()}-{miles}-{shift}",
        vehicle_id=vehicle_id,
        supervisor_name=supervisor,
        shift=shift,
        date=day,
        start_time=datetime.combine(day, datetime.min.time()) + timedelta(hours=8),
        start_mileage=start,
        end_mileage=start + miles if completed else None,
        total_miles=miles if completed else None,
        status=status,
    )


class TestDailyCoverage:
    def test_window_is_oldest_first(self):
        days = report_service.window_dates(TODAY, 7)
        assert days[0] == TODAY - timedelta(days=6)
        assert days[-1] == TODAY
        assert len(days) == 7

    def test_missing_days_flagged(self):
        day1 = TODAY - timedelta(days=6)
        entries = [
            make_entry(day1, 30),
            make_entry(day1 + timedelta(days=2), 20),
            make_entry(day1 + timedelta(days=4), 15),
        ]
        report = report_service.daily_coverage(entries, make_vehicle(), TODAY, days=7)

        expected_missing = [day1 + timedelta(days=n) for n in (1, 3, 5, 6)]
        assert report.missing_days == expected_missing
        assert report.days_with_mileage == 3
        assert report.total_miles == 65
        assert [d.miles for d in report.days] == [30, 0, 20, 0, 15, 0, 0]
        assert report.today.is_today and not report.today.has_entry

    def test_only_completed_entries_of_vehicle_count(self):
        entries = [
            make_entry(TODAY, 40),
            make_entry(TODAY, status="active"),
            make_entry(TODAY, 99, vehicle_id="v2"),
            make_entry(TODAY - timedelta(days=30), 500),
        ]
        report = report_service.daily_coverage(entries, make_vehicle(), TODAY, days=7)
        assert report.total_miles == 40
        assert report.today.entry_count == 1

    def test_multiple_entries_same_day_summed(self):
        entries = [make_entry(TODAY, 10, shift="first"), make_entry(TODAY, 25, shift="second")]
        report = report_service.daily_coverage(entries, make_vehicle(), TODAY, days=7)
        assert report.today.miles == 35
        assert report.today.entry_count == 2

    def test_dangling_vehicle_id(self):
        report = report_service.daily_coverage([make_entry(TODAY, 5, vehicle_id="gone")], "gone", TODAY, days=7)
        assert report.vehicle_name == report_service.UNKNOWN_VEHICLE
        assert report.total_miles == 5

    def test_fleet_coverage_skips_inactive(self):
        vehicles = [make_vehicle(), make_vehicle("v2", "Patrol 2", "XYZ-1", active=False)]
        reports = report_service.fleet_coverage([], vehicles, TODAY, days=7)
        assert [r.vehicle_id for r in reports] == ["v1"]


class TestPeriodSummary:
    def test_empty_period_has_zero_average(self):
        summary = report_service.period_summary([], [], "week", TODAY)
        assert summary.total_shifts == 0
        assert summary.average_miles_per_shift == 0
        assert summary.first_shift_percent == 0
        assert summary.second_shift_percent == 0

    def test_totals_and_distribution(self):
        entries = [
            make_entry(TODAY, 30, shift="first"),
            make_entry(TODAY - timedelta(days=1), 20, shift="first"),
            make_entry(TODAY - timedelta(days=2), 10, shift="second", supervisor="Sam Ortiz"),
            make_entry(TODAY - timedelta(days=3), 0, shift="second", vehicle_id="v2"),
        ]
        summary = report_service.period_summary(entries, [make_vehicle()], "week", TODAY)

        assert summary.total_shifts == 4
        assert summary.total_miles == 60
        assert summary.average_miles_per_shift == 15.0
        assert summary.first_shift_count == 2
        assert summary.second_shift_percent == 50.0
        assert summary.by_vehicle[0].key == "v1"
        assert summary.by_vehicle[0].miles == 60
        assert summary.by_vehicle[1].label == report_service.UNKNOWN_VEHICLE
        assert [s.label for s in summary.by_supervisor] == ["Jordan Lee", "Sam Ortiz"]

    def test_period_windows(self):
        entries = [
            make_entry(TODAY, 1),
            make_entry(TODAY - timedelta(days=6), 2),
            make_entry(TODAY - timedelta(days=7), 4),
            make_entry(TODAY - timedelta(days=29), 8),
            make_entry(TODAY - timedelta(days=30), 16),
        ]
        miles = {p: report_service.period_summary(entries, [], p, TODAY).total_miles
                 for p in ("today", "week", "month", "all")}
        assert miles == {"today": 1, "week": 3, "month": 15, "all": 31}

    def test_filters(self):
        entries = [
            make_entry(TODAY, 10),
            make_entry(TODAY, 20, vehicle_id="v2"),
            make_entry(TODAY, 40, supervisor="Sam Ortiz"),
        ]
        by_vehicle = report_service.period_summary(entries, [], "all", TODAY, vehicle_id="v2")
        by_supervisor = report_service.period_summary(entries, [], "all", TODAY, supervisor_name="Sam Ortiz")
        assert by_vehicle.total_miles == 20
        assert by_supervisor.total_miles == 40

    def test_active_shifts_counted_regardless_of_period(self):
        entries = [make_entry(TODAY - timedelta(days=1), status="active"), make_entry(TODAY, 12)]
        summary = report_service.period_summary(entries, [], "today", TODAY)
        assert summary.active_shifts == 1
        assert summary.total_shifts == 1

    def test_input_order_does_not_matter(self):
        entries = [make_entry(TODAY - timedelta(days=n), n + 1, shift="first" if n % 2 else "second")
                   for n in range(5)]
        a = report_service.period_summary(entries, [], "week", TODAY)
        b = report_service.period_summary(list(reversed(entries)), [], "week", TODAY)
        assert a == b


class TestDashboard:
    def test_today_numbers(self):
        now = datetime(2026, 3, 10, 18, 0)
        entries = [
            make_entry(TODAY, 30, shift="first"),
            make_entry(TODAY, shift="second", status="active", vehicle_id="v2"),
            make_entry(TODAY - timedelta(days=1), 50),
        ]
        vehicles = [make_vehicle(), make_vehicle("v2", "Patrol 2", "XYZ-1"),
                    make_vehicle("v3", "Spare", "SPR-1", active=False)]

        board = report_service.dashboard(entries, vehicles, now)

        assert board.current_shift == "second"
        assert board.current_shift_label == "Second Shift (5PM - 5AM)"
        assert board.active_shifts == 1
        assert board.available_vehicles == 2
        assert board.miles_today == 30
        assert board.completed_today == 1
        assert board.first_shift_today == 1
        assert board.second_shift_today == 1
        assert board.active_entries[0].vehicle_id == "v2"
