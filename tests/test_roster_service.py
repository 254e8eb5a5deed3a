"""Unit tests for the vehicle and supervisor rosters."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from datetime import datetime
from unittest.mock import MagicMock, patch
from mileage_tracker.exceptions import ConflictError, NotFoundError
from mileage_tracker.services import roster_service
from mileage_tracker.services.roster_service import SUPERVISORS, VEHICLES


class TestVehicleRoster:
    def test_plate_is_normalized(self, db):
        v = roster_service.create_record(db, VEHICLES, {"name": "Patrol 7", "license_plate": "  abc-777 "})
        assert v.license_plate == "ABC-777"
        assert v.is_active is True

    def test_duplicate_plate_case_insensitive(self, db):
        roster_service.create_record(db, VEHICLES, {"name": "Patrol 1", "license_plate": "ABC-123"})
        with pytest.raises(ConflictError):
            roster_service.create_record(db, VEHICLES, {"name": "Patrol 2", "license_plate": "abc-123"})

    def test_duplicate_of_inactive_plate_conflicts(self, db):
        roster_service.create_record(db, VEHICLES, {"name": "Old", "license_plate": "OLD-1", "is_active": False})
        with pytest.raises(ConflictError):
            roster_service.create_record(db, VEHICLES, {"name": "New", "license_plate": "old-1"})

    def test_update_to_taken_plate_conflicts(self, db):
        roster_service.create_record(db, VEHICLES, {"name": "A", "license_plate": "AAA-1"})
        b = roster_service.create_record(db, VEHICLES, {"name": "B", "license_plate": "BBB-1"})
        with pytest.raises(ConflictError):
            roster_service.update_record(db, VEHICLES, b.id, {"license_plate": "aaa-1"})

    def test_update_keeping_own_plate(self, db):
        a = roster_service.create_record(db, VEHICLES, {"name": "A", "license_plate": "AAA-1"})
        updated = roster_service.update_record(db, VEHICLES, a.id, {"name": "A2", "license_plate": "aaa-1"})
        assert updated.name == "A2"
        assert updated.license_plate == "AAA-1"

    def test_toggle_inactive_removes_from_available(self, db):
        a = roster_service.create_record(db, VEHICLES, {"name": "A", "license_plate": "AAA-1"})
        roster_service.create_record(db, VEHICLES, {"name": "B", "license_plate": "BBB-1"})
        roster_service.update_record(db, VEHICLES, a.id, {"is_active": False})

        available = roster_service.list_available(db, VEHICLES)
        assert [v.name for v in available] == ["B"]
        assert len(roster_service.list_records(db, VEHICLES)) == 2

    def test_update_missing(self, db):
        with pytest.raises(NotFoundError):
            roster_service.update_record(db, VEHICLES, "missing", {"name": "x"})

    def test_list_newest_first(self, db):
        roster_service.create_record(db, VEHICLES, {"name": "A", "license_plate": "AAA-1",
                                                    "created_at": datetime(2026, 3, 1, 8, 0)})
        roster_service.create_record(db, VEHICLES, {"name": "B", "license_plate": "BBB-1",
                                                    "created_at": datetime(2026, 3, 2, 8, 0)})
        assert [v.name for v in roster_service.list_records(db, VEHICLES)] == ["B", "A"]
        assert [v.name for v in roster_service.list_available(db, VEHICLES)] == ["B", "A"]

    def test_duplicate_plate_caught_on_commit(self, db):
        roster_service.create_record(db, VEHICLES, {"name": "A", "license_plate": "AAA-1"})
        with patch("mileage_tracker.services.roster_service._find_by_key", return_value=None):
            with pytest.raises(ConflictError):
                roster_service.create_record(db, VEHICLES, {"name": "B", "license_plate": "aaa-1"})
        assert [v.name for v in roster_service.list_records(db, VEHICLES)] == ["A"]

    def test_delete_missing(self):
        db = MagicMock()
        db.get.return_value = None
        with pytest.raises(NotFoundError):
            roster_service.delete_record(db, VEHICLES, "missing")
        db.delete.assert_not_called()


class TestSupervisorRoster:
    def test_duplicate_badge_conflicts(self, db):
        roster_service.create_record(db, SUPERVISORS, {"name": "Sam", "badge_number": "b-7"})
        with pytest.raises(ConflictError):
            roster_service.create_record(db, SUPERVISORS, {"name": "Alex", "badge_number": "B-7"})

    def test_delete_then_list(self, db):
        s = roster_service.create_record(db, SUPERVISORS, {"name": "Sam", "badge_number": "B-7"})
        roster_service.delete_record(db, SUPERVISORS, s.id)
        assert roster_service.list_records(db, SUPERVISORS) == []
