"""
Database cleanup — clears all mileage entries to start with a clean slate.
Rosters are kept unless --rosters is passed.
Usage: python scripts/setup/cleanup_db.py [--rosters] [--yes]
"""

import argparse
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from mileage_tracker.database import SessionLocal
from mileage_tracker.config import settings
from mileage_tracker.models import MileageEntry, Supervisor, Vehicle


def main():
    parser = argparse.ArgumentParser(description="Delete mileage entries (and optionally rosters)")
    parser.add_argument("--rosters", action="store_true", help="also delete vehicles and supervisors")
    parser.add_argument("--yes", action="store_true", help="skip the confirmation prompt")
    args = parser.parse_args()

    print(f"📡 Database: {settings.DATABASE_URL}")
    if not args.yes and input("Delete ALL mileage entries? [y/N] ").strip().lower() != "y":
        print("Aborted.")
        return

    db = SessionLocal()
    try:
        deleted = db.query(MileageEntry).delete()
        print(f"✅ Deleted {deleted} mileage entries")
        if args.rosters:
            print(f"✅ Deleted {db.query(Vehicle).delete()} vehicles")
            print(f"✅ Deleted {db.query(Supervisor).delete()} supervisors")
        db.commit()
        print("🎉 Database cleanup completed!")
    except Exception as e:
        db.rollback()
        print(f"❌ Error during cleanup: {e}")
        sys.exit(1)
    finally:
        db.close()


if __name__ == "__main__":
    main()
