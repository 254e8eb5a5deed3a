"""Drive a full shift against a running backend: roster → start → end → summary."""

import argparse
import requests

BACKEND_URL = "http://localhost:8080/api"


def call(method, path, **kwargs):
    resp = requests.request(method, f"{BACKEND_URL}{path}", timeout=10, **kwargs)
    body = resp.json()
    status = "✅" if body.get("success") else "❌"
    print(f"{status} {method} {path} → HTTP {resp.status_code}: {body.get('error') or 'ok'}")
    return body.get("data")


def ensure_vehicle(plate, name):
    for v in call("GET", "/vehicles") or []:
        if v["licensePlate"] == plate.upper():
            return v
    return call("POST", "/vehicles", json={"name": name, "licensePlate": plate})


def ensure_supervisor(badge, name):
    for s in call("GET", "/supervisors") or []:
        if s["badgeNumber"] == badge.upper():
            return s
    return call("POST", "/supervisors", json={"name": name, "badgeNumber": badge})


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Simulate a shift for testing")
    parser.add_argument("--plate", default="SIM-001")
    parser.add_argument("--badge", default="SIM-1")
    parser.add_argument("--supervisor", default="Sim Supervisor")
    parser.add_argument("--start", type=int, default=1000)
    parser.add_argument("--miles", type=int, default=42)
    args = parser.parse_args()

    vehicle = ensure_vehicle(args.plate, f"Simulated {args.plate}")
    ensure_supervisor(args.badge, args.supervisor)

    entry = call("POST", "/mileage-entries", json={
        "vehicleId": vehicle["id"],
        "supervisorName": args.supervisor,
        "startMileage": args.start,
        "startCondition": "good",
    })
    if entry:
        done = call("PUT", f"/mileage-entries/{entry['id']}", json={
            "endMileage": args.start + args.miles,
            "endCondition": "good",
            "notes": "simulated shift",
        })
        if done:
            print(f"   shift={done['shift']} totalMiles={done['totalMiles']}")

    summary = call("GET", "/reports/summary", params={"period": "today"})
    if summary:
        print(f"   today: {summary['totalShifts']} shifts, {summary['totalMiles']} miles")
