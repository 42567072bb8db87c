#!/usr/bin/env python3
"""
Block booking and approval flow script.

DO NOT ADD BUSINESS LOGIC HERE.
This script only orchestrates API calls.
All rules live in the backend.

Usage:
    python scripts/flow_request_and_approve.py
    python scripts/flow_request_and_approve.py --base-url http://localhost:8000 --capacity 1

Flow:
    1. Create block (admin)
    2. Request booking as employee A
    3. Approve booking A (admin)
    4. Request again as employee A (expect duplicate rejection)
    5. Request booking as employee B
    6. Cancel booking A (admin)
    7. Show staff and admin panels
"""

import argparse
import json
import sys
from datetime import datetime, timedelta

import httpx

BASE_URL = "http://localhost:8000"
API_PREFIX = "/api/v1"

EMPLOYEE_A = ("Mitarbeiter A", "a@x.com")
EMPLOYEE_B = ("Mitarbeiter B", "b@x.com")


def api_request(base_url: str, method: str, endpoint: str, data: dict | None = None) -> dict:
    """Make API request."""
    url = f"{base_url}{API_PREFIX}{endpoint}"

    if method == "GET":
        response = httpx.get(url, timeout=10.0, follow_redirects=True)
    elif method == "POST":
        response = httpx.post(url, json=data or {}, timeout=10.0, follow_redirects=True)
    else:
        raise ValueError(f"Unknown method: {method}")

    return {"status": response.status_code, "data": response.json() if response.text else {}}


def print_step(step: int, title: str):
    """Print step header."""
    print(f"\n{'='*60}")
    print(f"STEP {step}: {title}")
    print("="*60)


def print_result(result: dict, fields: list[str] | None = None):
    """Print result, optionally filtering fields."""
    if result["status"] >= 400:
        print(f"ERROR ({result['status']}): {json.dumps(result['data'], indent=2)}")
        return False

    print(f"Status: {result['status']}")
    if fields:
        filtered = {k: result["data"].get(k) for k in fields if k in result["data"]}
        print(json.dumps(filtered, indent=2, ensure_ascii=False))
    else:
        print(json.dumps(result["data"], indent=2, ensure_ascii=False))
    return True


def request_booking(base_url: str, block_id: str, employee: tuple[str, str]) -> dict:
    name, email = employee
    return api_request(base_url, "POST", "/bookings/", {
        "block_id": block_id,
        "employee_name": name,
        "employee_email": email,
    })


def main():
    parser = argparse.ArgumentParser(description="Block booking and approval flow")
    parser.add_argument("--base-url", default=BASE_URL, help="Server base URL")
    parser.add_argument("--title", default="Früh – Objekt X", help="Block title")
    parser.add_argument("--capacity", type=int, default=1, help="Block capacity")
    args = parser.parse_args()

    booking_fields = ["id", "block_id", "employee_email", "status", "booked_at"]

    # Step 1: Create block
    print_step(1, "Create block")
    start = (datetime.now() + timedelta(days=1)).replace(hour=7, minute=15, second=0, microsecond=0)
    block_result = api_request(args.base_url, "POST", "/blocks/", {
        "title": args.title,
        "starts_at": start.strftime("%Y-%m-%dT%H:%M"),
        "ends_at": (start + timedelta(hours=4)).strftime("%Y-%m-%dT%H:%M"),
        "capacity": args.capacity,
    })
    if not print_result(block_result, ["id", "title", "location", "capacity", "status"]):
        sys.exit(1)
    block_id = block_result["data"]["id"]

    # Step 2: Request as employee A
    print_step(2, f"Request booking as {EMPLOYEE_A[1]}")
    first = request_booking(args.base_url, block_id, EMPLOYEE_A)
    if not print_result(first, booking_fields):
        sys.exit(1)
    first_id = first["data"]["id"]

    # Step 3: Approve
    print_step(3, "Approve booking (admin)")
    if not print_result(api_request(args.base_url, "POST", f"/bookings/{first_id}/approve"), booking_fields):
        sys.exit(1)

    # Step 4: Duplicate request
    print_step(4, f"Request again as {EMPLOYEE_A[1]} (expect rejection)")
    duplicate = request_booking(args.base_url, block_id, EMPLOYEE_A)
    if duplicate["status"] != 409:
        print(f"ERROR: expected 409, got {duplicate['status']}")
        sys.exit(1)
    print(f"Rejected as expected: {duplicate['data'].get('detail')}")

    # Step 5: Request as employee B
    print_step(5, f"Request booking as {EMPLOYEE_B[1]}")
    second = request_booking(args.base_url, block_id, EMPLOYEE_B)
    if not print_result(second, booking_fields):
        print("(Rejected - server runs with capacity enforcement)")

    # Step 6: Cancel booking A
    print_step(6, "Cancel booking A (admin)")
    if not print_result(api_request(args.base_url, "POST", f"/bookings/{first_id}/cancel"), booking_fields):
        sys.exit(1)

    # Step 7: Panels
    print_step(7, "Staff and admin panels")
    print_result(api_request(args.base_url, "GET", "/views/staff"))
    print_result(api_request(args.base_url, "GET", "/views/admin"))

    print("\n" + "="*60)
    print("FLOW COMPLETE")
    print("="*60)


if __name__ == "__main__":
    main()
