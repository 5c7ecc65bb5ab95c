#!/usr/bin/env python3
"""
Seed script: creates users via the API (no direct storage access), then walks the pages.
Run: API must be running (uvicorn app.main:app --port 8000).
  python scripts/seed_data.py
  python scripts/seed_data.py --users 100 --page-size 20
"""

import argparse
import json
import random

import httpx

API_BASE = "http://localhost:8000/api"

FIRST_NAMES = ["Ivan", "Anna", "Pavel", "Olga", "Dmitry", "Maria", "Sergey", "Elena", "Alex", "Nina"]
LAST_NAMES = ["Petrov", "Ivanova", "Smirnov", "Kuznetsova", "Popov", "Sokolova", "Lebedev", "Kozlova"]


def random_user(i: int) -> dict:
    return {
        "login": f"player{i + 1}",
        "firstName": random.choice(FIRST_NAMES),
        "lastName": random.choice(LAST_NAMES),
    }


def main():
    ap = argparse.ArgumentParser(description="Seed users via API")
    ap.add_argument("--users", type=int, default=30, help="Number of users to create")
    ap.add_argument("--page-size", type=int, default=10, help="pageSize used when listing")
    ap.add_argument("--base-url", default=API_BASE, help="API base URL")
    args = ap.parse_args()

    created = 0
    errors = []

    with httpx.Client(base_url=args.base_url, timeout=30.0) as client:
        print(f"Creating {args.users} users...")
        for i in range(args.users):
            r = client.post("/users", json=random_user(i))
            if r.status_code == 201:
                created += 1
            else:
                errors.append(f"User {i + 1}: {r.status_code} {r.text[:80]}")
            if (i + 1) % 10 == 0:
                print(f"  ... {i + 1} users")

        page_number = 1
        while True:
            r = client.get("/users", params={"pageNumber": page_number, "pageSize": args.page_size})
            r.raise_for_status()
            pagination = json.loads(r.headers["X-Pagination"])
            print(f"  page {pagination['currentPage']}/{pagination['totalPages']}: {len(r.json())} users")
            if page_number >= pagination["totalPages"]:
                break
            page_number += 1

    print(f"\nDone. Users created: {created}")
    if errors:
        print(f"Errors ({len(errors)}):")
        for e in errors[:15]:
            print("  ", e)
        if len(errors) > 15:
            print("  ... and", len(errors) - 15, "more")


if __name__ == "__main__":
    main()
