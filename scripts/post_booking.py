#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
from typing import Any

import httpx
from httpx import ConnectError


def build_request(measurement: str, distance: str, boxes: str, dates: list[str]) -> dict[str, Any]:
    body: dict[str, Any] = {
        "customer": {"name": "Test Customer", "email": "test@example.com"},
        "service": {"id": "svc_moving", "title": "House Moving", "category": "Moving"},
        "variant": {
            "id": "var_apartment",
            "title": "Apartment move",
            "unitPrice": 10,
            "unitMeasure": "sqm",
            "duration": "4-10 hours",
        },
        "serviceAddress": "Hauptstr. 1, 10115 Berlin",
        "measurement": measurement,
        "distance": distance,
        "numberOfBoxes": boxes,
        "time": "09:00",
    }
    if len(dates) > 1:
        body["selectedDates"] = [{"date": d, "time": "09:00"} for d in dates]
    elif dates:
        body["date"] = dates[0]
    return body


def main() -> None:
    parser = argparse.ArgumentParser(description="Send a sample house-moving booking to the local API")
    parser.add_argument("--url", default="http://127.0.0.1:8001/api/v1/bookings")
    parser.add_argument("--action", choices=("quote", "preview", "create"), default="preview")
    parser.add_argument("--measurement", default="50")
    parser.add_argument("--distance", default="25.5")
    parser.add_argument("--boxes", default="10")
    parser.add_argument("--date", action="append", dest="dates", default=[], help="YYYY-MM-DD, repeat for multi-day")
    args = parser.parse_args()

    url = args.url if args.action == "create" else f"{args.url}/{args.action}"
    body = build_request(args.measurement, args.distance, args.boxes, args.dates or ["2026-11-02"])

    try:
        resp = httpx.post(url, json=body, timeout=10.0)
    except ConnectError:
        print("Connection refused. Is the FastAPI server running?")
        print("Try: uvicorn booking_engine.main:app --reload --port 8001")
        return

    print(resp.status_code)
    if resp.text:
        print(json.dumps(resp.json(), indent=2))


if __name__ == "__main__":
    main()
