from __future__ import annotations

from typing import Any

from runner.types import SmokeResult

_PARKS = [
    ("Steel Vengeance", "Rocky Mountain Construction", "Cedar Point", 205),
    ("Fury 325", "Bolliger & Mabillard", "Carowinds", 325),
    ("Taron", "Intamin", "Phantasialand", 98),
    ("Maverick", "Intamin", "Cedar Point", 105),
    ("Helix", "Mack Rides", "Liseberg", 135),
]

_FIELDS = ("name", "manufacturer", "inPark", "height")


def sample_payloads(count: int) -> list[dict[str, Any]]:
    """Return `count` distinct create payloads, each carrying a bogus client id."""
    out: list[dict[str, Any]] = []
    for i in range(count):
        name, manufacturer, park, height = _PARKS[i % len(_PARKS)]
        out.append(
            {
                "id": f"client-{i}",
                "name": f"{name} #{i}",
                "manufacturer": manufacturer,
                "inPark": park,
                "height": height + i,
            }
        )
    return out


def payload_matches(payload: dict[str, Any], record: dict[str, Any] | None) -> bool:
    """True if `record` carries the submitted fields and a fresh, non-empty id."""
    if record is None:
        return False
    if not record.get("id") or record["id"] == payload.get("id"):
        return False
    return all(record.get(k) == payload.get(k) for k in _FIELDS)


def summarize(result: SmokeResult, *, requested: int) -> tuple[dict, int]:
    """Compute summary dict and an exit code from the collected observations."""
    created_ids = [c.coaster_id for c in result.created]
    distinct_created = set(created_ids)
    missing_from_list = sorted(distinct_created - result.listed_ids)
    distinct_random = set(result.random_ids)
    stray_random = sorted(distinct_random - result.listed_ids)
    admin = result.admin

    failures: list[str] = []
    if len(created_ids) != requested:
        failures.append("not every create succeeded")
    if len(distinct_created) != len(created_ids):
        failures.append("duplicate ids returned")
    if missing_from_list:
        failures.append("created coasters missing from list")
    if result.mismatched:
        failures.append("fetched coasters differ from submitted payloads")
    if stray_random:
        failures.append("random redirected to unknown ids")
    if len(distinct_created) > 1 and len(result.random_ids) > 1 and len(distinct_random) < 2:
        failures.append("random always picked the same coaster")
    if admin is None or admin.wrong_status != 401 or admin.right_status != 200:
        failures.append("admin gate misbehaved")

    summary = {
        "component": "runner",
        "event": "summary",
        "requested": requested,
        "created_count": len(created_ids),
        "listed_count": len(result.listed_ids),
        "missing_from_list": missing_from_list,
        "mismatched": result.mismatched,
        "random_trials": len(result.random_ids),
        "random_distinct": len(distinct_random),
        "admin": (
            {"wrong_status": admin.wrong_status, "right_status": admin.right_status}
            if admin
            else None
        ),
        "failures": failures,
    }
    exit_code = 0 if not failures else 1
    return summary, exit_code
