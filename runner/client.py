from __future__ import annotations

import asyncio
import time
from typing import Any

import httpx

from app.logging_conf import get_logger
from runner.types import AdminCheck, CreateCoasterError, Created, FetchError, SmokeError

logger = get_logger("runner.client")


async def wait_for_health(base_url: str, timeout_s: float = 20.0) -> None:
    """Ping /health until it returns ok or raise after a timeout."""
    deadline = time.monotonic() + timeout_s
    async with httpx.AsyncClient(base_url=base_url, timeout=5.0) as client:
        while time.monotonic() < deadline:
            try:
                r = await client.get("/health")
                if r.status_code == 200 and r.json().get("ok") is True:
                    logger.info("health.ok", extra={"event": "health_ok"})
                    return
            except httpx.HTTPError:
                pass  # server not up yet
            await asyncio.sleep(0.25)
    raise SmokeError("Health check did not pass within timeout")


async def create_one(
    client: httpx.AsyncClient, payload: dict[str, Any], *, retries: int = 2
) -> Created:
    """POST one coaster and return its server-assigned id, with retry."""
    last_err: Exception | None = None
    for attempt in range(retries):
        try:
            r = await client.post("/coasters", json=payload)
            r.raise_for_status()
            return Created(coaster_id=r.json()["id"], payload=payload)
        except (httpx.HTTPError, KeyError, ValueError) as e:  # pragma: no cover
            last_err = e
            logger.warning(
                "coaster.create_retry",
                extra={
                    "event": "coaster_create_retry",
                    "coaster_name": payload.get("name"),
                    "attempt": attempt + 1,
                    "error": str(e),
                },
            )
    raise CreateCoasterError(f"create failed for {payload.get('name')!r}: {last_err}")


async def create_all(base_url: str, payloads: list[dict[str, Any]]) -> list[Created]:
    """Create coasters concurrently; failures are logged and skipped."""
    async with httpx.AsyncClient(base_url=base_url, timeout=30.0) as client:
        results = await asyncio.gather(
            *(create_one(client, p) for p in payloads), return_exceptions=True
        )
    created = [res for res in results if isinstance(res, Created)]
    logger.info(
        "create.summary",
        extra={
            "event": "create_summary",
            "requested": len(payloads),
            "succeeded": len(created),
            "failed": len(results) - len(created),
        },
    )
    return created


async def list_coasters(base_url: str, *, retries: int = 3) -> list[dict[str, Any]]:
    last_err: Exception | None = None
    for _ in range(retries):
        try:
            async with httpx.AsyncClient(base_url=base_url, timeout=10.0) as client:
                r = await client.get("/coasters")
                r.raise_for_status()
                return r.json()
        except (httpx.HTTPError, ValueError) as e:  # pragma: no cover
            last_err = e
            logger.warning("list.retry", extra={"event": "list_retry", "error": str(e)})
    raise FetchError(str(last_err) if last_err else "list failed")


async def fetch_all(base_url: str, ids: list[str]) -> dict[str, dict[str, Any] | None]:
    """GET each coaster by id; a 404 maps to None."""

    async def _one(client: httpx.AsyncClient, coaster_id: str) -> dict[str, Any] | None:
        r = await client.get(f"/coasters/{coaster_id}")
        if r.status_code == 404:
            return None
        r.raise_for_status()
        return r.json()

    async with httpx.AsyncClient(base_url=base_url, timeout=10.0) as client:
        bodies = await asyncio.gather(*(_one(client, i) for i in ids))
    return dict(zip(ids, bodies))


async def sample_random(base_url: str, trials: int) -> list[str]:
    """Hit /coasters/random `trials` times and return the ids it redirected to."""
    prefix = "/coasters/"
    ids: list[str] = []
    async with httpx.AsyncClient(
        base_url=base_url, timeout=10.0, follow_redirects=False
    ) as client:
        for _ in range(trials):
            r = await client.get("/coasters/random")
            if r.status_code != 302:
                raise FetchError(f"random redirect returned {r.status_code}")
            location = r.headers.get("location", "")
            if not location.startswith(prefix):
                raise FetchError(f"unexpected Location header: {location!r}")
            ids.append(location[len(prefix):])
    return ids


async def check_admin(base_url: str, password: str) -> AdminCheck:
    """Call /admin with a wrong and then the given password."""
    async with httpx.AsyncClient(base_url=base_url, timeout=10.0) as client:
        wrong = await client.get("/admin", auth=("admin", password + "-wrong"))
        right = await client.get("/admin", auth=("admin", password))
    logger.info(
        "admin.checked",
        extra={
            "event": "admin_checked",
            "wrong_status": wrong.status_code,
            "right_status": right.status_code,
        },
    )
    return AdminCheck(
        wrong_status=wrong.status_code,
        right_status=right.status_code,
        right_body=right.text,
    )
