#!/usr/bin/env python3
"""End-to-end smoke run against a live coaster store.

Steps:
- wait for server health
- create coasters concurrently
- list and check every created id is present
- fetch each one back and compare with what was sent
- sample the random redirect
- probe the admin page with wrong and correct credentials
- emit a compact summary and exit code
"""
from __future__ import annotations

import asyncio
import sys

from app.logging_conf import get_logger, setup_logging
from runner.cli import parse_args
from runner.client import (
    check_admin,
    create_all,
    fetch_all,
    list_coasters,
    sample_random,
    wait_for_health,
)
from runner.types import SmokeResult
from runner.utils import payload_matches, sample_payloads, summarize

setup_logging()
logger = get_logger("runner")


async def run_smoke(
    *,
    base_url: str,
    admin_password: str,
    count: int = 10,
    random_trials: int = 50,
    timeout_s: float = 20.0,
) -> int:
    await wait_for_health(base_url, timeout_s=timeout_s)
    payloads = sample_payloads(count)
    result = SmokeResult()

    result.created = await create_all(base_url, payloads)
    result.listed_ids = {c["id"] for c in await list_coasters(base_url)}

    fetched = await fetch_all(base_url, [c.coaster_id for c in result.created])
    result.mismatched = [
        c.coaster_id
        for c in result.created
        if not payload_matches(c.payload, fetched.get(c.coaster_id))
    ]

    if result.created:
        result.random_ids = await sample_random(base_url, random_trials)
    result.admin = await check_admin(base_url, admin_password)

    summary, exit_code = summarize(result, requested=count)
    logger.info("runner.summary", extra=summary)
    return exit_code


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv or sys.argv[1:])
    code = asyncio.run(
        run_smoke(
            base_url=args.base_url,
            admin_password=args.admin_password,
            count=args.count,
            random_trials=args.random_trials,
            timeout_s=args.timeout,
        )
    )
    raise SystemExit(code)


if __name__ == "__main__":
    main()
