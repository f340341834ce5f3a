from __future__ import annotations

import argparse
import os


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse CLI arguments for the smoke runner."""
    parser = argparse.ArgumentParser(description="Coaster store smoke runner")
    parser.add_argument("--base-url", default=os.getenv("BASE_URL", "http://127.0.0.1:8080"))
    parser.add_argument(
        "--admin-password",
        default=os.getenv("ADMIN_PASSWORD", ""),
        help="Secret the server was started with; defaults to $ADMIN_PASSWORD",
    )
    parser.add_argument("--count", type=int, default=10, help="Coasters to create concurrently")
    parser.add_argument("--random-trials", type=int, default=50, dest="random_trials")
    parser.add_argument("--timeout", type=float, default=20.0, help="Health wait in seconds")
    return parser.parse_args(argv)
