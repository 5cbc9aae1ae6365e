#!/usr/bin/env python3
"""
Exercise a running store-location API end to end.
It checks health, lists the worked examples, solves the first one, and sends one invalid query.
Run it against a started server; it prints each response and exits non-zero on failure.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from src.client.api_client import (  # noqa: E402
    ApiUnavailableError,
    StoreLocatorApiClient,
    StoreLocatorRequestError,
)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run a demo session against the store-location API")
    parser.add_argument("--base-url", default="http://localhost:8000", help="Service root URL")
    parser.add_argument("--api-version-path", default="/api/v1", help="Versioned API prefix")
    parser.add_argument("--timeout", type=int, default=30, help="Per-request timeout in seconds")
    return parser.parse_args()


def _print_step(title: str, payload: object) -> None:
    print(f"== {title}")
    print(json.dumps(payload, indent=2, default=str))


def run_demo(client: StoreLocatorApiClient) -> int:
    _print_step("health", client.health())

    examples = client.get_examples()
    _print_step("examples", [example["description"] for example in examples])
    if not examples:
        print("No worked examples were returned.")
        return 1

    first = examples[0]
    result = client.find_store_locations(k=first["request"]["k"], grid=first["request"]["grid"])
    _print_step(first["description"], result)
    if result["count"] != first["expected_result"]["count"]:
        print(f"Expected count {first['expected_result']['count']}, got {result['count']}.")
        return 1

    try:
        client.find_store_locations(k=0, grid=[[0, 1], [1, 0]])
    except StoreLocatorRequestError as exc:
        _print_step("invalid query (k=0)", exc.payload)
        if exc.field != "k":
            print(f"Expected the rejection to name field 'k', got {exc.field!r}.")
            return 1
    else:
        print("Invalid query was accepted.")
        return 1

    print("Demo completed.")
    return 0


def main() -> int:
    args = parse_args()
    client = StoreLocatorApiClient(
        base_url=args.base_url,
        api_version_path=args.api_version_path,
        timeout_seconds=args.timeout,
    )
    try:
        return run_demo(client)
    except ApiUnavailableError as exc:
        print(f"API unavailable: {exc}")
        print("Start the server first, for example with: python scripts/run_api.py")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
