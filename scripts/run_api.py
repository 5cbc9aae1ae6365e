#!/usr/bin/env python3
"""
Start the store-location API with uvicorn using the configured host and port.
Run it directly; settings come from `.env` and the process environment.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

import uvicorn  # noqa: E402

from src.api.api_config import get_api_config  # noqa: E402


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the store-location API server")
    parser.add_argument("--reload", action="store_true", help="Reload on source changes")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    config = get_api_config()
    uvicorn.run("src.api.app:app", host=config.host, port=config.port, reload=args.reload)


if __name__ == "__main__":
    main()
