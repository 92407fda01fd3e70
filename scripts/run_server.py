#!/usr/bin/env python3
"""
Run the diary API under uvicorn.

Usage:
  python scripts/run_server.py [--host 127.0.0.1] [--port 8000] [--reload]
"""
from __future__ import annotations

import argparse

import uvicorn


def main() -> None:
    ap = argparse.ArgumentParser(description="Serve the diary API")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--reload", action="store_true")
    args = ap.parse_args()
    uvicorn.run("timediary.app_factory:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
