#!/usr/bin/env python
"""
Start the Commerce API under uvicorn.

Serves the /api/v1 routes together with /livez, /readyz and /metrics.
Defaults come from the environment (HOST, PORT, RELOAD, LOG_LEVEL);
flags override them for a single run.

Usage:
    python run_api.py
    python run_api.py --reload --log-level debug
"""

import argparse
import uvicorn

from shared.config import get_settings


def main():
    parser = argparse.ArgumentParser(description="Start the Commerce API")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes")
    parser.add_argument("--host", type=str, help="Interface to bind (default: HOST)")
    parser.add_argument("--port", type=int, help="Port to listen on (default: PORT)")
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        help="uvicorn log level (default: LOG_LEVEL)",
    )
    args = parser.parse_args()

    settings = get_settings()

    uvicorn.run(
        "api:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=args.reload or settings.reload,
        log_level=args.log_level or settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
