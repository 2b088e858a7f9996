#!/usr/bin/env python3
import argparse
import logging
import os
import sys

import uvicorn

from app.core.config import configure_logging, load_settings

logger = logging.getLogger("run_server")


def _repo_root() -> str:
    # scripts/run_server.py -> repo root is parent of scripts/
    return os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


def parse_args(argv=None) -> argparse.Namespace:
    settings = load_settings()

    p = argparse.ArgumentParser(description="Run the movies API with uvicorn.")
    p.add_argument("--host", default=settings.host, help="Bind host (default: HOST or 127.0.0.1)")
    p.add_argument("--port", type=int, default=settings.port, help="Listen port (default: PORT or 1234)")
    p.add_argument("--reload", action="store_true", help="Enable uvicorn auto-reload")
    p.add_argument("--log-level", default=settings.log_level, help="Root logging level")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)

    logger.info("Server listening on http://%s:%d", args.host, args.port)
    uvicorn.run(
        "app.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        app_dir=_repo_root(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
