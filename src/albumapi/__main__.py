from __future__ import annotations

import argparse
import dataclasses
from collections.abc import Sequence

import uvicorn

from .runtime.app import create_app
from .runtime.config import Settings


def parse_settings(argv: Sequence[str] | None = None) -> Settings:
    env = Settings.from_env()

    p = argparse.ArgumentParser(prog="albumapi", description="albumapi: in-memory album CRUD service")
    p.add_argument("--host", default=env.host)
    p.add_argument("--port", type=int, default=env.port)
    p.add_argument("--log-level", default=env.log_level, choices=["critical", "error", "warning", "info", "debug"])
    p.add_argument("--no-access-log", action="store_true")
    p.add_argument("--no-seed", action="store_true", help="start with an empty album list")
    args = p.parse_args(argv)

    return dataclasses.replace(
        env,
        host=args.host,
        port=args.port,
        log_level=args.log_level,
        access_log=env.access_log and not args.no_access_log,
        seed=env.seed and not args.no_seed,
    )


def main() -> None:
    settings = parse_settings()

    # Foreground server; Ctrl+C stops it.
    uvicorn.run(
        create_app(settings=settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
        access_log=settings.access_log,
    )


if __name__ == "__main__":
    main()
