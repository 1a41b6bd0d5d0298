from __future__ import annotations

import contextlib
import logging
import socket
import threading
import time
from dataclasses import dataclass

import uvicorn
from fastapi import FastAPI

from ..core.registry import AlbumRegistry
from ..sdk.client import AlbumClient
from .app import create_app
from .config import Settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AlbumServer:
    host: str
    port: int
    url: str
    registry: AlbumRegistry

    def client(self, *, timeout_s: float = 10.0) -> AlbumClient:
        return AlbumClient(self.url, timeout_s=timeout_s)


def _find_free_port(host: str) -> int:
    with contextlib.closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as s:
        s.bind((host, 0))
        return int(s.getsockname()[1])


def _wait_until_started(server: uvicorn.Server, thread: threading.Thread, *, url: str, timeout_s: float) -> None:
    deadline = time.monotonic() + timeout_s
    while not server.started:
        # uvicorn exits its thread when it cannot bind (e.g. the port is taken).
        if not thread.is_alive():
            raise RuntimeError(f"albumapi server failed to start at {url}")
        if time.monotonic() > deadline:
            server.should_exit = True
            raise RuntimeError(f"albumapi server did not become ready at {url} within {timeout_s:.1f}s")
        time.sleep(0.05)


def build_server(app: FastAPI, *, host: str, port: int, log_level: str, access_log: bool) -> uvicorn.Server:
    config = uvicorn.Config(app, host=host, port=port, log_level=log_level, access_log=access_log)
    return uvicorn.Server(config)


def run(
    *,
    host: str | None = None,
    port: int | None = None,
    registry: AlbumRegistry | None = None,
    settings: Settings | None = None,
    startup_timeout_s: float = 10.0,
) -> AlbumServer:
    """Start the album API on a background thread and return once it is serving.

    Notes:
    - `host`/`port` override `settings` (which default to the environment).
    - `port=0` means "pick a free port".
    - The thread is a daemon, so the server stops with the calling process.
    """

    settings = settings or Settings.from_env()
    host = settings.host if host is None else host
    port = settings.port if port is None else port
    if port == 0:
        port = _find_free_port(host)

    app = create_app(registry=registry, settings=settings)
    server = build_server(app, host=host, port=port, log_level=settings.log_level, access_log=settings.access_log)

    thread = threading.Thread(target=server.run, name="albumapi-server", daemon=True)
    thread.start()

    url = f"http://{host}:{port}"
    _wait_until_started(server, thread, url=url, timeout_s=startup_timeout_s)
    logger.info("albumapi listening on %s", url)

    return AlbumServer(host=host, port=port, url=url, registry=app.state.registry)
