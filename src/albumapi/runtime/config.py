from __future__ import annotations

import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    """Runtime settings.

    Defaults bind to localhost:8080. Each field can be overridden with an
    `ALBUMAPI_*` environment variable; CLI flags take precedence over both.
    """

    host: str = "localhost"
    port: int = 8080
    log_level: str = "info"
    access_log: bool = True
    seed: bool = True

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            host=os.getenv("ALBUMAPI_HOST", cls.host),
            port=int(os.getenv("ALBUMAPI_PORT", str(cls.port))),
            log_level=os.getenv("ALBUMAPI_LOG_LEVEL", cls.log_level).lower(),
            access_log=_env_flag("ALBUMAPI_ACCESS_LOG", "1"),
            seed=_env_flag("ALBUMAPI_SEED", "1"),
        )
