from __future__ import annotations

import os
from pathlib import Path
from typing import List, Tuple

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _split_bind_address(value: str) -> Tuple[str, int]:
    host, sep, port_raw = value.strip().rpartition(":")
    if not sep:
        # Bare host, keep the default port.
        return value.strip() or "0.0.0.0", 3000
    return host or "0.0.0.0", int(port_raw)


class Settings:
    """Centralized configuration for the portions backend."""

    def __init__(self) -> None:
        self.bind_address: str = os.environ.get("PORTIONS_BIND_ADDRESS") or "0.0.0.0:3000"
        self.bind_host, self.bind_port = _split_bind_address(self.bind_address)

        db_raw = os.environ.get("PORTIONS_DB_PATH") or "nutrients.db"
        self.in_memory: bool = db_raw.strip() == ":memory:"
        self.db_path: Path = Path(db_raw).expanduser()

        self.log_level: str = (os.environ.get("PORTIONS_LOG_LEVEL") or "INFO").strip().upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"PORTIONS_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}")

        cors = os.environ.get("PORTIONS_CORS_ORIGINS", "*")
        if cors.strip() == "*":
            self.cors_origins: List[str] = ["*"]
        else:
            self.cors_origins = [
                origin.strip() for origin in cors.split(",") if origin.strip()
            ]


settings = Settings()
