from __future__ import annotations

import os
from pathlib import Path
from typing import List

from . import __version__


class Settings:
    """Centralized configuration for the Trackr data store."""

    def __init__(self) -> None:
        base_dir = Path(__file__).resolve().parent
        repo_root = base_dir.parent
        data_root_default = repo_root / "data"

        self.data_root: Path = Path(
            os.environ.get("TRACKR_DATA_ROOT") or data_root_default
        ).expanduser()
        self.db_path: Path = Path(
            os.environ.get("TRACKR_DB_PATH") or (self.data_root / "trackr.db")
        ).expanduser()
        self.export_dir: Path = Path(
            os.environ.get("TRACKR_EXPORT_DIR") or (self.data_root / "exports")
        ).expanduser()
        # Written into the "version" field of full snapshots.
        self.app_version: str = os.environ.get("TRACKR_APP_VERSION") or __version__
        self.log_level: str = (os.environ.get("TRACKR_LOG_LEVEL") or "INFO").upper()

        self.host: str = os.environ.get("TRACKR_HOST") or "127.0.0.1"
        port_raw = os.environ.get("TRACKR_PORT") or "8000"
        try:
            self.port: int = int(port_raw)
        except ValueError:
            self.port = 8000

        cors = os.environ.get("TRACKR_CORS_ORIGINS", "*")
        if cors.strip() == "*":
            self.cors_origins: List[str] = ["*"]
        else:
            self.cors_origins = [
                origin.strip() for origin in cors.split(",") if origin.strip()
            ]


settings = Settings()
