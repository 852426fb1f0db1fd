from __future__ import annotations

import os
from pathlib import Path


class Settings:
    """Centralized configuration for the FitFuel engine."""

    def __init__(self) -> None:
        base_dir = Path(__file__).resolve().parent
        repo_root = base_dir.parent
        data_root_default = repo_root / "data"

        self.data_root: Path = Path(
            os.environ.get("FITFUEL_DATA_ROOT") or data_root_default
        ).expanduser()
        self.db_path: Path = Path(
            os.environ.get("FITFUEL_DB_PATH") or (self.data_root / "fitfuel.db")
        ).expanduser()

        # Shared streams stay connected this long after the last subscriber leaves.
        self.stream_keep_alive_sec: float = float(
            os.environ.get("FITFUEL_STREAM_KEEP_ALIVE_SEC") or "5"
        )

        self.shake_threshold: float = float(
            os.environ.get("FITFUEL_SHAKE_THRESHOLD") or "18.0"
        )
        self.shake_debounce_ms: int = int(
            os.environ.get("FITFUEL_SHAKE_DEBOUNCE_MS") or "1000"
        )
        self.shake_pulse_ms: int = int(
            os.environ.get("FITFUEL_SHAKE_PULSE_MS") or "500"
        )

        self.cleanup_age_days: int = int(
            os.environ.get("FITFUEL_CLEANUP_AGE_DAYS") or "30"
        )
        self.reminder_lookahead_min: int = int(
            os.environ.get("FITFUEL_REMINDER_LOOKAHEAD_MIN") or "30"
        )


settings = Settings()
