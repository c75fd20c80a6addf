"""Runtime settings, read from the environment.

| Variable                | Default                     |
|-------------------------|-----------------------------|
| STOREFRONT_DATA_DIR     | ``<repo>/data``             |
| STOREFRONT_ENV          | ``development``             |
| LOG_LEVEL               | derived from env            |
| STOREFRONT_FRONTEND_URL | ``http://localhost:5173``   |

STOREFRONT_FRONTEND_URL is the single origin admitted by CORS.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

_LEVEL_BY_ENV = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}


@dataclass(frozen=True)
class Settings:
    data_dir: Path = _DEFAULT_DATA_DIR
    env: str = "development"
    log_level: str = "DEBUG"
    frontend_url: str = "http://localhost:5173"

    @property
    def is_development(self) -> bool:
        return self.env == "development"

    @property
    def renders_json_logs(self) -> bool:
        return self.env in ("production", "staging")

    @staticmethod
    def from_env() -> Settings:
        env = os.getenv("STOREFRONT_ENV", "development").strip().lower()
        data_dir = os.getenv("STOREFRONT_DATA_DIR")
        return Settings(
            data_dir=Path(data_dir) if data_dir else _DEFAULT_DATA_DIR,
            env=env,
            log_level=os.getenv("LOG_LEVEL", _LEVEL_BY_ENV.get(env, "INFO")).upper(),
            frontend_url=os.getenv("STOREFRONT_FRONTEND_URL", "http://localhost:5173"),
        )
