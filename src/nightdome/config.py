"""Environment-driven settings. Call dotenv.load_dotenv() before from_env()."""

import os
from dataclasses import dataclass
from pathlib import Path

from nightdome.errors import ConfigError


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from exc
    if value <= 0:
        raise ConfigError(f"{name} must be positive, got {value}")
    return value


@dataclass(frozen=True)
class Settings:
    results_dir: Path  # Where save_static_chart writes PNGs
    viewport_width: int  # Chart size in pixels
    viewport_height: int
    log_level: str

    @classmethod
    def from_env(cls) -> "Settings":
        """Read NIGHTDOME_* variables from the environment.

        Raises:
            ConfigError: On a non-integer or non-positive viewport size.
        """
        return cls(
            results_dir=Path(os.environ.get("NIGHTDOME_RESULTS_DIR", Path.cwd() / "results")),
            viewport_width=_env_int("NIGHTDOME_VIEWPORT_WIDTH", 800),
            viewport_height=_env_int("NIGHTDOME_VIEWPORT_HEIGHT", 800),
            log_level=os.environ.get("NIGHTDOME_LOG_LEVEL", "INFO").upper(),
        )
