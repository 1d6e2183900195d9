"""Runtime settings for the outfit generator."""

from dataclasses import dataclass
from pathlib import Path
import os
from typing import Callable, Dict, Optional, Tuple

DEFAULT_MAX_ATTEMPTS = 100

# setting -> (environment variable, parser)
_SETTINGS: Dict[str, Tuple[str, Callable[[str], object]]] = {
    "max_attempts": ("OUTFIT_MAX_ATTEMPTS", int),
    "random_seed": ("OUTFIT_RANDOM_SEED", int),
    "log_level": ("LOG_LEVEL", str.upper),
}


@dataclass
class GeneratorConfig:
    """Settings for the outfit generator.

    ``random_seed`` pins every ``generate`` call to one random sequence, so a
    request that ran out of attempts fails the same way each time it is
    generated again against the same closet. ``OutfitGeneratorApp.regenerate``
    ignores the seed and draws a fresh sequence.
    """

    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    random_seed: Optional[int] = None
    log_level: str = "INFO"
    environment: str | None = None

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be positive, got {self.max_attempts}")

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Read settings from environment variables over an optional settings file.

        The file is ``APP_CONFIG_PATH`` when set, otherwise
        ``<OUTFIT_CONFIG_DIR>/<APP_ENV>.yaml``. A missing file is ignored.
        """

        env_name = os.getenv("APP_ENV")
        file_values = _read_settings_file(_settings_path(env_name))
        values = {}
        for name, (env_key, parse) in _SETTINGS.items():
            raw = os.getenv(env_key) or file_values.get(name)
            if raw:
                values[name] = parse(raw)
        return cls(environment=env_name, **values)


def _settings_path(env_name: Optional[str]) -> Optional[Path]:
    explicit = os.getenv("APP_CONFIG_PATH")
    if explicit:
        return Path(explicit)
    if env_name:
        return Path(os.getenv("OUTFIT_CONFIG_DIR", "config/environments")) / f"{env_name}.yaml"
    return None


def _read_settings_file(path: Optional[Path]) -> Dict[str, str]:
    """Parse flat ``key: value`` lines, skipping blanks and ``#`` comments."""

    if path is None or not path.exists():
        return {}
    values: Dict[str, str] = {}
    for line in path.read_text().splitlines():
        key, sep, value = line.partition(":")
        key = key.strip()
        if not sep or not key or key.startswith("#"):
            continue
        values[key] = value.strip().strip("\"'")
    return values


__all__ = ["DEFAULT_MAX_ATTEMPTS", "GeneratorConfig"]
