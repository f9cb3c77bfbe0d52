import logging
import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Settings:
    BASE_DIR: Path = field(default_factory=lambda: Path(__file__).resolve().parent)

    DICTIONARY_PATH: Path = field(init=False)

    MIN_WORD_LENGTH: int = 3
    MAX_RESULTS: int = 50

    LOG_LEVEL: str = "INFO"

    HOST: str = "127.0.0.1"
    PORT: int = 10001

    def __post_init__(self):
        self.DICTIONARY_PATH = self.BASE_DIR / "data" / "sample_words.txt"

        # Override from environment
        for fld in self.__dataclass_fields__:
            env_val = os.environ.get(fld)
            if env_val is not None:
                setattr(self, fld, _coerce(getattr(self, fld), env_val))
        self.LOG_LEVEL = _check_log_level(self.LOG_LEVEL)


# Fields that may be changed while the server is running, with their types
EDITABLE_FIELDS: dict[str, type] = {
    "DICTIONARY_PATH": Path,
    "MIN_WORD_LENGTH": int,
    "MAX_RESULTS": int,
    "LOG_LEVEL": str,
}


def _coerce(current, value):
    if isinstance(current, bool):
        if isinstance(value, bool):
            return value
        return str(value).lower() in ("1", "true", "yes")
    if isinstance(current, int):
        return int(value)
    if isinstance(current, float):
        return float(value)
    if isinstance(current, Path):
        return Path(value)
    return str(value)


def _check_log_level(value: str) -> str:
    level = value.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"unknown log level {value!r}")
    return level


def get_editable_settings(cfg: Settings) -> dict:
    values = {}
    for name in EDITABLE_FIELDS:
        value = getattr(cfg, name)
        values[name] = str(value) if isinstance(value, Path) else value
    return values


def update_settings(cfg: Settings, **values) -> dict[str, str]:
    """Apply the given values to ``cfg``.

    Returns a mapping of field name to error message for every value that was
    rejected. Valid fields are applied even when others fail.
    """
    errors: dict[str, str] = {}
    for name, value in values.items():
        if name not in EDITABLE_FIELDS:
            if hasattr(cfg, name):
                errors[name] = "not editable"
            else:
                errors[name] = "unknown setting"
            continue
        try:
            value = _coerce(getattr(cfg, name), value)
            if name == "LOG_LEVEL":
                value = _check_log_level(value)
            setattr(cfg, name, value)
        except (TypeError, ValueError) as e:
            errors[name] = f"invalid value {value!r}: {e}"
    return errors


settings = Settings()
