"""Settings from defaults, a YAML file and PASTELBOARD_* environment variables."""

import logging
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from pastelboard.constants import LIGHTNESS, SATURATION, STORAGE_KEY

ENV_PREFIX = "PASTELBOARD_"
DEFAULT_CONFIG_PATH = "~/.config/pastelboard/config.yaml"

DEFAULTS: dict[str, Any] = {
    "store": "~/.local/share/pastelboard",
    "key": STORAGE_KEY,
    "log_level": "WARNING",
    "log_file": None,
    "saturation": SATURATION,
    "lightness": LIGHTNESS,
}


class ConfigError(Exception):
    """The config file or an override could not be used."""


def _python_key(raw_key: str) -> str:
    """Convert file-style key (hyphenated) to Python-style (underscored)."""
    return raw_key.strip().lower().replace("-", "_")


def _coerce(key: str, raw: Any) -> Any:
    """Type-coerce a value using the type of its default."""
    default = DEFAULTS[key]
    if raw is None:
        return None
    if isinstance(default, int):
        try:
            return int(raw)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"{key} must be an integer, got {raw!r}") from e
    return str(raw)


def _read_file(path: Path) -> dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    except OSError as e:
        raise ConfigError(f"cannot read {path}: {e}") from e
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping")
    return data


def read_config(path: str | Path | None = None, env: Mapping[str, str] | None = None) -> dict[str, Any]:
    """Read settings into a flat dict.

    Later sources win: defaults, then the YAML file, then environment
    variables. Unknown keys are ignored.
    """
    env = os.environ if env is None else env
    if path is None:
        path = env.get(f"{ENV_PREFIX}CONFIG", DEFAULT_CONFIG_PATH)

    result = dict(DEFAULTS)
    for raw_key, value in _read_file(Path(path).expanduser()).items():
        key = _python_key(str(raw_key))
        if key in DEFAULTS:
            result[key] = _coerce(key, value)
    for key in DEFAULTS:
        value = env.get(f"{ENV_PREFIX}{key.upper()}")
        if value is not None:
            result[key] = _coerce(key, value)
    return result


def configure_logging(level: str = "WARNING", log_file: str | None = None) -> None:
    """Set up root logging to stderr, or to a file when given."""
    kwargs: dict[str, Any] = {}
    if log_file:
        kwargs["filename"] = str(Path(log_file).expanduser())
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(message)s",
        level=getattr(logging, str(level).upper(), logging.WARNING),
        **kwargs,
    )
