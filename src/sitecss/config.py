"""Consolidation settings read from the site's build configuration."""

from __future__ import annotations

import posixpath
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from sitecss.errors import ConfigError

DEFAULT_DESTINATION = "/assets/styles.css"
CONFIG_KEY = "uncss"


def normalize_destination(value: str | None) -> str:
    """Return *value* as a root-relative path (``/`` + path, no leading slashes).

    ``None`` yields the default destination.
    """
    if value is None:
        return DEFAULT_DESTINATION
    if not isinstance(value, str):
        raise ConfigError(f"destination must be a string, got {type(value).__name__}")
    stripped = value.strip().lstrip("/")
    if not stripped or stripped.endswith("/"):
        raise ConfigError(f"destination must name a file, got {value!r}")
    depth = 0
    for part in stripped.split("/"):
        if part == "..":
            depth -= 1
            if depth < 0:
                raise ConfigError(f"destination escapes the output root: {value!r}")
        elif part not in ("", "."):
            depth += 1
    normalized = posixpath.normpath("/" + stripped)
    if normalized == "/":
        raise ConfigError(f"destination must name a file, got {value!r}")
    return normalized


def _string_list(name: str, value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"{name} must be a string or a list of strings")
    return tuple(value)


@dataclass(frozen=True)
class ConsolidationConfig:
    """Settings for one consolidation pass.

    ``config_flag`` names the option that hands the tool its config file.
    It defaults to uncss's own ``--uncssrc``; tools following the generic
    ``<tool> --config <path>`` contract need ``config_flag="--config"``.
    """

    files: tuple[str, ...]
    media: tuple[str, ...] | None = None
    timeout: int | float | None = None
    destination: str = DEFAULT_DESTINATION
    tool: str = "uncss"
    config_flag: str = "--uncssrc"
    workers: int = 1
    atomic: bool = True  # buffer every rewritten page before writing any

    def __post_init__(self) -> None:
        if not self.files:
            raise ConfigError("at least one file pattern is required")
        if self.timeout is not None and (
            isinstance(self.timeout, bool) or not isinstance(self.timeout, (int, float))
        ):
            raise ConfigError(f"timeout must be a number, got {self.timeout!r}")
        if self.workers < 1:
            raise ConfigError(f"workers must be at least 1, got {self.workers}")
        if not self.tool.strip():
            raise ConfigError("tool command must not be empty")
        object.__setattr__(self, "destination", normalize_destination(self.destination))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> ConsolidationConfig:
        """Build a config from the namespaced section of a site configuration."""
        if not data:
            raise ConfigError(f"missing [{CONFIG_KEY}] configuration")
        if "files" not in data:
            raise ConfigError("'files' is required")

        media = data.get("media")
        workers = data.get("workers", 1)
        if isinstance(workers, bool) or not isinstance(workers, int):
            raise ConfigError(f"workers must be an integer, got {workers!r}")
        atomic = data.get("atomic", True)
        if not isinstance(atomic, bool):
            raise ConfigError(f"atomic must be true or false, got {atomic!r}")

        return cls(
            files=_string_list("files", data["files"]),
            media=_string_list("media", media) if media is not None else None,
            timeout=data.get("timeout"),
            destination=data.get("destination", DEFAULT_DESTINATION),
            tool=str(data.get("tool", "uncss")),
            config_flag=str(data.get("config_flag", "--uncssrc")),
            workers=workers,
            atomic=atomic,
        )


def load_site_config(path: str | Path, key: str = CONFIG_KEY) -> ConsolidationConfig:
    """Read a TOML build configuration and return its ``[key]`` section."""
    config_path = Path(path)
    try:
        with config_path.open("rb") as fh:
            data = tomllib.load(fh)
    except OSError as exc:
        raise ConfigError(f"{config_path}: cannot read configuration: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{config_path}: invalid TOML: {exc}") from exc

    section = data.get(key)
    if not isinstance(section, dict):
        raise ConfigError(f"{config_path}: no [{key}] table")
    return ConsolidationConfig.from_mapping(section)
