# mergeview/config/settings.py
# Configuration management for mergeview: diff algorithm, display & resolver settings

import os
from pathlib import Path
from typing import Dict, Any, Optional, cast
import typer
from dataclasses import dataclass, asdict

from ..mergeview_io.generics import read_json_safe, write_json_safe
from ..core.constants import (
    ACCENTS,
    DIFF_ALGORITHMS,
    DIFF_POSITIONAL,
    DEFAULT_MARKER_SIZE,
)
from ..core.exceptions import JSONParsingError, FileReadError, SettingsValidationError

# env var overriding the config file location
CONFIG_ENV_VAR = "MERGEVIEW_CONFIG"


# * Default settings dataclass for mergeview CLI
@dataclass
class MergeviewSettings:
    # line diff algorithm for `mergeview diff`: "positional" or "matched"
    diff_algorithm: str = DIFF_POSITIONAL

    # display settings
    line_numbers: bool = True
    accent: str = "blue"

    # interactive resolver setting
    interactive: bool = True

    # conflict marker width (<<<<<<< is 7)
    marker_size: int = DEFAULT_MARKER_SIZE

    # dev mode setting (enables DEBUG output w/ --verbose)
    dev_mode: bool = False

    def __post_init__(self) -> None:
        if self.diff_algorithm not in DIFF_ALGORITHMS:
            raise ValueError(
                f"diff_algorithm must be one of {set(DIFF_ALGORITHMS)}, got '{self.diff_algorithm}'"
            )

        # strict bool validation (no coercion)
        for name in ("line_numbers", "interactive", "dev_mode"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ValueError(
                    f"{name} must be a boolean (true/false), "
                    f"got {type(value).__name__}: {value}"
                )

        if (
            not isinstance(self.marker_size, int)
            or isinstance(self.marker_size, bool)
            or self.marker_size < 1
        ):
            raise ValueError(
                f"marker_size must be a positive integer, got {self.marker_size}"
            )

        if self.accent not in ACCENTS:
            raise ValueError(f"accent must be one of {set(ACCENTS)}, got {self.accent!r}")


# * Resolve config path from env var or home directory
def default_config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return Path.home() / ".mergeview" / "config.json"


# * Settings management class w/ JSON persistence for loading, saving, & modifying settings
class SettingsManager:
    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = config_path or default_config_path()
        self._settings: Optional[MergeviewSettings] = None

    # load settings from file or return defaults
    def load(self) -> MergeviewSettings:
        if self._settings is not None:
            return self._settings

        if self.config_path.exists():
            try:
                data = read_json_safe(self.config_path)
                self._settings = MergeviewSettings(**data)
            except (JSONParsingError, FileReadError, TypeError, ValueError) as e:
                typer.echo(f"Warning: Invalid config file {self.config_path}: {e}")
                typer.echo("Using default settings")
                self._settings = MergeviewSettings()
        else:
            self._settings = MergeviewSettings()

        return self._settings

    # save setting to file
    def save(self, settings: MergeviewSettings) -> None:
        write_json_safe(asdict(settings), self.config_path)
        self._settings = settings

    # get a specific setting value
    def get(self, key: str) -> Any:
        settings = self.load()
        return getattr(settings, key, None)

    # set a specific setting value; re-validates the whole settings object
    def set(self, key: str, value: Any) -> None:
        settings = self.load()
        if not hasattr(settings, key):
            raise ValueError(f"Unknown setting: {key}")

        data = asdict(settings)
        data[key] = value
        try:
            updated = MergeviewSettings(**data)
        except ValueError as e:
            raise SettingsValidationError(str(e), key, value)
        self.save(updated)

    # reset to default settings
    def reset(self) -> None:
        self.save(MergeviewSettings())

    # list all settings as a dictionary
    def list_settings(self) -> Dict[str, Any]:
        return asdict(self.load())


# global settings manager instance
settings_manager = SettingsManager()


# * Retrieve settings preferring injected object from Typer context
def get_settings(
    ctx: typer.Context, provided: Optional[MergeviewSettings] = None
) -> MergeviewSettings:
    # prefer explicitly provided settings
    if provided is not None:
        return provided

    # search ctx, parent, & root for MergeviewSettings
    candidates: list[typer.Context] = [ctx]
    parent = cast(Optional[typer.Context], getattr(ctx, "parent", None))
    if parent is not None:
        candidates.append(parent)
    find_root = getattr(ctx, "find_root", None)
    root_ctx = (
        cast(Optional[typer.Context], find_root()) if callable(find_root) else None
    )
    if root_ctx is not None:
        candidates.append(root_ctx)

    for c in candidates:
        obj = getattr(c, "obj", None)
        if isinstance(obj, MergeviewSettings):
            return obj

    # fallback to loading from disk
    return settings_manager.load()
