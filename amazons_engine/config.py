"""
Engine configuration.

Settings live in dataclasses, validated on construction. A TOML file can
override the defaults:

    [search]
    depth_thresholds = [20, 30, 40, 50]
    fixed_depth = 2
    time_limit_ms = 5000

    log_level = "DEBUG"
"""

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

from amazons_engine.exceptions import ConfigError

DEFAULT_CONFIG_PATH = "amazons.toml"


@dataclass
class SearchConfig:
    """Search settings."""

    depth_thresholds: Tuple[int, ...] = (20, 30, 40, 50)
    """Move counts at which the search depth grows by one (depth 1 below the first)"""

    fixed_depth: Optional[int] = None
    """Search exactly this deep, ignoring the schedule (None uses the schedule)"""

    time_limit_ms: Optional[int] = None
    """Deadline per search; None searches to full depth"""

    def __post_init__(self):
        self.depth_thresholds = tuple(self.depth_thresholds)

        if any(b <= a for a, b in zip(self.depth_thresholds, self.depth_thresholds[1:])):
            raise ConfigError(
                f"depth_thresholds must be strictly increasing, got {self.depth_thresholds}"
            )

        if self.fixed_depth is not None and self.fixed_depth < 1:
            raise ConfigError(f"fixed_depth must be at least 1, got {self.fixed_depth}")

        if self.time_limit_ms is not None and self.time_limit_ms <= 0:
            raise ConfigError(f"time_limit_ms must be positive, got {self.time_limit_ms}")


@dataclass
class EngineConfig:
    search: SearchConfig = field(default_factory=SearchConfig)
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    def __post_init__(self):
        self.log_level = self.log_level.upper()
        if self.log_level not in logging.getLevelNamesMapping():
            raise ConfigError(f"unknown log_level: {self.log_level}")
        if self.log_file is not None:
            self.log_file = Path(self.log_file)

    @staticmethod
    def load_from_toml(path: Optional[str] = None) -> "EngineConfig":
        """
        Load configuration from a TOML file.

        A missing file yields the defaults; unknown keys are ignored.
        AMAZONS_SEARCH_DEPTH, when set, overrides search.fixed_depth.

        Args:
            path: File to read (default: $AMAZONS_CONFIG_TOML or amazons.toml)

        Raises:
            ConfigError: If a value is invalid
        """
        path = path or os.environ.get("AMAZONS_CONFIG_TOML", DEFAULT_CONFIG_PATH)
        raw = {}
        if os.path.exists(path):
            with open(path, "rb") as f:
                raw = tomllib.load(f)

        search_raw = {
            k: v for k, v in raw.get("search", {}).items()
            if k in SearchConfig.__dataclass_fields__
        }
        override_depth = os.environ.get("AMAZONS_SEARCH_DEPTH")
        if override_depth:
            try:
                search_raw["fixed_depth"] = int(override_depth)
            except ValueError:
                raise ConfigError(f"AMAZONS_SEARCH_DEPTH must be an integer, got {override_depth!r}")

        top_level = {
            k: v for k, v in raw.items()
            if k in ("log_level", "log_file")
        }
        return EngineConfig(search=SearchConfig(**search_raw), **top_level)
