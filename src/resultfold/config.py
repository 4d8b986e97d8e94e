"""
Fold configuration.

Settings can be kept in a YAML file so repeated runs share one setup:

    delimiter: ";"
    mode: bisect
    strip: true
    strict: false
"""

import logging
from dataclasses import dataclass, fields, replace
from enum import Enum
from pathlib import Path
from typing import Any, Dict

import yaml

from resultfold.core.result import Result, Ok, Err

logger = logging.getLogger(__name__)


class FoldMode(Enum):
    """Which reduction to apply."""
    FAIL_FAST = "fail-fast"
    BISECT = "bisect"


@dataclass(frozen=True)
class FoldConfig:
    """Parsing and folding settings."""
    delimiter: str = ","
    mode: FoldMode = FoldMode.FAIL_FAST
    strip: bool = True
    strict: bool = False

    def override(self, **changes: Any) -> "FoldConfig":
        """Return a copy with every non-None change applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def config_from_dict(data: Dict[str, Any]) -> Result[FoldConfig, str]:
    """Build a FoldConfig from a plain mapping."""
    known = {f.name for f in fields(FoldConfig)}
    unknown = set(data) - known
    if unknown:
        return Err(f"Unknown config keys: {', '.join(sorted(unknown))}")

    values = dict(data)
    if "mode" in values:
        try:
            values["mode"] = FoldMode(values["mode"])
        except ValueError:
            choices = ", ".join(m.value for m in FoldMode)
            return Err(f"Invalid mode {values['mode']!r}, expected one of: {choices}")

    delimiter = values.get("delimiter", ",")
    if not isinstance(delimiter, str) or not delimiter:
        return Err("delimiter must be a non-empty string")

    for key in ("strip", "strict"):
        if key in values and not isinstance(values[key], bool):
            return Err(f"{key} must be true or false")

    return Ok(FoldConfig(**values))


def load_config(config_path: Path) -> Result[FoldConfig, str]:
    """
    Load fold configuration from a YAML file.

    An empty file yields the defaults.

    Args:
        config_path: Path to YAML config

    Returns:
        Result containing the parsed FoldConfig
    """
    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except Exception as e:
        return Err(f"Failed to load config: {e}")

    if data is None:
        data = {}
    if not isinstance(data, dict):
        return Err(f"Config must be a mapping, got {type(data).__name__}")

    logger.debug(f"Loaded config from {config_path}: {data}")
    return config_from_dict(data)
