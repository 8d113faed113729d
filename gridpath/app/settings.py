# gridpath/app/settings.py
#!/usr/bin/env python3
"""
Viewer settings.

Resolution order (last wins):
    defaults  ->  GRIDPATH_<KEY> environment variables  ->  --key=value flags

Example:
    GRIDPATH_SEED=7 gridpath-viewer --algorithm=bfs --columns=20
"""

import logging
import os
import sys
from dataclasses import dataclass, fields, replace
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from gridpath.core.algorithms import Algorithm, parse_algorithm
from gridpath.core.errors import GridPathError
from gridpath.core.heuristics import HeuristicType
from gridpath.core.types import WallRange

logger = logging.getLogger(__name__)

ENV_PREFIX = "GRIDPATH_"


class SettingsError(GridPathError, ValueError):
    """A setting has a value that cannot be parsed."""


@dataclass(frozen=True)
class Settings:
    seed: int = 2
    columns: int = 16
    rows: int = 9
    wall_min: int = 10
    wall_max: int = 50
    start: Tuple[int, int] = (0, 0)
    algorithm: Algorithm = Algorithm.ASTAR
    heuristic: HeuristicType = HeuristicType.MANHATTAN
    path_generation_delay: float = 0.02    # seconds between advance() calls
    movement_speed: float = 3.0            # cells per second
    keyboard_control: bool = False
    map_path: Optional[str] = None

    @property
    def wall_range(self) -> WallRange:
        return WallRange(self.wall_min, self.wall_max)


def _parse_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"not a boolean: {raw!r}")


def _parse_start(raw: str) -> Tuple[int, int]:
    col, row = raw.split(",")
    return int(col), int(row)


_PARSERS = {
    "seed": int,
    "columns": int,
    "rows": int,
    "wall_min": int,
    "wall_max": int,
    "start": _parse_start,
    "algorithm": parse_algorithm,
    "heuristic": lambda raw: HeuristicType(raw.strip().lower()),
    "path_generation_delay": float,
    "movement_speed": float,
    "keyboard_control": _parse_bool,
    "map_path": str,
}


def _coerce(key: str, raw: str):
    try:
        return _PARSERS[key](raw)
    except (ValueError, TypeError) as ex:
        raise SettingsError(f"bad value for {key}: {raw!r} ({ex})") from ex


def _from_env(environ: Mapping[str, str]) -> Dict[str, object]:
    out: Dict[str, object] = {}
    for f in fields(Settings):
        raw = environ.get(ENV_PREFIX + f.name.upper())
        if raw is not None:
            out[f.name] = _coerce(f.name, raw)
    return out


def _from_argv(argv: Sequence[str]) -> Dict[str, object]:
    out: Dict[str, object] = {}
    for arg in argv:
        if not arg.startswith("--"):
            continue
        key, sep, raw = arg[2:].partition("=")
        key = key.replace("-", "_")
        if key not in _PARSERS:
            logger.warning("Ignoring unknown option %s", arg)
            continue
        if not sep:
            if key != "keyboard_control":
                raise SettingsError(f"option --{key} needs a value")
            raw = "true"
        out[key] = _coerce(key, raw)
    return out


def resolve_settings(argv: Optional[List[str]] = None,
                     environ: Optional[Mapping[str, str]] = None) -> Settings:
    argv = sys.argv[1:] if argv is None else argv
    environ = os.environ if environ is None else environ

    overrides = _from_env(environ)
    overrides.update(_from_argv(argv))
    settings = replace(Settings(), **overrides)

    if settings.columns <= 0 or settings.rows <= 0:
        raise SettingsError("columns and rows must be positive")
    if settings.path_generation_delay < 0:
        raise SettingsError("path_generation_delay must be >= 0")
    if settings.movement_speed <= 0:
        raise SettingsError("movement_speed must be > 0")
    logger.debug("Settings resolved: %s", settings)
    return settings
