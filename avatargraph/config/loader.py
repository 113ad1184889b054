"""Helpers for loading check configuration from TOML/JSON sources.

`load_check_config` accepts:

* None -> default CheckConfig
* dict -> CheckConfig.from_dict
* Path / path-like string -> load .toml/.json from filesystem
* Inline JSON/TOML strings
"""

from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .schema import CheckConfig

logger = logging.getLogger("avatargraph.config.loader")

ConfigSource = Union[str, Path, Dict[str, Any], None]


def _is_file(path: Path) -> bool:
    try:
        return path.is_file()
    except OSError:
        # Inline documents can exceed the filesystem name limit.
        return False


def _detect_format(text: str) -> str:
    stripped = text.lstrip()
    return "json" if stripped.startswith(("{", "[")) else "toml"


def load_check_config(source: ConfigSource) -> CheckConfig:
    """Load CheckConfig from various configuration sources.

    Args:
        source: One of:
            * None: returns CheckConfig.default()
            * dict: treated as already-parsed configuration mapping
            * str/Path: either a filesystem path to a .toml/.json file,
              or an inline TOML/JSON string (auto-detected)

    Returns:
        CheckConfig instance.

    Raises:
        ValueError: If the parsed document is not a mapping.
        TypeError: If the source type is unsupported.
    """
    if source is None:
        logger.debug("No config source provided; using default CheckConfig")
        return CheckConfig.default()

    if isinstance(source, dict):
        logger.debug("Loading CheckConfig from provided dict")
        return CheckConfig.from_dict(source)

    if isinstance(source, (str, Path)):
        path = Path(source)
        text: Optional[str] = None

        if _is_file(path):
            text = path.read_text(encoding="utf-8")
            suffix = path.suffix.lower()
            if suffix in {".toml", ".tml"}:
                fmt = "toml"
            elif suffix == ".json":
                fmt = "json"
            else:
                fmt = _detect_format(text)
            logger.info("Loading configuration from file: %s (fmt=%s)", path, fmt)
        else:
            text = str(source)
            fmt = _detect_format(text)
            logger.info("Loading configuration from inline %s string", fmt)

        if fmt == "json":
            data = json.loads(text)
        else:
            data = tomllib.loads(text)

        if not isinstance(data, dict):
            raise ValueError("Top-level configuration must be a mapping/dict")

        return CheckConfig.from_dict(data)

    raise TypeError(f"Unsupported config source type: {type(source)!r}")


__all__ = ["ConfigSource", "load_check_config"]
