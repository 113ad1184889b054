"""Configuration schema and loading for avatargraph."""

from .loader import load_check_config
from .schema import CheckConfig

__all__ = [
    "CheckConfig",
    "load_check_config",
]
