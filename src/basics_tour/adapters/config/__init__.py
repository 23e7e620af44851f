"""Configuration adapter - loading, display, overrides, and the declarations section.

Contents:
    * :mod:`.loader` - Layered configuration loading with caching
    * :mod:`.display` - Configuration display in human/JSON formats
    * :mod:`.overrides` - CLI ``--set`` override parsing and application
    * :mod:`.declarations` - ``[declarations]`` validation into the domain record
"""

from __future__ import annotations

from .declarations import load_declarations
from .display import display_config
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides

__all__ = [
    "apply_overrides",
    "display_config",
    "get_config",
    "get_default_config_path",
    "load_declarations",
]
