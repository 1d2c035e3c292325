"""Config and console helpers for steamer plugins"""

__version__ = "0.1.0"

from .config import DEFAULT_CONFIG, Scope
from .plugin import SteamerPlugin
from .reporter import Reporter
from .store import ConfigExistsError, ConfigStore
from .utils import deep_merge, kebab_case

__all__ = [
    "ConfigExistsError",
    "ConfigStore",
    "DEFAULT_CONFIG",
    "Reporter",
    "Scope",
    "SteamerPlugin",
    "deep_merge",
    "kebab_case",
]
