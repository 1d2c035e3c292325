"""Fixed names and defaults shared by every steamer plugin"""
from enum import Enum
from types import MappingProxyType


class Scope(str, Enum):
    GLOBAL = "global"
    LOCAL = "local"


# Config file locations: {base}/.steamer/{name}.{extension}
CONFIG_DIRNAME = ".steamer"
DEFAULT_EXTENSION = "json"

# Tool-wide config shared with the steamer command itself
TOOL_CONFIG_NAME = "steamer"
TOOL_CONFIG_EXTENSION = "js"
TOOL_CONFIG_OWNER = "steamerjs"

# Extensions written as `module.exports = {...};`
MODULE_EXTENSIONS = ("js",)
MODULE_PREFIX = "module.exports = "
MODULE_SUFFIX = ";"

DEFAULT_CONFIG = MappingProxyType({
    "NPM": "npm",
    "PLUGIN_PREFIX": "steamer-plugin-",
    "KIT_PREFIX": "steamer-",
    "TEAM_PREFIX": "steamer-team-",
})

# Environment
PLUGIN_PATH_ENV = "STEAMER_PLUGIN_PATH"
LOG_LEVEL_ENV = "STEAMER_LOG_LEVEL"

# Console
COMMAND_NAME = "steamer"
FALLBACK_COLUMNS = 84
OPTION_GUTTER = 4
OPTION_INDENT = 4
