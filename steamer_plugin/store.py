"""Two-tier (global + local) config files for steamer plugins"""
import json
import logging
import os
import sysconfig
from collections.abc import Mapping
from pathlib import Path

from .config import (CONFIG_DIRNAME, DEFAULT_CONFIG, DEFAULT_EXTENSION,
                     MODULE_EXTENSIONS, MODULE_PREFIX, MODULE_SUFFIX,
                     PLUGIN_PATH_ENV, TOOL_CONFIG_EXTENSION, TOOL_CONFIG_NAME,
                     TOOL_CONFIG_OWNER, Scope)
from .reporter import Reporter
from .utils import deep_merge

logger = logging.getLogger(__name__)


class ConfigExistsError(FileExistsError):
    """Raised when creating a config file that is already on disk."""

    def __init__(self, path):
        self.path = Path(path)
        super().__init__(f"{self.path} exists")


def serialize_record(owner: str, payload, extension: str) -> str:
    """Render a config file body: {"plugin": owner, "config": payload}"""
    body = json.dumps({"plugin": owner, "config": payload}, indent=4, ensure_ascii=False)
    if extension in MODULE_EXTENSIONS:
        return MODULE_PREFIX + body + MODULE_SUFFIX
    return body


def parse_record(text: str, extension: str) -> dict:
    """Return the payload of a config file body, or {} when it has none."""
    text = text.strip()
    if extension in MODULE_EXTENSIONS:
        prefix = MODULE_PREFIX.strip()
        if text.startswith(prefix):
            text = text[len(prefix):].strip()
        if text.endswith(MODULE_SUFFIX):
            text = text[:-len(MODULE_SUFFIX)].rstrip()

    data = json.loads(text)
    if not isinstance(data, dict):
        return {}
    payload = data.get("config")
    return payload if isinstance(payload, dict) else {}


class ConfigStore:
    """
    Locate, read and create one plugin's config files.

    Files live at ``{base}/.steamer/{name}.{extension}`` where base is the
    user's home directory (global scope) or the working directory (local
    scope). Reads always go back to disk and never fail; the only error a
    caller sees is :class:`ConfigExistsError` on create.
    """

    def __init__(self, name: str, folder=None, home=None, reporter: Reporter = None):
        self.name = name
        self.folder = folder
        self.home = home
        self.reporter = reporter or Reporter(name)

    # ── Paths ───────────────────────────────────────────────────────────────

    def global_home(self) -> Path:
        if self.home:
            return Path(self.home)
        try:
            return Path.home()
        except (RuntimeError, KeyError):
            return Path.cwd()

    def local_home(self, folder=None) -> Path:
        return Path(folder or self.folder or Path.cwd())

    def global_modules(self):
        """Directory plugins are installed into, or None when there is none."""
        override = os.environ.get(PLUGIN_PATH_ENV, "").strip()
        if override:
            return override

        site_packages = sysconfig.get_paths().get("purelib")
        if site_packages and os.path.isdir(site_packages):
            return site_packages

        return None

    def resolve_path(self, scope=Scope.LOCAL, name: str = None, extension: str = None,
                     folder=None) -> Path:
        base = self.global_home() if Scope(scope) is Scope.GLOBAL else self.local_home(folder)
        filename = f"{name or self.name}.{extension or DEFAULT_EXTENSION}"
        return (base / CONFIG_DIRNAME / filename).resolve()

    # ── Read ────────────────────────────────────────────────────────────────

    def read_record(self, path) -> dict:
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8-sig")
            return parse_record(text, path.suffix.lstrip("."))
        except FileNotFoundError:
            logger.debug("No config at %s", path)
        except (OSError, ValueError, RecursionError) as e:
            logger.debug("Ignoring unreadable config %s: %s", path, e)
        return {}

    def read_config(self, name: str = None, extension: str = None, scope=Scope.LOCAL,
                    folder=None) -> dict:
        global_config = self.read_record(self.resolve_path(Scope.GLOBAL, name, extension))
        if Scope(scope) is Scope.GLOBAL:
            return deep_merge(global_config)

        local_config = self.read_record(self.resolve_path(Scope.LOCAL, name, extension, folder))
        return deep_merge(global_config, local_config)

    def read_tool_config(self, scope=Scope.LOCAL) -> dict:
        return self.read_config(TOOL_CONFIG_NAME, TOOL_CONFIG_EXTENSION, scope, Path.cwd())

    def read_tool_default_config(self) -> dict:
        return deep_merge(DEFAULT_CONFIG, self.read_tool_config())

    # ── Create ──────────────────────────────────────────────────────────────

    def create_config(self, payload=None, name: str = None, extension: str = None,
                      scope=Scope.LOCAL, overwrite: bool = False, folder=None) -> Path:
        name = name or self.name
        path = self.resolve_path(scope, name, extension, folder)
        return self._write(path, name, payload, overwrite)

    def create_tool_config(self, payload=None, scope=Scope.LOCAL, overwrite: bool = False) -> Path:
        path = self.resolve_path(scope, TOOL_CONFIG_NAME, TOOL_CONFIG_EXTENSION, Path.cwd())
        return self._write(path, TOOL_CONFIG_OWNER, payload, overwrite)

    def _write(self, path: Path, owner: str, payload, overwrite: bool) -> Path:
        if not overwrite and path.exists():
            err = ConfigExistsError(path)
            self.reporter.error(str(err))
            raise err

        if payload is None:
            payload = {}
        elif isinstance(payload, Mapping):
            payload = deep_merge(payload)
        content = serialize_record(owner, payload, path.suffix.lstrip("."))
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        logger.info("Wrote %s config to %s", owner, path)
        return path
