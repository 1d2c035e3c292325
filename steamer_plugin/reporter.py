"""Colored console output for steamer plugins"""
import json
import shutil

import click

from .config import (COMMAND_NAME, DEFAULT_CONFIG, FALLBACK_COLUMNS,
                     OPTION_GUTTER, OPTION_INDENT)


class Reporter:
    """
    Writes styled lines to stdout and hands back what it wrote.

    Every helper returns the rendered (styled) string so callers and tests
    can compare against it without re-deriving the formatting. Errors go to
    stdout too, like every other level.
    """

    def __init__(self, name: str = None, columns: int = None, file=None, color: bool = None):
        self.name = name or "steamer-plugin"
        self._columns = columns
        self._file = file
        self._color = color

    @property
    def columns(self) -> int:
        if self._columns:
            return self._columns
        return shutil.get_terminal_size((FALLBACK_COLUMNS, 24)).columns or FALLBACK_COLUMNS

    # ── Levels ──────────────────────────────────────────────────────────────

    def log(self, text="", color: str = "white") -> str:
        if text is None:
            text = ""
        elif isinstance(text, (dict, list, tuple)):
            text = json.dumps(text, default=str, ensure_ascii=False)
        elif not isinstance(text, str):
            text = str(text)

        return self._echo(click.style(text, fg=color))

    def _echo(self, msg: str) -> str:
        click.echo(msg, file=self._file, color=self._color)
        return msg

    def error(self, text) -> str:
        return self.log(text, "red")

    def info(self, text) -> str:
        return self.log(text, "cyan")

    def warn(self, text) -> str:
        return self.log(text, "yellow")

    def success(self, text) -> str:
        return self.log(text, "green")

    # ── Layout ──────────────────────────────────────────────────────────────

    def print_title(self, text, color: str = "white") -> str:
        title = f" {text} "
        room = max(self.columns - len(title), 0)
        right = room // 2
        left = room - right
        return self.log("=" * left + title + "=" * right, color)

    def print_end(self, color: str = "white") -> str:
        return self.log("=" * self.columns, color)

    def print_usage(self, description: str, command: str = None) -> str:
        if not command:
            command = self.name.replace(DEFAULT_CONFIG["PLUGIN_PREFIX"], "", 1)

        body = f"{COMMAND_NAME} {command}    {description}\n"
        return self._echo(click.style("\nusage: \n", fg="green") + click.style(body, fg="cyan"))

    def print_option(self, options) -> str:
        """
        Render a two-column help table.

        Each option is a mapping with optional keys ``option``, ``alias``,
        ``value`` and ``description``. Descriptions all start at the width of
        the longest label plus the gutter.
        """
        rows = []
        for item in options or []:
            label = " " * OPTION_INDENT + "--" + (item.get("option") or "")
            if item.get("alias"):
                label += ", -" + item["alias"]
            if item.get("value"):
                label += " " + item["value"]
            rows.append((label, item.get("description") or ""))

        width = max((len(label) for label, _ in rows), default=0)

        body = ""
        for label, description in rows:
            body += label.ljust(width) + " " * OPTION_GUTTER + description + "\n"
        return self._echo(click.style("options: \n", fg="green") + click.style(body, fg="cyan"))
