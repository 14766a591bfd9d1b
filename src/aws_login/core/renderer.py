"""Rendering of resolved profiles as a table, JSON or YAML."""

import json
from typing import Dict, Optional

import yaml
from rich.console import Console
from rich.table import Table

from ..models import Profiles
from .errors import AppError

FORMATS = ("table", "json", "yaml")


class DisplayRenderer:
    """Renders profiles into text that can be written to a context stream."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def render(self, profiles: Profiles, fmt: str = "table") -> str:
        """Render profiles in the specified format.

        Args:
            profiles: Resolved profiles keyed by name
            fmt: Output format (table, json, yaml)

        Returns:
            The rendered text, ending in a newline
        """
        data = self._to_data(profiles)

        if fmt == "json":
            return json.dumps(data, indent=2) + "\n"
        if fmt == "yaml":
            return yaml.safe_dump(data, sort_keys=False)
        if fmt == "table":
            return self.table(data)
        raise AppError(1, f"Unknown format: {fmt}. Use one of: {', '.join(FORMATS)}")

    def table(self, data: Dict[str, Dict[str, str]]) -> str:
        table = Table(title="Profile Templates", show_lines=False)
        table.add_column("Profile", style="cyan")
        table.add_column("Setting", style="white")
        table.add_column("Value", style="green")

        for name, settings in data.items():
            if not settings:
                table.add_row(name, "", "")
                continue
            for index, (key, value) in enumerate(settings.items()):
                table.add_row(name if index == 0 else "", key, value)

        with self.console.capture() as capture:
            self.console.print(table)
        return capture.get()

    @staticmethod
    def _to_data(profiles: Profiles) -> Dict[str, Dict[str, str]]:
        return {
            profile.name: dict(sorted(profile.settings.items()))
            for profile in sorted(profiles.values())
        }
