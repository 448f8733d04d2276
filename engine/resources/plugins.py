"""
Plugin parameter loading.

Reads the host's plugin list (plugins.json) and exposes each plugin's
parameters as plain key-value strings. The file is a JSON array of
entries shaped like:

    {"name": "CommonSave", "status": true,
     "parameters": {"Target Switches": "11,12", "Is Auto": "true"}}
"""

import json
import logging
from pathlib import Path
from typing import Any

import jsonschema

PLUGINS_SCHEMA: dict[str, Any] = {
    "type": "array",
    "items": {
        "type": "object",
        "required": ["name"],
        "properties": {
            "name": {"type": "string"},
            "status": {"type": "boolean"},
            "description": {"type": "string"},
            "parameters": {
                "type": "object",
                "additionalProperties": {"type": "string"},
            },
        },
    },
}


class PluginManager:
    """
    Registry of plugin parameters, keyed by plugin name.
    """

    def __init__(self, plugins: list[dict[str, Any]] | None = None):
        self._parameters: dict[str, dict[str, str]] = {}
        self.logger = logging.getLogger(__name__)
        if plugins:
            self.setup(plugins)

    @classmethod
    def from_file(cls, path: Path | str) -> "PluginManager":
        """Load plugins.json; a missing or invalid file yields no plugins."""
        manager = cls()
        path = Path(path)

        if not path.exists():
            manager.logger.warning(f"Plugin list not found: {path}")
            return manager

        try:
            with open(path, 'r', encoding='utf-8') as f:
                plugins = json.load(f)
            jsonschema.validate(instance=plugins, schema=PLUGINS_SCHEMA)
        except jsonschema.ValidationError as e:
            manager.logger.error(f"Validation error in {path}: {e.message}")
            return manager
        except (OSError, json.JSONDecodeError) as e:
            manager.logger.error(f"Failed to load {path}: {e}")
            return manager

        manager.setup(plugins)
        return manager

    def setup(self, plugins: list[dict[str, Any]]) -> None:
        """Register every enabled plugin's parameters."""
        for plugin in plugins:
            if not plugin.get("status", True):
                continue
            self._parameters[plugin["name"]] = dict(plugin.get("parameters", {}))

        self.logger.info(f"Loaded parameters for {len(self._parameters)} plugins.")

    def parameters(self, name: str) -> dict[str, str]:
        """Parameters of a plugin (empty when it is unknown or disabled)."""
        return dict(self._parameters.get(name, {}))

    def is_loaded(self, name: str) -> bool:
        return name in self._parameters
