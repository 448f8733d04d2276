"""
Resources module.

Exports:
- PluginManager: Plugin parameter loading
"""

from engine.resources.plugins import PluginManager, PLUGINS_SCHEMA

__all__ = [
    "PluginManager",
    "PLUGINS_SCHEMA",
]
