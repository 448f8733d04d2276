"""
Plugin command surface.

Event scripts call ``CommonSave <sub-command>``:

    CommonSave load     # apply the common save to switches/variables
    CommonSave save     # record the target switches/variables
    CommonSave exists   # query only, no side effect
    CommonSave remove   # delete the common save

Unknown commands and sub-commands are ignored.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Sequence

from common_save.config import PLUGIN_NAME
from common_save.manager import CommonSaveManager

logger = logging.getLogger(__name__)


class CommonSaveCommand:
    """Dispatches plugin commands to a CommonSaveManager."""

    def __init__(self, manager: CommonSaveManager, name: str = PLUGIN_NAME):
        self.manager = manager
        self.name = name
        self._sub_commands: dict[str, Callable[[], Any]] = {
            "load": manager.load,
            "save": manager.save,
            "exists": manager.exists,
            "remove": manager.remove,
        }

    def __call__(self, command: str, args: Sequence[str]) -> Optional[Any]:
        """
        Run a plugin command.

        Args:
            command: Plugin command name (only this plugin's name is handled)
            args: Command arguments; args[0] selects the sub-command

        Returns:
            The manager method's result, or None if the command was ignored
        """
        if command != self.name or not args:
            return None

        action = self._sub_commands.get(args[0])
        if action is None:
            logger.debug("Ignoring unknown %s sub-command %r", self.name, args[0])
            return None
        return action()
