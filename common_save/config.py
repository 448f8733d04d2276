"""
Common save configuration.

Plugin parameters arrive as human-readable strings:

    Target Switches   "11,12,13"   switch indices to share
    Target Variables  "1,2,3"      variable indices to share
    Is Auto           "true"       sync on host save/load/new game
    Storage Mode      "file"       "file" or "web"
    Save Directory    "save"       directory holding common.rpgsave

CommonSaveConfig turns them into typed fields once, at startup.
Parsing never fails: bad index tokens are logged and skipped.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from common_save.storage import StorageMode

logger = logging.getLogger(__name__)

PLUGIN_NAME = "CommonSave"

# Plugin parameter name -> config field
PARAMETER_FIELDS = {
    "Target Switches": "target_switches",
    "Target Variables": "target_variables",
    "Is Auto": "is_auto",
    "Storage Mode": "storage_mode",
    "Save Directory": "save_dir",
}


def parse_target_indexes(text: Any) -> list[int]:
    """
    Parse a comma-separated list of non-negative indices.

    Invalid tokens are logged and dropped and empty tokens are ignored.
    Valid indices keep their order, repeats included.

        >>> parse_target_indexes("1,x,3")
        [1, 3]
    """
    if text is None:
        return []

    indexes: list[int] = []
    for token in str(text).split(','):
        token = token.strip()
        if not token:
            continue
        try:
            index = int(token)
        except ValueError:
            logger.warning("Ignoring invalid target index %r", token)
            continue
        if index < 0:
            logger.warning("Ignoring negative target index %r", token)
            continue
        indexes.append(index)
    return indexes


def parse_bool(text: Any) -> bool:
    """Textual boolean: only "true" (any case) is True."""
    if isinstance(text, bool):
        return text
    return str(text).strip().lower() == "true"


class CommonSaveConfig(BaseModel):
    """Typed common save settings."""

    model_config = ConfigDict(frozen=True)

    target_switches: list[int] = Field(default_factory=list)
    target_variables: list[int] = Field(default_factory=list)
    is_auto: bool = True
    storage_mode: StorageMode = StorageMode.FILE
    save_dir: Path = Path("save")

    @field_validator("target_switches", "target_variables", mode="before")
    @classmethod
    def _parse_indexes(cls, value: Any) -> list[int]:
        if isinstance(value, (list, tuple)):
            return parse_target_indexes(",".join(str(item) for item in value))
        return parse_target_indexes(value)

    @field_validator("is_auto", mode="before")
    @classmethod
    def _parse_is_auto(cls, value: Any) -> bool:
        if value is None:
            return True
        return parse_bool(value)

    @field_validator("storage_mode", mode="before")
    @classmethod
    def _parse_storage_mode(cls, value: Any) -> Any:
        if isinstance(value, StorageMode):
            return value
        try:
            return StorageMode(str(value).strip().lower())
        except ValueError:
            logger.warning("Unknown storage mode %r, using file storage", value)
            return StorageMode.FILE

    @field_validator("save_dir", mode="before")
    @classmethod
    def _parse_save_dir(cls, value: Any) -> Any:
        if isinstance(value, (str, Path)):
            return value
        logger.warning("Invalid save directory %r, using default", value)
        return Path("save")

    @classmethod
    def from_parameters(cls, parameters: Mapping[str, Any] | None) -> CommonSaveConfig:
        """Build a config from raw plugin parameters (missing keys use defaults)."""
        values = {}
        for name, field_name in PARAMETER_FIELDS.items():
            value = (parameters or {}).get(name)
            if value is None:
                continue
            if field_name == "save_dir" and not str(value).strip():
                continue
            values[field_name] = value
        return cls(**values)
