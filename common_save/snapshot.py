"""
Snapshot of the shared switches and variables.

Serialized form (before compression):

    {"flags": {"11": true, "12": false}, "counters": {"5": 42}}

Keys are string-encoded indices. Unknown top-level keys are ignored on
read and a missing category simply restores nothing.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Optional

import jsonschema

from engine.core.state import IndexedStore

logger = logging.getLogger(__name__)

FLAGS_KEY = "flags"
COUNTERS_KEY = "counters"

SNAPSHOT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        FLAGS_KEY: {"type": "object"},
        COUNTERS_KEY: {"type": "object"},
    },
}


@dataclass(frozen=True)
class Snapshot:
    """Tracked switch (flag) and variable (counter) values."""
    flags: dict[str, bool] = field(default_factory=dict)
    counters: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def capture(
        cls,
        switches: IndexedStore,
        variables: IndexedStore,
        switch_indexes: Iterable[int],
        variable_indexes: Iterable[int],
    ) -> Snapshot:
        """Read the given indices from the live stores."""
        return cls(
            flags={str(i): switches.value(i) for i in switch_indexes},
            counters={str(i): variables.value(i) for i in variable_indexes},
        )

    @property
    def is_empty(self) -> bool:
        return not self.flags and not self.counters

    def to_dict(self) -> dict[str, dict[str, Any]]:
        return {FLAGS_KEY: dict(self.flags), COUNTERS_KEY: dict(self.counters)}

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(',', ':'))

    @classmethod
    def from_dict(cls, data: Any) -> Snapshot:
        """
        Build a snapshot from decoded JSON.

        Raises:
            jsonschema.ValidationError: data is not a snapshot object
        """
        jsonschema.validate(instance=data, schema=SNAPSHOT_SCHEMA)
        return cls(
            flags=dict(data.get(FLAGS_KEY, {})),
            counters=dict(data.get(COUNTERS_KEY, {})),
        )

    @classmethod
    def from_json(cls, text: Optional[str]) -> Snapshot:
        """Parse serialized text; None means nothing stored (empty snapshot)."""
        if text is None:
            return cls()
        return cls.from_dict(json.loads(text))

    def apply(self, switches: IndexedStore, variables: IndexedStore) -> int:
        """
        Write every stored value back into the live stores.

        Returns:
            Number of cells written
        """
        written = 0
        for index, value in _indexed(self.flags, FLAGS_KEY):
            switches.set_value(index, value)
            written += 1
        for index, value in _indexed(self.counters, COUNTERS_KEY):
            variables.set_value(index, value)
            written += 1
        return written


def _indexed(values: dict[str, Any], category: str) -> Iterator[tuple[int, Any]]:
    for key, value in values.items():
        try:
            index = int(key)
        except (TypeError, ValueError):
            logger.warning("Skipping %s entry with invalid index %r", category, key)
            continue
        if index < 0:
            logger.warning("Skipping %s entry with negative index %r", category, key)
            continue
        yield index, value
