"""
Live game state stores - switches and variables.

Both stores are array-like and addressed by integer index. Unset
indices read as the store's default (False for switches, 0 for
variables). Plugins reference these stores; they never own them.
"""

from __future__ import annotations

from typing import Any, Iterator, Protocol


class IndexedStore(Protocol):
    """Anything addressable by integer index with value()/set_value()."""

    def value(self, index: int) -> Any: ...

    def set_value(self, index: int, value: Any) -> None: ...


class _IndexedValues:
    """Growable list of values with a default for unset cells."""

    default: Any = None

    def __init__(self, size: int = 0):
        self._data: list[Any] = [self.default] * size

    def value(self, index: int) -> Any:
        index = self._check_index(index)
        if index < len(self._data):
            return self._data[index]
        return self.default

    def set_value(self, index: int, value: Any) -> None:
        index = self._check_index(index)
        if index >= len(self._data):
            self._data.extend([self.default] * (index + 1 - len(self._data)))
        self._data[index] = self._coerce(value)

    def clear(self) -> None:
        self._data = []

    def items(self) -> Iterator[tuple[int, Any]]:
        """Iterate (index, value) for every cell that differs from the default."""
        for index, value in enumerate(self._data):
            if value != self.default:
                yield index, value

    def __len__(self) -> int:
        return len(self._data)

    @staticmethod
    def _check_index(index: int) -> int:
        index = int(index)
        if index < 0:
            raise IndexError(f"Negative index: {index}")
        return index

    def _coerce(self, value: Any) -> Any:
        return value


class GameSwitches(_IndexedValues):
    """Boolean flags (story switches)."""

    default = False

    def _coerce(self, value: Any) -> bool:
        return bool(value)


class GameVariables(_IndexedValues):
    """Numeric/scalar counters (game variables)."""

    default = 0

    def _coerce(self, value: Any) -> Any:
        # Unset variables read as 0, so None normalizes to the default
        return self.default if value is None else value
