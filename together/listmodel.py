"""A list of row dictionaries with change notifications."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Callable, Optional

__all__ = ["ListModel"]

CountListener = Callable[[int], None]
DataListener = Callable[[int, int], None]


class ListModel:
    """Ordered rows of ``name -> value`` mappings.

    Listeners in ``count_listeners`` receive the new row count whenever it may
    have changed; listeners in ``data_listeners`` receive the first and last
    row index when the whole content has been refreshed.
    """

    def __init__(self, rows: Optional[Iterable[Mapping[str, Any]]] = None) -> None:
        self._rows: list[dict[str, Any]] = [dict(row) for row in rows or ()]
        self.count_listeners: list[CountListener] = []
        self.data_listeners: list[DataListener] = []

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[dict[str, Any]]:
        return iter([dict(row) for row in self._rows])

    def __getitem__(self, index: int) -> dict[str, Any]:
        return self.get(index)

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._rows):
            raise IndexError(f"index {index} out of range for {len(self._rows)} rows")

    def _count_changed(self) -> None:
        for listener in list(self.count_listeners):
            listener(len(self._rows))

    def _data_changed(self) -> None:
        for listener in list(self.data_listeners):
            listener(0, len(self._rows))

    def row_count(self) -> int:
        return len(self._rows)

    def get(self, index: int) -> dict[str, Any]:
        """Return a copy of the row at *index*."""
        self._check(index)
        return dict(self._rows[index])

    def get_value(self, index: int, name: str) -> Any:
        """Return the field *name* of row *index*, or ``None`` if absent."""
        self._check(index)
        return self._rows[index].get(name)

    def set_value(self, index: int, name: str, value: Any) -> Any:
        """Replace an existing field and return its old value.

        Fields that do not exist are not created; ``None`` is returned.
        """
        self._check(index)
        row = self._rows[index]
        if name not in row:
            return None
        old = row[name]
        row[name] = value
        return old

    def append(self, row: Mapping[str, Any]) -> "ListModel":
        self._rows.append(dict(row))
        self._count_changed()
        return self

    def remove(self, start: int, count: int = 1) -> "ListModel":
        """Remove *count* rows starting at *start*."""
        if count < 0 or start < 0 or start + count > len(self._rows):
            raise IndexError(f"cannot remove {count} rows at {start} from {len(self._rows)} rows")
        del self._rows[start:start + count]
        self._count_changed()
        return self

    def replace(self, rows: Iterable[Mapping[str, Any]]) -> None:
        """Replace all rows at once."""
        self._rows = [dict(row) for row in rows]
        self._count_changed()
        self._data_changed()

    def clear(self) -> None:
        self._rows.clear()
        self._count_changed()

    def update(self) -> None:
        """Notify listeners that the content should be re-read."""
        self._count_changed()
        self._data_changed()