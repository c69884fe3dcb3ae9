"""
Table data sources.

A data source supplies the header values and the row values of one table.
Both accessors are called once per print call and should return a fresh
iterable each time, so the same source can be printed more than once.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TableSource(Protocol):
    """Protocol for objects that describe a table to print."""

    def headers(self) -> Iterable[str | None] | None:
        """
        Column header values, or None if the table has no header row.

        Returns:
            Header values in column order
        """
        ...

    def rows(self) -> Iterable[Iterable[str | None]] | None:
        """
        Row values, or None if the table has no rows.

        Returns:
            One iterable of cell values per row, in column order
        """
        ...


class SimpleTableSource:
    """Data source over caller-supplied header and row iterables.

    The iterables are handed out as they are: a generator can be printed
    once, a list any number of times.
    """

    def __init__(
        self,
        headers: Iterable[str | None] | None = None,
        rows: Iterable[Iterable[str | None]] | None = None,
    ) -> None:
        self._headers = headers
        self._rows = rows

    def headers(self) -> Iterable[str | None] | None:
        return self._headers

    def rows(self) -> Iterable[Iterable[str | None]] | None:
        return self._rows

    def __repr__(self) -> str:
        return f"SimpleTableSource(headers={self._headers!r}, rows={self._rows!r})"


class MappingTableSource:
    """Data source over a sequence of mappings, one mapping per row.

    Columns are taken from ``columns`` when given, otherwise from the keys
    of all records in first-seen order. A missing key or a None value is an
    absent cell; any other value is shown via ``str()``.

    Example:
        source = MappingTableSource([
            {"id": 1, "name": "john"},
            {"id": 2, "name": "tom", "age": 20},
        ])
        source.headers()  # ['id', 'name', 'age']
    """

    def __init__(
        self,
        records: Sequence[Mapping[str, Any]],
        columns: Sequence[str] | None = None,
    ) -> None:
        self._records = records
        self._columns = list(columns) if columns is not None else None

    @property
    def columns(self) -> list[str]:
        if self._columns is not None:
            return list(self._columns)
        seen: dict[str, None] = {}
        for record in self._records:
            for key in record:
                seen.setdefault(key, None)
        return list(seen)

    def headers(self) -> list[str]:
        return self.columns

    def rows(self) -> Iterable[list[str | None]]:
        columns = self.columns
        for record in self._records:
            yield [_display(record.get(column)) for column in columns]


def _display(value: Any) -> str | None:
    return None if value is None else str(value)
