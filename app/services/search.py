from __future__ import annotations

from collections.abc import Iterable

from app.schemas import Record


def matches(record: Record, query: str) -> bool:
    return query in record.title or query in record.content


def search_records(records: Iterable[Record], query: str) -> list[Record]:
    return [record for record in records if matches(record, query)]


class CatalogSearcher:
    """Full-scan substring search over a loaded, read-only record collection."""

    def __init__(self, records: Iterable[Record]) -> None:
        self._records = tuple(records)

    def __len__(self) -> int:
        return len(self._records)

    @property
    def records(self) -> tuple[Record, ...]:
        return self._records

    def search(self, query: str) -> list[Record]:
        return search_records(self._records, query)
