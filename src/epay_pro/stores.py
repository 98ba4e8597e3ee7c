"""In-memory record stores owned by the dashboard state."""

from collections.abc import Callable, Iterable, Iterator
from typing import Generic, TypeVar

import structlog

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class RecordStore(Generic[T]):
    """Ordered, append-only collection of one record type.

    Newest-first stores put appended records at the front so list views show
    the latest entry on top. Records are never removed; updates swap a new
    instance in place of the old one.
    """

    def __init__(
        self,
        name: str,
        records: Iterable[T] = (),
        newest_first: bool = False,
    ):
        self._name = name
        self._records: list[T] = list(records)
        self._newest_first = newest_first
        self._version = 0
        self._logger = logger.bind(component="record_store", store=name)

    @property
    def name(self) -> str:
        return self._name

    @property
    def version(self) -> int:
        """Counter bumped on every mutation."""
        return self._version

    def append(self, record: T) -> T:
        """Add a record to the front or back depending on the store order."""
        if self._newest_first:
            self._records.insert(0, record)
        else:
            self._records.append(record)
        self._version += 1
        self._logger.debug("record_appended", size=len(self._records))
        return record

    def replace_where(
        self,
        predicate: Callable[[T], bool],
        updater: Callable[[T], T],
    ) -> int:
        """Replace every record matching ``predicate`` with ``updater(record)``.

        Returns:
            Number of records replaced.
        """
        replaced = 0
        updated: list[T] = []
        for record in self._records:
            if predicate(record):
                updated.append(updater(record))
                replaced += 1
            else:
                updated.append(record)

        if replaced:
            self._records = updated
            self._version += 1
            self._logger.debug("records_replaced", count=replaced)
        return replaced

    def snapshot(self) -> tuple[T, ...]:
        """Return the current records as an immutable tuple."""
        return tuple(self._records)

    def __iter__(self) -> Iterator[T]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        return len(self._records)
