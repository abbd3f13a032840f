"""
Report Store

Append-only, ordered sequence of CalculationRecords held in memory for
one session. Insertion order is display order is chronological order.
Records are never removed, reordered or replaced.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from typing import List, Optional, Tuple, Iterator

from modules.tax.records import CalculationRecord


class ReportError(Exception):
    """Base class for report errors."""
    pass


class EmptyReportError(ReportError):
    """Raised when a report export is attempted with no rows."""
    pass


class ReportStore:
    """In-memory report rows plus the most recent calculation."""

    def __init__(self):
        self._records: List[CalculationRecord] = []
        self._latest: Optional[CalculationRecord] = None

    def append(self, record: CalculationRecord):
        """Add a record to the end of the report and make it the latest result."""
        self._records.append(record)
        self._latest = record

    def all(self) -> Tuple[CalculationRecord, ...]:
        """Read-only snapshot of all records in insertion order."""
        return tuple(self._records)

    def count(self) -> int:
        return len(self._records)

    @property
    def latest(self) -> Optional[CalculationRecord]:
        """Most recently appended record, None before the first calculation."""
        return self._latest

    @property
    def is_empty(self) -> bool:
        return not self._records

    def require_rows(self):
        """
        Guard for exporters.

        Raises:
            EmptyReportError: If the report has no rows
        """
        if not self._records:
            raise EmptyReportError("Report has no rows to export")

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[CalculationRecord]:
        return iter(self.all())
