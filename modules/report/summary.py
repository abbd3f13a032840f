"""
Report Summary

Aggregates over the report rows: row count, total tax due and average
taxable income. The average is only computed for a non-empty report.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Iterable

from modules.tax.records import CalculationRecord


@dataclass(frozen=True)
class ReportSummary:
    """Summary statistics for a report."""
    count: int
    total_tax_due: Decimal
    average_taxable_income: Optional[Decimal] = None  # None when count == 0

    @property
    def is_empty(self) -> bool:
        return self.count == 0


def summarize(records: Iterable[CalculationRecord]) -> ReportSummary:
    """
    Summarize a report.

    Args:
        records: A ReportStore or any iterable of CalculationRecords

    Returns:
        ReportSummary; average_taxable_income is None for an empty report
    """
    rows = list(records)
    count = len(rows)

    total_tax_due = sum((row.tax_due for row in rows), Decimal(0))

    if count == 0:
        return ReportSummary(count=0, total_tax_due=total_tax_due)

    total_taxable = sum((row.taxable_income for row in rows), Decimal(0))
    return ReportSummary(
        count=count,
        total_tax_due=total_tax_due,
        average_taxable_income=total_taxable / count,
    )
