"""
Report Renderer

Projects the report into display view models. Every call is a full
re-projection of the current rows; there is no incremental patching, so
the view can never drift from the store.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from dataclasses import dataclass
from typing import List, Optional, Union, Iterable

from core import config
from lib.formatting import format_number, format_timestamp
from modules.report.summary import summarize
from modules.tax.records import CalculationRecord


@dataclass(frozen=True)
class ReportRowView:
    """One formatted table row."""
    index: int            # 1-based
    income: str
    taxable_income: str
    tax_due: str
    date_label: str


@dataclass(frozen=True)
class EmptySummaryView:
    """Summary box contents when the report has no rows."""
    message: str = config.EMPTY_REPORT_MESSAGE
    exports_enabled: bool = False


@dataclass(frozen=True)
class SummaryView:
    """Summary box contents for a populated report."""
    count: int
    total_tax_due: str
    average_taxable_income: str
    exports_enabled: bool = True


@dataclass(frozen=True)
class LatestResultView:
    """The "Latest Calculation" box."""
    taxable_income: str
    tax_before_payments: str
    tax_due: str


def render_table(records: Iterable[CalculationRecord]) -> List[ReportRowView]:
    """Build one row view per record, in report order."""
    return [
        ReportRowView(
            index=i,
            income=format_number(row.income),
            taxable_income=format_number(row.taxable_income),
            tax_due=format_number(row.tax_due),
            date_label=format_timestamp(row.timestamp),
        )
        for i, row in enumerate(records, start=1)
    ]


def render_summary(records: Iterable[CalculationRecord]) -> Union[EmptySummaryView, SummaryView]:
    """Build the summary view; empty reports get EmptySummaryView with exports disabled."""
    summary = summarize(records)

    if summary.is_empty:
        return EmptySummaryView()

    return SummaryView(
        count=summary.count,
        total_tax_due=format_number(summary.total_tax_due),
        average_taxable_income=format_number(summary.average_taxable_income),
    )


def render_latest(record: Optional[CalculationRecord]) -> Optional[LatestResultView]:
    if record is None:
        return None
    return LatestResultView(
        taxable_income=format_number(record.taxable_income),
        tax_before_payments=format_number(record.tax_before_payments),
        tax_due=format_number(record.tax_due),
    )
