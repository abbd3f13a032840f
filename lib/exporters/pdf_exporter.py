"""
PDF Export of the Full Report (trex_report.pdf)

Layout is computed first as plain text lines with coordinates
(layout_pdf_lines), then drawn with fpdf2 (export_pdf). Coordinates are
millimetres on A4 pages.

Layout:
- Title at (10, 15) in 16pt
- Body in 11pt from y = 25, 6mm per line
- Header: row count, total tax due, average taxable income, blank line
- Per row: label with date, five labelled figures, blank line
- Before each row line: if y > 270, new page and y = 20
"""

from dataclasses import dataclass, field
from typing import List

from fpdf import FPDF

from core import config
from lib.formatting import format_number, format_rate, format_timestamp
from modules.report.store import ReportStore
from modules.report.summary import summarize
from modules.tax.records import CalculationRecord
from utils.logging_config import setup_logger

logger = setup_logger(__name__)

TITLE = config.APP_TITLE


@dataclass(frozen=True)
class PdfLine:
    text: str
    x: float
    y: float
    font_size: int = config.PDF_BODY_FONT_SIZE


@dataclass
class PdfPage:
    lines: List[PdfLine] = field(default_factory=list)


def _row_lines(index: int, record: CalculationRecord) -> List[str]:
    return [
        f"Row #{index} ({format_timestamp(record.timestamp)})",
        f"  Book Income:           {format_number(record.income)}",
        f"  Taxable Income:        {format_number(record.taxable_income)}",
        f"  Tax Due / (Refund):    {format_number(record.tax_due)}",
        f"  Tax Rate:              {format_rate(record.tax_rate)}",
        f"  Estimated Payments:    {format_number(record.payments)}",
        "",
    ]


def layout_pdf_lines(store: ReportStore) -> List[PdfPage]:
    """
    Compute the page layout for the report.

    Raises:
        EmptyReportError: If the report has no rows
    """
    store.require_rows()

    records = store.all()
    summary = summarize(records)
    x = config.PDF_LEFT_MARGIN

    page = PdfPage()
    pages = [page]
    page.lines.append(PdfLine(TITLE, x, config.PDF_TITLE_Y, config.PDF_TITLE_FONT_SIZE))

    y = config.PDF_START_Y
    header = [
        f"Rows in report: {summary.count}",
        f"Total Tax Due / (Refund): {format_number(summary.total_tax_due)}",
        f"Average Taxable Income: {format_number(summary.average_taxable_income)}",
        "",
    ]
    for text in header:
        page.lines.append(PdfLine(text, x, y))
        y += config.PDF_LINE_HEIGHT

    for index, record in enumerate(records, start=1):
        for text in _row_lines(index, record):
            if y > config.PDF_PAGE_BREAK_Y:
                page = PdfPage()
                pages.append(page)
                y = config.PDF_NEW_PAGE_Y
            page.lines.append(PdfLine(text, x, y))
            y += config.PDF_LINE_HEIGHT

    logger.debug(f"PDF layout: {len(records)} rows on {len(pages)} pages")
    return pages


def export_pdf(store: ReportStore) -> bytes:
    """
    Render the report as a PDF document.

    Raises:
        EmptyReportError: If the report has no rows
    """
    pages = layout_pdf_lines(store)

    pdf = FPDF(unit="mm", format="A4")
    pdf.set_auto_page_break(False)
    pdf.set_title(TITLE)
    # Fixed creation date keeps output identical for identical reports
    pdf.set_creation_date(store.latest.timestamp)

    for page in pages:
        pdf.add_page()
        for line in page.lines:
            if not line.text:
                continue
            pdf.set_font("Helvetica", size=line.font_size)
            pdf.text(line.x, line.y, line.text)

    data = bytes(pdf.output())
    logger.info(f"PDF export: {store.count()} rows, {len(pages)} pages, {len(data)} bytes")
    return data
