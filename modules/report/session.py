"""
Report Session

Owns the report for one user session and turns each user action into a
three-stage pipeline:

    calculate: coerce inputs -> compute record -> append -> render
    export:    serialize snapshot -> artifact (or notify on empty report)

Display targets are optional. Without a display the session still
computes and stores, which keeps it usable without a page.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

from core import config
from lib.exporters import export_json, export_pdf
from lib.parsers.form_input import TaxInputs, parse_form
from modules.report.renderer import (
    ReportRowView,
    SummaryView,
    EmptySummaryView,
    LatestResultView,
    render_table,
    render_summary,
    render_latest,
)
from modules.report.store import ReportStore, EmptyReportError
from modules.tax.engine import create_record
from modules.tax.records import CalculationRecord
from utils.logging_config import setup_logger, get_perf_logger

logger = setup_logger(__name__)


class ExportFormat(str, Enum):
    """Supported report export formats."""
    JSON = "json"
    PDF = "pdf"


@dataclass(frozen=True)
class ExportArtifact:
    """A downloadable export."""
    filename: str
    mime_type: str
    data: bytes


_EXPORTERS = {
    ExportFormat.JSON: (export_json, config.JSON_FILENAME, config.JSON_MIME_TYPE),
    ExportFormat.PDF: (export_pdf, config.PDF_FILENAME, config.PDF_MIME_TYPE),
}


class ReportDisplay:
    """
    Display surface for a report.

    Subclasses override whichever parts they can show; the defaults do
    nothing.
    """

    def show_latest(self, view: LatestResultView):
        pass

    def show_table(self, rows: List[ReportRowView]):
        pass

    def show_summary(self, view: Union[SummaryView, EmptySummaryView]):
        pass


class ReportSession:
    """Session-scoped controller around a single ReportStore."""

    def __init__(self, store: Optional[ReportStore] = None):
        self.store = store if store is not None else ReportStore()
        # fmt -> (row count at build time, artifact); rows are append-only
        self._export_cache: Dict[ExportFormat, Tuple[int, ExportArtifact]] = {}

    @property
    def latest(self) -> Optional[CalculationRecord]:
        return self.store.latest

    def calculate(
        self,
        values: Union[TaxInputs, Mapping[str, Any]],
        display: Optional[ReportDisplay] = None
    ) -> CalculationRecord:
        """
        Calculate, append to the report and re-render.

        Args:
            values: TaxInputs or raw form values keyed by field name
            display: Optional display surface to refresh

        Returns:
            The new record
        """
        inputs = values if isinstance(values, TaxInputs) else parse_form(values)
        record = create_record(inputs)
        self.store.append(record)

        logger.info(
            f"Row #{self.store.count()} added: tax due {record.tax_due}",
            extra={'report_context': f"rows={self.store.count()}"}
        )

        self.render(display)
        return record

    def render(self, display: Optional[ReportDisplay] = None):
        """Full re-render of latest result, table and summary. No-op without a display."""
        if display is None:
            return

        latest = render_latest(self.store.latest)
        if latest is not None:
            display.show_latest(latest)
        display.show_table(render_table(self.store))
        display.show_summary(render_summary(self.store))

    @property
    def exports_enabled(self) -> bool:
        return not self.store.is_empty

    def export(
        self,
        fmt: Union[ExportFormat, str],
        notify: Optional[Callable[[str], Any]] = None
    ) -> Optional[ExportArtifact]:
        """
        Export the full report.

        On an empty report nothing is produced: notify (if given) is called
        once with the empty-export message and None is returned.

        Artifacts are cached per format and rebuilt only after the row
        count changes, so page reruns without a new calculation reuse them.
        """
        fmt = ExportFormat(fmt)
        exporter, filename, mime_type = _EXPORTERS[fmt]

        count = self.store.count()
        cached = self._export_cache.get(fmt)
        if cached is not None and cached[0] == count:
            logger.debug(f"{fmt.value.upper()} export reused for {count} rows")
            return cached[1]

        try:
            with get_perf_logger(logger, f"export_{fmt.value}", threshold_ms=500):
                data = exporter(self.store)
        except EmptyReportError:
            logger.warning(f"{fmt.value.upper()} export attempted on empty report")
            if notify is not None:
                notify(config.EMPTY_EXPORT_MESSAGE)
            return None

        artifact = ExportArtifact(filename=filename, mime_type=mime_type, data=data)
        self._export_cache[fmt] = (count, artifact)
        return artifact
