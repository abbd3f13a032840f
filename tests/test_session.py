"""
Unit Tests for the Report Session Controller

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import json
from decimal import Decimal
from unittest.mock import Mock

import pytest

from lib.parsers.form_input import TaxInputs
from modules.report.renderer import EmptySummaryView, SummaryView
from modules.report import session as session_module
from modules.report.session import ReportSession, ReportDisplay, ExportFormat

FORM = {
    "income": "100000",
    "addbacks": "5000",
    "tempDiff": "",
    "deductions": "20000",
    "nol": "",
    "taxRate": "0.21",
    "payments": "10000",
}


class RecordingDisplay(ReportDisplay):
    """Display that keeps every render call."""

    def __init__(self):
        self.latest = []
        self.tables = []
        self.summaries = []

    def show_latest(self, view):
        self.latest.append(view)

    def show_table(self, rows):
        self.tables.append(rows)

    def show_summary(self, view):
        self.summaries.append(view)


class TestCalculate:

    @pytest.fixture
    def session(self):
        return ReportSession()

    def test_calculate_appends_and_returns_record(self, session):
        record = session.calculate(FORM)

        assert record.taxable_income == Decimal("85000")
        assert record.tax_due == Decimal("7850")
        assert session.store.count() == 1
        assert session.latest is record

    def test_calculate_accepts_tax_inputs(self, session, scenario_inputs):
        record = session.calculate(scenario_inputs)

        assert record.tax_due == Decimal("7850")

    def test_blank_form_computes_zero_row(self, session):
        record = session.calculate({})

        assert record.tax_due == 0
        assert session.store.count() == 1

    def test_n_calculations_in_order(self, session):
        for i in range(1, 4):
            session.calculate({"income": str(i), "taxRate": "1"})

        assert [r.income for r in session.store.all()] == [1, 2, 3]
        assert session.latest.income == 3

    def test_works_without_display(self, session):
        session.calculate(FORM, display=None)
        session.render(None)

        assert session.store.count() == 1

    def test_display_gets_full_render(self, session):
        display = RecordingDisplay()

        session.calculate(FORM, display=display)
        session.calculate({"income": "1000", "taxRate": "0.5", "payments": "1500"}, display=display)

        assert len(display.tables) == 2
        assert len(display.tables[-1]) == 2
        assert display.latest[-1].tax_due == "-1,000.00"
        assert isinstance(display.summaries[-1], SummaryView)
        assert display.summaries[-1].count == 2

    def test_render_empty_session(self, session):
        display = RecordingDisplay()

        session.render(display)

        assert display.latest == []
        assert display.tables == [[]]
        assert isinstance(display.summaries[0], EmptySummaryView)
        assert session.exports_enabled is False

    def test_base_display_is_a_no_op(self, session):
        session.calculate(FORM, display=ReportDisplay())

        assert session.store.count() == 1


class TestExport:

    @pytest.fixture
    def session(self):
        session = ReportSession()
        session.calculate(FORM)
        session.calculate({"income": "50000", "taxRate": "0.3"})
        return session

    @pytest.mark.parametrize("fmt", [ExportFormat.JSON, ExportFormat.PDF, "json", "pdf"])
    def test_empty_report_notifies_once(self, fmt):
        notify = Mock()

        artifact = ReportSession().export(fmt, notify=notify)

        assert artifact is None
        notify.assert_called_once_with("No report data to export yet.")

    def test_empty_report_without_notifier(self):
        assert ReportSession().export(ExportFormat.JSON) is None

    def test_json_artifact(self, session):
        notify = Mock()

        artifact = session.export(ExportFormat.JSON, notify=notify)

        assert artifact.filename == "trex_report.json"
        assert artifact.mime_type == "application/json"
        assert len(json.loads(artifact.data)) == 2
        notify.assert_not_called()

    def test_pdf_artifact(self, session):
        artifact = session.export("pdf")

        assert artifact.filename == "trex_report.pdf"
        assert artifact.mime_type == "application/pdf"
        assert artifact.data.startswith(b"%PDF")

    def test_unknown_format(self, session):
        with pytest.raises(ValueError):
            session.export("xlsx")

    def test_exports_enabled_after_first_row(self, session):
        assert session.exports_enabled is True


class TestExportReuse:

    @pytest.fixture
    def json_exporter(self, monkeypatch):
        exporter = Mock(side_effect=session_module.export_json)
        monkeypatch.setitem(
            session_module._EXPORTERS,
            ExportFormat.JSON,
            (exporter, "trex_report.json", "application/json")
        )
        return exporter

    def test_repeat_export_reuses_artifact(self, json_exporter):
        session = ReportSession()
        session.calculate(FORM)

        first = session.export(ExportFormat.JSON)
        second = session.export("json")

        assert second is first
        assert json_exporter.call_count == 1

    def test_new_row_rebuilds_artifact(self, json_exporter):
        session = ReportSession()
        session.calculate(FORM)
        first = session.export(ExportFormat.JSON)

        session.calculate({"income": "50000", "taxRate": "0.3"})
        second = session.export(ExportFormat.JSON)

        assert json_exporter.call_count == 2
        assert len(json.loads(first.data)) == 1
        assert len(json.loads(second.data)) == 2

    def test_formats_are_cached_separately(self):
        session = ReportSession()
        session.calculate(FORM)

        json_artifact = session.export(ExportFormat.JSON)
        pdf_artifact = session.export(ExportFormat.PDF)

        assert json_artifact.filename == "trex_report.json"
        assert pdf_artifact.filename == "trex_report.pdf"
        assert session.export(ExportFormat.PDF) is pdf_artifact

    def test_empty_report_is_not_cached(self, json_exporter):
        session = ReportSession()
        notify = Mock()

        assert session.export(ExportFormat.JSON, notify=notify) is None
        assert session.export(ExportFormat.JSON, notify=notify) is None

        assert notify.call_count == 2
        session.calculate(FORM)
        assert session.export(ExportFormat.JSON) is not None
