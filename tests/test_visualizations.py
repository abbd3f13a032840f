"""Unit Tests for report charts."""

from modules.report.store import ReportStore
from app.charts.visualizations import create_tax_due_chart, DUE_COLOR, REFUND_COLOR


def test_empty_report_gives_empty_figure():
    fig = create_tax_due_chart(ReportStore())

    assert len(fig.data) == 0


def test_one_bar_per_row(populated_store):
    fig = create_tax_due_chart(populated_store)
    bar = fig.data[0]

    assert list(bar.x) == ["#1", "#2"]
    assert list(bar.y) == [7850.0, -1000.0]
    assert list(bar.marker.color) == [DUE_COLOR, REFUND_COLOR]
