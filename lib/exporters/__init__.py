"""
Report Exporters

- json_exporter: trex_report.json
- pdf_exporter: trex_report.pdf

Both raise EmptyReportError for a report with no rows.
"""

from .json_exporter import export_json, load_json
from .pdf_exporter import export_pdf, layout_pdf_lines

__all__ = [
    "export_json",
    "load_json",
    "export_pdf",
    "layout_pdf_lines",
]
