"""
JSON export of the full report (trex_report.json).

Amounts are written with simplejson's Decimal support so every figure
round-trips exactly; the stdlib encoder would go through float.
"""

from typing import List, Union

import simplejson

from core import config
from modules.report.store import ReportStore
from modules.tax.records import CalculationRecord
from utils.logging_config import setup_logger

logger = setup_logger(__name__)


def export_json(store: ReportStore) -> bytes:
    """
    Serialize every report row, in order, as a 2-space indented JSON array.

    Raises:
        EmptyReportError: If the report has no rows
    """
    store.require_rows()

    rows = [record.to_dict() for record in store.all()]
    payload = simplejson.dumps(rows, indent=config.JSON_INDENT, use_decimal=True)

    logger.info(f"JSON export: {len(rows)} rows, {len(payload)} chars")
    return payload.encode('utf-8')


def load_json(data: Union[bytes, str]) -> List[CalculationRecord]:
    """
    Parse an exported report back into records.

    Raises:
        ValueError: If the document is not a JSON array of records
    """
    if isinstance(data, bytes):
        data = data.decode('utf-8')

    # JSONDecodeError is a ValueError
    rows = simplejson.loads(data, use_decimal=True)
    if not isinstance(rows, list):
        raise ValueError("Report JSON must be an array of rows")

    try:
        return [CalculationRecord.from_dict(row) for row in rows]
    except (KeyError, TypeError) as e:
        raise ValueError(f"Malformed report row: {e}") from e
