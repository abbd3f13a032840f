"""
Calculation Record Data Model

Defines the single row type of the tax report:
- CalculationRecord: one worksheet calculation (inputs + derived figures)

Records are immutable once created. Serialization uses the worksheet's
wire names (tempDiff, nol, taxRate, ...) so exported reports keep the
same shape as the form they came from.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict

from lib.formatting import to_iso_timestamp, from_iso_timestamp

# Record attribute -> JSON key, in export order
WIRE_FIELDS = (
    ("income", "income"),
    ("addbacks", "addbacks"),
    ("temporary_differences", "tempDiff"),
    ("deductions", "deductions"),
    ("net_operating_loss", "nol"),
    ("tax_rate", "taxRate"),
    ("payments", "payments"),
    ("taxable_income", "taxableIncome"),
    ("tax_before_payments", "taxBeforePayments"),
    ("tax_due", "taxDue"),
)


def _to_json_number(value: Decimal):
    """Decimal -> int when integral, else the Decimal itself (written as an exact number literal)."""
    if value == value.to_integral_value():
        return int(value)
    return value


@dataclass(frozen=True)
class CalculationRecord:
    """
    One calculation appended to the report.

    Key Invariants:
        taxable_income      = income + addbacks + temporary_differences
                              - deductions - net_operating_loss
        tax_before_payments = taxable_income * tax_rate
        tax_due             = tax_before_payments - payments

    A negative tax_due is a refund.
    """

    # Inputs
    income: Decimal
    addbacks: Decimal
    temporary_differences: Decimal
    deductions: Decimal
    net_operating_loss: Decimal
    tax_rate: Decimal
    payments: Decimal

    # Derived
    taxable_income: Decimal
    tax_before_payments: Decimal
    tax_due: Decimal

    # Creation instant (UTC)
    timestamp: datetime

    def is_refund(self) -> bool:
        return self.tax_due < 0

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a dict with wire field names (non-integral amounts stay Decimal)."""
        data: Dict[str, Any] = {
            key: _to_json_number(getattr(self, attr)) for attr, key in WIRE_FIELDS
        }
        data["timestamp"] = to_iso_timestamp(self.timestamp)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CalculationRecord':
        """
        Rebuild a record from to_dict() output.

        Raises:
            KeyError: If a field is missing
        """
        fields = {attr: Decimal(str(data[key])) for attr, key in WIRE_FIELDS}
        return cls(timestamp=from_iso_timestamp(data["timestamp"]), **fields)
