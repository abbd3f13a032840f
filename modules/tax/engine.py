"""
Tax Engine

Maps the seven worksheet inputs to taxable income, tax before payments and
tax due with a fixed linear formula:

    taxable_income      = income + addbacks + temporary_differences
                          - deductions - net_operating_loss
    tax_before_payments = taxable_income * tax_rate
    tax_due             = tax_before_payments - payments

There is no validation: negative amounts and rates above 1 are computed
through as entered. Arithmetic is Decimal so the formula holds exactly.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from lib.parsers.form_input import TaxInputs
from modules.tax.records import CalculationRecord
from utils.logging_config import setup_logger

logger = setup_logger(__name__)


@dataclass(frozen=True)
class TaxComputation:
    """The three derived figures of one calculation."""
    taxable_income: Decimal
    tax_before_payments: Decimal
    tax_due: Decimal


def compute(inputs: TaxInputs) -> TaxComputation:
    """Apply the worksheet formula. Pure, never raises for finite inputs."""
    taxable_income = (
        inputs.income
        + inputs.addbacks
        + inputs.temporary_differences
        - inputs.deductions
        - inputs.net_operating_loss
    )
    tax_before_payments = taxable_income * inputs.tax_rate
    tax_due = tax_before_payments - inputs.payments

    return TaxComputation(
        taxable_income=taxable_income,
        tax_before_payments=tax_before_payments,
        tax_due=tax_due,
    )


def _now() -> datetime:
    # Millisecond precision, the resolution exported timestamps carry
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


def create_record(inputs: TaxInputs, timestamp: Optional[datetime] = None) -> CalculationRecord:
    """
    Compute and stamp a new CalculationRecord.

    Args:
        inputs: Coerced worksheet inputs
        timestamp: Creation instant, defaults to now (UTC)
    """
    result = compute(inputs)

    record = CalculationRecord(
        income=inputs.income,
        addbacks=inputs.addbacks,
        temporary_differences=inputs.temporary_differences,
        deductions=inputs.deductions,
        net_operating_loss=inputs.net_operating_loss,
        tax_rate=inputs.tax_rate,
        payments=inputs.payments,
        taxable_income=result.taxable_income,
        tax_before_payments=result.tax_before_payments,
        tax_due=result.tax_due,
        timestamp=timestamp or _now(),
    )

    logger.debug(
        f"Computed: taxable={record.taxable_income}, before payments={record.tax_before_payments}, "
        f"due={record.tax_due}"
    )
    return record
