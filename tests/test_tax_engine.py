"""
Unit Tests for the Tax Engine

Covers the worksheet formula, its lack of validation, and record creation.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from lib.formatting import format_number
from lib.parsers.form_input import TaxInputs
from modules.tax.engine import compute, create_record


class TestCompute:
    """Test the linear formula."""

    def test_reference_scenario(self, scenario_inputs):
        """
        Scenario:
        - 100,000 income + 5,000 addbacks - 20,000 deductions = 85,000 taxable
        - 85,000 * 0.21 = 17,850 before payments
        - 17,850 - 10,000 payments = 7,850 due
        """
        result = compute(scenario_inputs)

        assert result.taxable_income == Decimal("85000")
        assert result.tax_before_payments == Decimal("17850")
        assert result.tax_due == Decimal("7850")
        assert format_number(result.tax_due) == "7,850.00"

    @pytest.mark.parametrize("income,addbacks,temp,deductions,nol,rate,payments", [
        ("250000", "12500.50", "-3000", "40000", "15000", "0.25", "30000"),
        ("0", "0", "0", "0", "0", "0", "0"),
        ("-5000", "0", "0", "1000", "0", "0.3", "0"),
        ("1000", "0", "0", "0", "0", "1.5", "0"),
        ("123.45", "6.78", "9.01", "2.34", "5.67", "0.0725", "1.11"),
    ])
    def test_formula_holds_exactly(self, income, addbacks, temp, deductions, nol, rate, payments):
        inputs = TaxInputs(
            income=income, addbacks=addbacks, temporary_differences=temp,
            deductions=deductions, net_operating_loss=nol, tax_rate=rate, payments=payments
        )
        result = compute(inputs)

        expected_taxable = (
            Decimal(income) + Decimal(addbacks) + Decimal(temp) - Decimal(deductions) - Decimal(nol)
        )
        assert result.taxable_income == expected_taxable
        assert result.tax_before_payments == expected_taxable * Decimal(rate)
        assert result.tax_due == expected_taxable * Decimal(rate) - Decimal(payments)

    def test_payments_exceeding_tax_give_refund(self):
        result = compute(TaxInputs(income="10000", tax_rate="0.1", payments="2500"))

        assert result.tax_due == Decimal("-1500")

    def test_rate_above_one_is_not_rejected(self):
        result = compute(TaxInputs(income="100", tax_rate="2"))

        assert result.tax_before_payments == Decimal("200")

    def test_missing_inputs_are_zero(self):
        result = compute(TaxInputs())

        assert result.taxable_income == 0
        assert result.tax_due == 0


class TestCreateRecord:
    """Test record creation from inputs."""

    def test_record_carries_inputs_and_results(self, scenario_inputs, fixed_time):
        record = create_record(scenario_inputs, timestamp=fixed_time)

        assert record.income == Decimal("100000")
        assert record.addbacks == Decimal("5000")
        assert record.deductions == Decimal("20000")
        assert record.tax_rate == Decimal("0.21")
        assert record.payments == Decimal("10000")
        assert record.taxable_income == Decimal("85000")
        assert record.tax_before_payments == Decimal("17850")
        assert record.tax_due == Decimal("7850")
        assert record.timestamp == fixed_time

    def test_default_timestamp_is_now_utc(self, scenario_inputs):
        before = datetime.now(timezone.utc).replace(microsecond=0)
        record = create_record(scenario_inputs)
        after = datetime.now(timezone.utc)

        assert record.timestamp.tzinfo is not None
        assert before <= record.timestamp <= after
        assert record.timestamp.microsecond % 1000 == 0

    def test_record_is_immutable(self, scenario_inputs):
        record = create_record(scenario_inputs)

        with pytest.raises(AttributeError):
            record.tax_due = Decimal(0)

    def test_refund_flag(self, make_record):
        assert make_record(payments="100").is_refund()
        assert not make_record(income="1000", tax_rate="0.5").is_refund()
