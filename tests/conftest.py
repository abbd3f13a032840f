"""Shared fixtures for the T-REX test suite."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from lib.parsers.form_input import TaxInputs
from modules.report.store import ReportStore
from modules.tax.engine import create_record


@pytest.fixture
def scenario_inputs():
    """Reference scenario: 100k income, 21% rate, 10k estimated payments."""
    return TaxInputs(
        income=Decimal("100000"),
        addbacks=Decimal("5000"),
        temporary_differences=Decimal("0"),
        deductions=Decimal("20000"),
        net_operating_loss=Decimal("0"),
        tax_rate=Decimal("0.21"),
        payments=Decimal("10000"),
    )


@pytest.fixture
def fixed_time():
    return datetime(2025, 3, 7, 14, 5, 9, 123000, tzinfo=timezone.utc)


@pytest.fixture
def make_record(fixed_time):
    """Factory for records with a fixed timestamp."""
    def _make(**fields):
        return create_record(TaxInputs(**fields), timestamp=fixed_time)
    return _make


@pytest.fixture
def populated_store(scenario_inputs, make_record, fixed_time):
    """Store with two rows: the reference scenario and a refund."""
    store = ReportStore()
    store.append(create_record(scenario_inputs, timestamp=fixed_time))
    store.append(make_record(income="1000", tax_rate="0.5", payments="1500"))
    return store
