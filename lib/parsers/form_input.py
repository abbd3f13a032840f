"""
Worksheet Form Input

Turns raw form values (numbers, strings, None from blank widgets) into a
validated TaxInputs model. Blank or unparsable values become 0; nothing
is rejected.
"""

import math
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Mapping

from pydantic import BaseModel, ConfigDict, field_validator

from utils.logging_config import setup_logger

logger = setup_logger(__name__)

# Form field name -> TaxInputs attribute (the worksheet's input ids)
FORM_FIELDS = {
    "income": "income",
    "addbacks": "addbacks",
    "tempDiff": "temporary_differences",
    "deductions": "deductions",
    "nol": "net_operating_loss",
    "taxRate": "tax_rate",
    "payments": "payments",
}


def coerce_amount(value: Any) -> Decimal:
    """Convert a raw form value to Decimal, treating blank or garbage as 0."""
    if value is None:
        return Decimal(0)

    if isinstance(value, Decimal):
        return value if value.is_finite() else Decimal(0)

    if isinstance(value, float):
        if not math.isfinite(value):
            return Decimal(0)
        # str() first so 0.21 stays 0.21 instead of its binary expansion
        return Decimal(str(value))

    val_str = str(value).strip()
    if val_str == '':
        return Decimal(0)

    try:
        amount = Decimal(val_str)
    except (InvalidOperation, ValueError):
        logger.debug(f"Could not parse amount: {value!r}, using 0")
        return Decimal(0)

    if not amount.is_finite():
        logger.debug(f"Non-finite amount: {value!r}, using 0")
        return Decimal(0)
    return amount


class TaxInputs(BaseModel):
    """
    The seven worksheet inputs.
    Validated using Pydantic; missing fields default to 0.
    """
    income: Decimal = Decimal(0)
    addbacks: Decimal = Decimal(0)
    temporary_differences: Decimal = Decimal(0)
    deductions: Decimal = Decimal(0)
    net_operating_loss: Decimal = Decimal(0)
    tax_rate: Decimal = Decimal(0)
    payments: Decimal = Decimal(0)

    model_config = ConfigDict(frozen=True)

    @field_validator('*', mode="before")
    @classmethod
    def parse_amount(cls, v):
        return coerce_amount(v)


_INPUT_ATTRS = frozenset(FORM_FIELDS.values())


def parse_form(values: Mapping[str, Any]) -> TaxInputs:
    """
    Build TaxInputs from form values keyed by form field name.

    Accepts the worksheet ids ("tempDiff", "nol", ...) as well as the
    TaxInputs attribute names. Absent fields are 0.
    """
    fields: Dict[str, Any] = {}
    for key, value in values.items():
        attr = FORM_FIELDS.get(key, key)
        if attr in _INPUT_ATTRS:
            fields[attr] = value
        else:
            logger.debug(f"Ignoring unknown form field: {key}")
    return TaxInputs(**fields)
