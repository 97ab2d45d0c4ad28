"""
Calculator Module

This module holds the calculation engine of the bill splitting calculator.

Features:
    - Permissive number parsing of raw form text
    - Tip and tax as percentages of the subtotal
    - Flat service charge and additional fees
    - Even split across the party
    - Clamped +/- adjustment of a field value

Data Model:
    Input - BillInput with six raw text fields.

    Output - BillResult:
        - subtotal: float
        - tip_amount: float (subtotal * tip_percentage / 100)
        - tax_amount: float (subtotal * tax_percentage / 100)
        - service_charge_amount: float
        - additional_fees_amount: float
        - total_amount: float (sum of the five amounts above)
        - amount_per_person: float (total_amount / people)

Functions:
    parse_number: Read the leading decimal number of a text, if any.
    parse_whole_number: Read the leading integer of a text, if any.
    calculate: Derive a BillResult from a BillInput.
    adjust_value: Add a delta to a field's text, clamped at zero.
"""

import math
import re
from typing import Optional

from bill_input import BillInput, BillResult


# Leading number the way a browser reads form text: "12.5kg" -> 12.5
_NUMBER_PREFIX = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INTEGER_PREFIX = re.compile(r"^\s*[+-]?\d+")


def parse_number(text: Optional[str]) -> Optional[float]:
    """
    Parse the leading decimal number of a text.

    Whitespace before the number is skipped and anything after the longest
    numeric prefix is ignored.

    Args:
        text: Raw field text.

    Returns:
        float | None: Parsed value, or None if there is no finite number.
    """
    if not text:
        return None

    match = _NUMBER_PREFIX.match(text)
    if match is None:
        return None

    value = float(match.group(0))
    if not math.isfinite(value):
        return None
    return value


def parse_whole_number(text: Optional[str]) -> Optional[int]:
    """
    Parse the leading integer of a text ("2.5" -> 2).

    Args:
        text: Raw field text.

    Returns:
        int | None: Parsed value, or None if the text has no leading digits
        or the digits are too long to be a finite number.
    """
    if not text:
        return None

    match = _INTEGER_PREFIX.match(text)
    if match is None:
        return None

    # Read through float so huge digit strings become inf instead of a bignum
    value = float(match.group(0))
    if not math.isfinite(value):
        return None
    return int(value)


def _amount_or_zero(text: str) -> float:
    value = parse_number(text)
    return value if value is not None else 0.0


def _people_or_one(text: str) -> int:
    # Empty, unparsable, oversized, zero and negative party sizes count as one person
    people = parse_whole_number(text)
    if people is None or people < 1:
        return 1
    return people


def calculate(bill_input: BillInput) -> BillResult:
    """
    Derive the bill breakdown from the current input.

    Never raises: text that does not parse is read as 0, and the party size
    falls back to 1. Validation errors shown for a field do not stop the
    calculation. No rounding is applied here; amounts are rounded only when
    formatted for display.

    Args:
        bill_input: Raw text values of the bill form.

    Returns:
        BillResult: Freshly computed amounts.
    """
    subtotal = _amount_or_zero(bill_input.total_bill)
    people = _people_or_one(bill_input.number_of_people)
    tip_percent = _amount_or_zero(bill_input.tip_percentage)
    tax_percent = _amount_or_zero(bill_input.tax_percentage)
    service_charge = _amount_or_zero(bill_input.service_charge)
    additional_fees = _amount_or_zero(bill_input.additional_fees)

    tip_amount = (subtotal * tip_percent) / 100
    tax_amount = (subtotal * tax_percent) / 100
    total_amount = subtotal + tip_amount + tax_amount + service_charge + additional_fees

    # Very large inputs can overflow; report them as zero rather than inf/nan
    if not math.isfinite(total_amount):
        return BillResult()

    return BillResult(
        subtotal=subtotal,
        tip_amount=tip_amount,
        tax_amount=tax_amount,
        service_charge_amount=service_charge,
        additional_fees_amount=additional_fees,
        total_amount=total_amount,
        amount_per_person=total_amount / people
    )


def format_number_text(value: float) -> str:
    """
    Serialize a number back to form text.

    Whole numbers are written without a decimal part ("3", not "3.0").
    """
    if value == int(value):
        return str(int(value))
    return repr(value)


def adjust_value(text: str, delta: float) -> str:
    """
    Add a delta to a field's text, never going below zero.

    Args:
        text: Current raw field text; unparsable text counts as 0.
        delta: Amount to add, may be negative.

    Returns:
        str: New field text.
    """
    current = _amount_or_zero(text)
    new_value = max(0.0, current + delta)
    if not math.isfinite(new_value):
        new_value = current
    return format_number_text(new_value)
