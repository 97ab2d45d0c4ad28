"""
Utilities Module

This module provides display helpers for the bill splitting calculator.

Features:
    - Integer currency formatting (no decimal places)
    - Itemized breakdown rows for the result panel

Data Model:
    Input - BillResult from calculate() with:
        - subtotal, tip_amount, tax_amount, service_charge_amount,
          additional_fees_amount, total_amount, amount_per_person

    Output - breakdown: list of (label, amount) tuples

Functions:
    format_currency: Format an amount as whole currency units.
    build_breakdown: Build the itemized breakdown rows of a result.
    people_label: Party size shown under the per-person amount.
"""

import math
from decimal import Decimal, ROUND_HALF_UP

from bill_input import BillInput, BillResult
from calculator import parse_whole_number
from config.app_config import CURRENCY_SYMBOL, THOUSANDS_SEPARATOR

# Symbol and digits are joined the way id-ID locale formatting joins them
NO_BREAK_SPACE = "\u00a0"


def _round_whole(value: float) -> int:
    """
    Round to whole currency units.

    Uses ROUND_HALF_UP, so halves move away from zero (2.5 -> 3, -2.5 -> -3).
    """
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_currency(
    amount: float,
    symbol: str = CURRENCY_SYMBOL,
    separator: str = THOUSANDS_SEPARATOR
) -> str:
    """
    Format a monetary amount as whole currency units.

    Args:
        amount: The amount to format.
        symbol: Currency symbol (default from SPLITBILL_CURRENCY_SYMBOL).
        separator: Thousands separator (default from SPLITBILL_THOUSANDS_SEPARATOR).

    Returns:
        str: Formatted string like "Rp 1.234.567" or "-Rp 500", with a
        no-break space between symbol and digits.

    Raises:
        ValueError: If amount is not a finite number.
    """
    if not math.isfinite(amount):
        raise ValueError(f"amount must be a finite number, got: {amount}")

    rounded = _round_whole(amount)
    digits = f"{abs(rounded):,}".replace(",", separator)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{symbol}{NO_BREAK_SPACE}{digits}"


def build_breakdown(result: BillResult, bill_input: BillInput) -> list[tuple[str, float]]:
    """
    Build the itemized rows shown beside the per-person amount.

    Subtotal and Total are always present. Tip, tax, service charge and
    additional fees appear only when above zero; tip and tax labels carry
    the percentage text as entered.

    Args:
        result: Output of calculate().
        bill_input: Input the result was computed from.

    Returns:
        list[tuple[str, float]]: Ordered (label, amount) rows.
    """
    rows = [("Subtotal", result.subtotal)]

    if result.tip_amount > 0:
        rows.append((f"Tip ({bill_input.tip_percentage}%)", result.tip_amount))
    if result.tax_amount > 0:
        rows.append((f"Tax ({bill_input.tax_percentage}%)", result.tax_amount))
    if result.service_charge_amount > 0:
        rows.append(("Service Charge", result.service_charge_amount))
    if result.additional_fees_amount > 0:
        rows.append(("Additional Fees", result.additional_fees_amount))

    rows.append(("Total", result.total_amount))
    return rows


def people_label(bill_input: BillInput) -> str:
    """Party size as shown under the per-person amount ("1" when blank)."""
    people = parse_whole_number(bill_input.number_of_people)
    if people is None or people < 1:
        return "1"
    return str(people)
