"""
Session Module

This module holds the input state of one calculator session.

Features:
    - Current raw field values and their validation messages
    - Recalculation after every change
    - +/- adjustment buttons routed through the normal input path
    - Quick tip presets
    - Reset to default values

Data Model:
    BillSession
        - bill_input: BillInput (current raw text values)
        - errors: dict of field name -> message ("" means valid)
        - result: BillResult (recomputed on every change, never merged)

Functions:
    BillSession.handle_input_change: Store text for a field and recalculate.
    BillSession.adjust: Add a delta to a field, clamped at zero.
    BillSession.apply_tip_preset: Select one of the quick tip percentages.
    BillSession.reset: Restore defaults and clear all errors.
"""

import logging
from typing import Optional

from bill_input import BillInput, normalize_field_name
from calculator import adjust_value, calculate
from validation import validate


logger = logging.getLogger(__name__)

TIP_PRESETS = (10, 15, 18, 20)


class BillSession:
    """
    State of one calculator session.

    There is exactly one writer, the current user action, and every change
    is followed by a synchronous recalculation.
    """

    def __init__(self, bill_input: Optional[BillInput] = None):
        self.bill_input = bill_input.copy() if bill_input else BillInput.defaults()
        self.errors = {}
        self.result = calculate(self.bill_input)

    def handle_input_change(self, field_name: str, value: str) -> str:
        """
        Store new text for a field, validate it and recalculate.

        Args:
            field_name: Field name in snake_case or camelCase.
            value: New raw text.

        Returns:
            str: Validation message for the field ("" if valid).

        Raises:
            ValueError: If field_name is not a bill field.
        """
        name = normalize_field_name(field_name)
        value = "" if value is None else str(value)

        self.bill_input.set(name, value)
        error = validate(name, value)
        self.errors[name] = error
        self._recalculate()

        logger.debug("Field %s set to %r (error: %r)", name, value, error)
        return error

    def adjust(self, field_name: str, delta: float) -> str:
        """
        Add a delta to a field's current value, never going below zero.

        The new text goes through handle_input_change, so validation and
        recalculation run exactly as for typed input.

        Returns:
            str: New field text.
        """
        new_text = adjust_value(self.bill_input.get(field_name), delta)
        self.handle_input_change(field_name, new_text)
        return new_text

    def apply_tip_preset(self, percent: int) -> None:
        """
        Select a quick tip percentage.

        Raises:
            ValueError: If percent is not one of TIP_PRESETS.
        """
        if percent not in TIP_PRESETS:
            raise ValueError(f"tip preset must be one of {TIP_PRESETS}, got: {percent}")
        self.handle_input_change("tip_percentage", str(percent))

    @property
    def active_tip_preset(self):
        """The preset matching the current tip text, or None."""
        for percent in TIP_PRESETS:
            if self.bill_input.tip_percentage == str(percent):
                return percent
        return None

    def error_for(self, field_name: str) -> str:
        """Return the stored message for a field ("" if none)."""
        return self.errors.get(normalize_field_name(field_name), "")

    def reset(self) -> None:
        """Restore the default input values and clear every error."""
        self.bill_input = BillInput.defaults()
        self.errors = {}
        self._recalculate()
        logger.info("Calculator reset to defaults")

    def _recalculate(self) -> None:
        self.result = calculate(self.bill_input)
