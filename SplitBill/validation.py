"""
Validation Module

Per-field validation of the bill form.

Messages are advisory: they are shown beneath the offending field and never
stop the calculation, which reads invalid text as zero.
"""

from bill_input import FIELD_NAMES, BillInput, normalize_field_name
from calculator import parse_number


INVALID_NUMBER = "Please enter a valid positive number"
INVALID_PEOPLE = "Number of people must be a positive whole number"
PERCENTAGE_TOO_HIGH = "Percentage cannot exceed 100%"

PERCENTAGE_FIELDS = {"tip_percentage", "tax_percentage"}
MAX_PERCENTAGE = 100


def validate(field_name: str, raw_text: str) -> str:
    """
    Validate the raw text of one field.

    Args:
        field_name: Field name in snake_case or camelCase.
        raw_text: Text as typed by the user.

    Returns:
        str: Error message, or an empty string if the text is acceptable.

    Raises:
        ValueError: If field_name is not a bill field.
    """
    name = normalize_field_name(field_name)

    if raw_text is None or raw_text == "":
        return ""

    value = parse_number(raw_text)
    if value is None or value < 0:
        return INVALID_NUMBER

    if name == "number_of_people" and (value == 0 or value % 1 != 0):
        return INVALID_PEOPLE

    if name in PERCENTAGE_FIELDS and value > MAX_PERCENTAGE:
        return PERCENTAGE_TOO_HIGH

    return ""


def validate_all(bill_input: BillInput) -> dict:
    """
    Validate every field of a bill input.

    Returns:
        dict: Mapping of field name to message, only for fields with errors.
    """
    errors = {}
    for name in FIELD_NAMES:
        message = validate(name, bill_input.get(name))
        if message:
            errors[name] = message
    return errors
