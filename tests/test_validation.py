import pytest

from bill_input import BillInput
from validation import (
    INVALID_NUMBER,
    INVALID_PEOPLE,
    PERCENTAGE_TOO_HIGH,
    validate,
    validate_all,
)


@pytest.mark.parametrize("field", [
    "total_bill", "number_of_people", "tip_percentage",
    "tax_percentage", "service_charge", "additional_fees",
])
def test_empty_text_is_valid(field):
    assert validate(field, "") == ""


@pytest.mark.parametrize("text", ["abc", "-1", "-0.01", "Infinity", "."])
def test_non_numeric_or_negative_rejected(text):
    assert validate("total_bill", text) == INVALID_NUMBER


def test_number_of_people():
    assert validate("number_of_people", "3") == ""
    assert validate("number_of_people", "0") == INVALID_PEOPLE
    assert validate("number_of_people", "2.5") == INVALID_PEOPLE
    assert validate("number_of_people", "-2") == INVALID_NUMBER


def test_percentage_limit():
    assert validate("tip_percentage", "150") == PERCENTAGE_TOO_HIGH
    assert validate("tax_percentage", "100.5") == PERCENTAGE_TOO_HIGH
    assert validate("tip_percentage", "100") == ""
    assert validate("tax_percentage", "8.5") == ""


def test_percentage_limit_only_for_percentages():
    assert validate("total_bill", "150") == ""
    assert validate("service_charge", "5000") == ""


def test_camel_case_names_accepted():
    assert validate("numberOfPeople", "0") == INVALID_PEOPLE
    assert validate("tipPercentage", "150") == PERCENTAGE_TOO_HIGH


def test_numeric_prefix_is_accepted():
    """Text is read the way a browser reads it: "12abc" is 12."""
    assert validate("total_bill", "12abc") == ""


def test_unknown_field_raises():
    with pytest.raises(ValueError):
        validate("discount", "5")


def test_validate_all_reports_only_errors():
    bill = BillInput(total_bill="abc", number_of_people="0", tip_percentage="15",
                     tax_percentage="101", service_charge="", additional_fees="2")

    errors = validate_all(bill)

    assert errors == {
        "total_bill": INVALID_NUMBER,
        "number_of_people": INVALID_PEOPLE,
        "tax_percentage": PERCENTAGE_TOO_HIGH,
    }


def test_validate_all_defaults_are_valid():
    assert validate_all(BillInput.defaults()) == {}
