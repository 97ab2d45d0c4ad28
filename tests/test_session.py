import pytest

from bill_input import BillInput, DEFAULT_VALUES
from session import TIP_PRESETS, BillSession
from validation import INVALID_NUMBER, INVALID_PEOPLE, PERCENTAGE_TOO_HIGH


def test_new_session_uses_defaults():
    session = BillSession()

    assert session.bill_input.to_dict() == DEFAULT_VALUES
    assert session.errors == {}
    assert session.result.total_amount == 0


def test_input_change_recalculates():
    session = BillSession()

    error = session.handle_input_change("total_bill", "100")

    assert error == ""
    # 100 + 15% tip + 8.5% tax, split between 2
    assert session.result.total_amount == pytest.approx(123.5)
    assert session.result.amount_per_person == pytest.approx(61.75)


def test_input_change_stores_error_but_still_calculates():
    session = BillSession()
    session.handle_input_change("total_bill", "100")

    error = session.handle_input_change("tip_percentage", "150")

    assert error == PERCENTAGE_TOO_HIGH
    assert session.errors["tip_percentage"] == PERCENTAGE_TOO_HIGH
    assert session.result.tip_amount == 150


def test_fixing_a_field_clears_its_error():
    session = BillSession()
    session.handle_input_change("number_of_people", "0")
    assert session.error_for("number_of_people") == INVALID_PEOPLE

    session.handle_input_change("number_of_people", "3")

    assert session.error_for("number_of_people") == ""


def test_unknown_field_raises():
    session = BillSession()

    with pytest.raises(ValueError):
        session.handle_input_change("discount", "5")


def test_session_copies_initial_input():
    bill = BillInput.defaults()
    session = BillSession(bill)

    session.handle_input_change("total_bill", "50")

    assert bill.total_bill == ""


def test_adjust_increments_and_validates():
    session = BillSession()

    value = session.adjust("number_of_people", 1)

    assert value == "3"
    assert session.bill_input.number_of_people == "3"
    assert session.error_for("number_of_people") == ""


def test_adjust_clamps_at_zero_and_validates():
    session = BillSession()
    session.handle_input_change("number_of_people", "1")

    value = session.adjust("number_of_people", -1)

    assert value == "0"
    # Zero people is still reported, the same as if it had been typed
    assert session.error_for("number_of_people") == INVALID_PEOPLE


@pytest.mark.parametrize("start", ["0", "", "abc", "2.5", "-4"])
def test_adjust_never_negative(start):
    session = BillSession()
    session.handle_input_change("tip_percentage", start)

    value = session.adjust("tip_percentage", -10)

    assert value == "0"
    assert session.bill_input.tip_percentage == "0"


def test_adjust_invalid_text_starts_from_zero():
    session = BillSession()
    session.handle_input_change("tip_percentage", "abc")
    assert session.error_for("tip_percentage") == INVALID_NUMBER

    session.adjust("tip_percentage", 1)

    assert session.bill_input.tip_percentage == "1"
    assert session.error_for("tip_percentage") == ""


def test_tip_preset():
    session = BillSession()

    session.apply_tip_preset(20)

    assert session.bill_input.tip_percentage == "20"
    assert session.active_tip_preset == 20


def test_active_tip_preset_none_for_custom_tip():
    session = BillSession()
    session.handle_input_change("tip_percentage", "12")

    assert session.active_tip_preset is None


def test_unknown_tip_preset_raises():
    session = BillSession()

    with pytest.raises(ValueError):
        session.apply_tip_preset(33)
    assert 33 not in TIP_PRESETS


def test_reset_restores_defaults_and_clears_errors():
    session = BillSession()
    session.handle_input_change("total_bill", "abc")
    session.handle_input_change("number_of_people", "0")
    session.handle_input_change("tip_percentage", "150")
    session.handle_input_change("tax_percentage", "1")
    session.handle_input_change("service_charge", "500")

    session.reset()

    assert session.bill_input.number_of_people == "2"
    assert session.bill_input.tip_percentage == "15"
    assert session.bill_input.tax_percentage == "8.5"
    assert session.bill_input.total_bill == ""
    assert session.bill_input.service_charge == ""
    assert session.errors == {}
    assert session.result.total_amount == 0


def test_session_without_input_uses_defaults():
    assert BillSession(None).bill_input == BillInput.defaults()


def test_oversized_party_size_is_flagged_and_still_calculates():
    session = BillSession()
    session.handle_input_change("total_bill", "100")

    error = session.handle_input_change("number_of_people", "1" + "0" * 400)

    assert error == INVALID_NUMBER
    assert session.result.amount_per_person == session.result.total_amount
