"""
Bill Input Module

This module holds the data records of the bill splitting calculator.

Features:
    - Raw text inputs for the six bill fields
    - Documented default values for a fresh session
    - Accepts both snake_case and camelCase field names
    - Derived calculation result record

Data Model:
    BillInput - six free-form text fields (not yet parsed):
        - total_bill: string
        - number_of_people: string (default "2")
        - tip_percentage: string (default "15")
        - tax_percentage: string (default "8.5")
        - service_charge: string
        - additional_fees: string
    An empty string means "not entered", which is different from "0".

    BillResult - seven derived float fields:
        - subtotal, tip_amount, tax_amount, service_charge_amount,
          additional_fees_amount, total_amount, amount_per_person

Functions:
    normalize_field_name: Map a snake_case or camelCase name to a field name.
"""

from typing import Optional


FIELD_NAMES = (
    "total_bill",
    "number_of_people",
    "tip_percentage",
    "tax_percentage",
    "service_charge",
    "additional_fees",
)

# Names used by browser front ends
FIELD_ALIASES = {
    "totalBill": "total_bill",
    "numberOfPeople": "number_of_people",
    "tipPercentage": "tip_percentage",
    "taxPercentage": "tax_percentage",
    "serviceCharge": "service_charge",
    "additionalFees": "additional_fees",
}

DEFAULT_VALUES = {
    "total_bill": "",
    "number_of_people": "2",
    "tip_percentage": "15",
    "tax_percentage": "8.5",
    "service_charge": "",
    "additional_fees": "",
}

RESULT_FIELDS = (
    "subtotal",
    "tip_amount",
    "tax_amount",
    "service_charge_amount",
    "additional_fees_amount",
    "total_amount",
    "amount_per_person",
)


def normalize_field_name(name: str) -> str:
    """
    Map a field name to its canonical snake_case form.

    Args:
        name: Field name in snake_case or camelCase.

    Returns:
        str: Canonical field name.

    Raises:
        ValueError: If the name is not one of the bill fields.
    """
    if name in FIELD_NAMES:
        return name
    if name in FIELD_ALIASES:
        return FIELD_ALIASES[name]
    raise ValueError(f"Unknown field: {name}")


class BillInput:
    """
    Raw text values of the bill form.

    Attributes:
        total_bill (str): Bill amount before tip, tax and fees.
        number_of_people (str): Party size.
        tip_percentage (str): Tip rate applied to the subtotal.
        tax_percentage (str): Tax rate applied to the subtotal.
        service_charge (str): Flat amount added to the total.
        additional_fees (str): Flat amount added to the total.
    """

    def __init__(
        self,
        total_bill: str = "",
        number_of_people: str = "",
        tip_percentage: str = "",
        tax_percentage: str = "",
        service_charge: str = "",
        additional_fees: str = ""
    ):
        self.total_bill = total_bill
        self.number_of_people = number_of_people
        self.tip_percentage = tip_percentage
        self.tax_percentage = tax_percentage
        self.service_charge = service_charge
        self.additional_fees = additional_fees

    @classmethod
    def defaults(cls) -> "BillInput":
        """Create a BillInput holding the default values of a fresh session."""
        return cls(**DEFAULT_VALUES)

    def get(self, name: str) -> str:
        """Return the raw text of a field."""
        return getattr(self, normalize_field_name(name))

    def set(self, name: str, value: Optional[str]) -> None:
        """Store raw text for a field. None is stored as empty text."""
        setattr(self, normalize_field_name(name), "" if value is None else str(value))

    def copy(self) -> "BillInput":
        """Return an independent copy of this input."""
        return BillInput(**self.to_dict())

    def to_dict(self) -> dict:
        """Convert input to a dictionary keyed by snake_case field names."""
        return {name: getattr(self, name) for name in FIELD_NAMES}

    @classmethod
    def from_dict(cls, data: dict) -> "BillInput":
        """
        Create a BillInput from a dictionary.

        Keys may be snake_case or camelCase; missing keys become empty text.
        Unknown keys are ignored.
        """
        bill_input = cls()
        for key, value in data.items():
            if key in FIELD_NAMES or key in FIELD_ALIASES:
                bill_input.set(key, value)
        return bill_input

    def __eq__(self, other) -> bool:
        if not isinstance(other, BillInput):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        """Return string representation of the input."""
        fields = ", ".join(f"{name}='{getattr(self, name)}'" for name in FIELD_NAMES)
        return f"BillInput({fields})"


class BillResult:
    """
    Derived amounts of one calculation. Never edited by the user.

    Attributes:
        subtotal (float): Bill amount before tip, tax and fees.
        tip_amount (float): Tip on the subtotal.
        tax_amount (float): Tax on the subtotal.
        service_charge_amount (float): Flat service charge.
        additional_fees_amount (float): Flat additional fees.
        total_amount (float): Sum of all of the above.
        amount_per_person (float): total_amount split across the party.
    """

    def __init__(
        self,
        subtotal: float = 0.0,
        tip_amount: float = 0.0,
        tax_amount: float = 0.0,
        service_charge_amount: float = 0.0,
        additional_fees_amount: float = 0.0,
        total_amount: float = 0.0,
        amount_per_person: float = 0.0
    ):
        self.subtotal = subtotal
        self.tip_amount = tip_amount
        self.tax_amount = tax_amount
        self.service_charge_amount = service_charge_amount
        self.additional_fees_amount = additional_fees_amount
        self.total_amount = total_amount
        self.amount_per_person = amount_per_person

    def to_dict(self) -> dict:
        """Convert result to a dictionary."""
        return {name: getattr(self, name) for name in RESULT_FIELDS}

    def __repr__(self) -> str:
        return (
            f"BillResult(total_amount={self.total_amount}, "
            f"amount_per_person={self.amount_per_person})"
        )
