"""
Split Bill - FastAPI Web Backend

This module exposes the bill splitting calculator as a stateless JSON API.
Each request carries the full set of raw field values.

Features:
    - Per-field validation messages (advisory only)
    - Bill calculation with itemized breakdown
    - +/- adjustment of a single field, clamped at zero
    - Integer currency formatting

Endpoints:
    GET  /defaults   - Default field values of a fresh calculator
    POST /validate   - Validation messages for every field
    POST /calculate  - Result, messages and breakdown
    POST /adjust     - Adjust one field and recalculate
    GET  /format     - Format an amount as currency
    GET  /health     - Health check

Usage:
    uvicorn main:app --reload
"""

import logging
import math
from typing import Union

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from bill_input import DEFAULT_VALUES, BillInput
from calculator import calculate, format_number_text
from config.app_config import API_HOST, API_PORT, LOG_LEVEL
from session import BillSession
from utils import build_breakdown, format_currency, people_label
from validation import validate_all

logger = logging.getLogger(__name__)


def _to_text(value) -> str:
    """Field text for a JSON string or number (100 -> "100", 8.5 -> "8.5")."""
    if isinstance(value, str):
        return value
    if not math.isfinite(value):
        return str(value)
    return format_number_text(value)


# =============================================================================
# Pydantic Models for Request/Response Validation
# =============================================================================

class BillInputModel(BaseModel):
    """
    Raw values of the bill form. camelCase names are accepted too.

    JSON numbers are accepted and turned into field text.
    """
    model_config = ConfigDict(populate_by_name=True)

    total_bill: Union[str, int, float] = Field(DEFAULT_VALUES["total_bill"], alias="totalBill")
    number_of_people: Union[str, int, float] = Field(DEFAULT_VALUES["number_of_people"], alias="numberOfPeople")
    tip_percentage: Union[str, int, float] = Field(DEFAULT_VALUES["tip_percentage"], alias="tipPercentage")
    tax_percentage: Union[str, int, float] = Field(DEFAULT_VALUES["tax_percentage"], alias="taxPercentage")
    service_charge: Union[str, int, float] = Field(DEFAULT_VALUES["service_charge"], alias="serviceCharge")
    additional_fees: Union[str, int, float] = Field(DEFAULT_VALUES["additional_fees"], alias="additionalFees")

    def to_bill_input(self) -> BillInput:
        return BillInput(**{name: _to_text(value) for name, value in self.model_dump().items()})


class ValidateResponse(BaseModel):
    """Response model for validation messages."""
    errors: dict[str, str]
    valid: bool


class CalculateResponse(BaseModel):
    """Response model for calculation results."""
    result: dict[str, float]
    errors: dict[str, str]
    amount_per_person_formatted: str
    people: str
    breakdown: list[dict]


class AdjustRequest(BaseModel):
    """Request model for adjusting one field."""
    field: str = Field(..., min_length=1, description="Field name (snake_case or camelCase)")
    delta: float = Field(..., description="Amount to add, may be negative")
    bill: BillInputModel = Field(default_factory=BillInputModel)


class AdjustResponse(BaseModel):
    """Response model for an adjusted field."""
    field: str
    value: str
    error: str
    bill: dict[str, str]
    result: dict[str, float]


class FormatResponse(BaseModel):
    """Response model for a formatted amount."""
    amount: float
    formatted: str


# =============================================================================
# FastAPI Application
# =============================================================================

app = FastAPI(
    title="Split Bill",
    description="Split a bill with tip, tax and fees evenly across a party",
    version="1.0.0"
)


# =============================================================================
# Helper Functions
# =============================================================================

def _breakdown_to_list(rows: list[tuple[str, float]]) -> list[dict]:
    """Convert breakdown rows to JSON-friendly dictionaries."""
    return [
        {"label": label, "amount": amount, "formatted": format_currency(amount)}
        for label, amount in rows
    ]


# =============================================================================
# API Endpoints
# =============================================================================

@app.get("/defaults", response_model=BillInputModel, response_model_by_alias=False)
async def get_defaults():
    """Default field values of a fresh calculator."""
    return BillInputModel(**DEFAULT_VALUES)


@app.post("/validate", response_model=ValidateResponse)
async def validate_bill(bill: BillInputModel):
    """
    Validate every field.

    Messages are advisory and never stop /calculate from producing a result.
    """
    errors = validate_all(bill.to_bill_input())
    return ValidateResponse(errors=errors, valid=not errors)


@app.post("/calculate", response_model=CalculateResponse)
async def calculate_bill(bill: BillInputModel):
    """
    Calculate the bill.

    Request flow:
        1. Convert request to BillInput
        2. Validate every field (advisory)
        3. Calculate result (invalid text reads as zero)
        4. Build itemized breakdown
    """
    bill_input = bill.to_bill_input()
    result = calculate(bill_input)

    return CalculateResponse(
        result=result.to_dict(),
        errors=validate_all(bill_input),
        amount_per_person_formatted=format_currency(result.amount_per_person),
        people=people_label(bill_input),
        breakdown=_breakdown_to_list(build_breakdown(result, bill_input))
    )


@app.post("/adjust", response_model=AdjustResponse)
async def adjust_field(request: AdjustRequest):
    """
    Add a delta to one field and recalculate.

    The new value goes through the same input-change path as typing, so its
    validation message is returned along with the recalculated result.
    """
    try:
        session = BillSession(request.bill.to_bill_input())
        value = session.adjust(request.field, request.delta)

        return AdjustResponse(
            field=request.field,
            value=value,
            error=session.error_for(request.field),
            bill=session.bill_input.to_dict(),
            result=session.result.to_dict()
        )

    except ValueError as e:
        logger.warning("Rejected adjustment: %s", e)
        raise HTTPException(status_code=400, detail=str(e))


@app.get("/format", response_model=FormatResponse)
async def format_amount(amount: float):
    """Format an amount as whole currency units."""
    if not math.isfinite(amount):
        raise HTTPException(status_code=400, detail="amount must be a finite number")
    return FormatResponse(amount=amount, formatted=format_currency(amount))


# =============================================================================
# Health Check Endpoint
# =============================================================================

@app.get("/health")
async def health_check():
    """Health check endpoint to verify API is running."""
    return {"status": "healthy", "service": "Split Bill"}


# =============================================================================
# Run with: python main.py
# =============================================================================

if __name__ == "__main__":
    import uvicorn
    logging.basicConfig(level=LOG_LEVEL)
    uvicorn.run("main:app", host=API_HOST, port=API_PORT, reload=True)
