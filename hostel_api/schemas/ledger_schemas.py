# hostel_api/schemas/ledger_schemas.py
"""Pydantic schemas for rent payment and extra food entries."""
from .common import Amount, Text, ORMModel
from pydantic import BaseModel


class RentPaymentIn(BaseModel):
    date: Text = ""
    rent_paid: Amount = 0
    remaining: Amount = 0


class RentPaymentOut(ORMModel):
    id: int
    student_id: int
    date: str
    rent_paid: int
    remaining: int


class ExtraFoodIn(BaseModel):
    date: Text = ""
    amount: Amount = 0
    remaining: Amount = 0


class ExtraFoodOut(ORMModel):
    id: int
    student_id: int
    date: str
    amount: int
    remaining: int
