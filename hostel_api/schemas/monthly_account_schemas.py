# hostel_api/schemas/monthly_account_schemas.py
"""Pydantic schemas for monthly rent/EB accounts."""
from typing import Optional
from pydantic import BaseModel

from .common import Amount, Text, ORMModel


class MonthlyAmounts(BaseModel):
    rent_paid: Amount = 0
    rent_remaining: Amount = 0
    eb_share: Amount = 0
    eb_paid: Amount = 0
    eb_remaining: Amount = 0


class MonthlyAccountCreate(MonthlyAmounts):
    hostel_code: Optional[str] = None
    date: Optional[str] = None
    room_number: Text = ""


class MonthlyAccountUpdate(MonthlyAmounts):
    date: Text = ""
    room_number: Text = ""


class MonthlyAccountOut(ORMModel):
    id: int
    hostel_code: str
    student_id: int
    date: str
    room_number: Optional[str] = None
    rent_paid: int
    rent_remaining: int
    eb_share: int
    eb_paid: int
    eb_remaining: int


class EbBatchIn(BaseModel):
    hostel_code: Optional[str] = None
    date: Optional[str] = None
    eb_total: Amount = 0


class EbBatchResult(BaseModel):
    room: str
    date: str
    total_students: int
    eb_total: int
    eb_share: int


class RoomMonthlyEntry(BaseModel):
    """An active room occupant with that month's ledger amounts (zeros when no row exists)"""
    student_id: int
    name: Optional[str] = None
    room_number: Optional[str] = None
    room_type: Optional[str] = None
    monthly_rent: int = 0
    monthly_id: Optional[int] = None
    date: Optional[str] = None
    rent_paid: int = 0
    rent_remaining: int = 0
    eb_share: int = 0
    eb_paid: int = 0
    eb_remaining: int = 0
