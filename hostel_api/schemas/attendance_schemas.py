# hostel_api/schemas/attendance_schemas.py
"""Pydantic schemas for attendance marking and history."""
from typing import Any, List, Optional
from pydantic import BaseModel, field_validator

from .common import Text, ORMModel


class AttendanceBatchIn(BaseModel):
    """Mark a whole room; every active occupant not listed in absent_ids is Present"""
    hostel_code: Optional[str] = None
    date: Optional[str] = None
    absent_ids: List[Any] = []

    @field_validator("absent_ids", mode="before")
    @classmethod
    def absent_ids_as_list(cls, v):
        return v if isinstance(v, list) else []


class AttendanceUpdate(BaseModel):
    date: Text = ""
    room_number: Text = ""
    status: Text = ""


class AttendanceOut(ORMModel):
    id: int
    hostel_code: str
    date: str
    room_number: str
    status: str


class RoomAttendanceEntry(BaseModel):
    id: int
    date: str
    status: str
    student_id: int
    name: Optional[str] = None
