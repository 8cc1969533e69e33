# hostel_api/schemas/student_schemas.py
"""Pydantic schemas for the Student entity."""
from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field

from .common import Amount, Text, ORMModel


class StudentProfile(BaseModel):
    """Editable profile fields; absent fields fall back to empty values"""
    address: Text = ""
    course: Text = ""
    phone: Text = ""
    room_number: Text = ""
    room_type: Text = ""
    food_option: Text = ""
    monthly_rent: Amount = 0
    advance_paid: Amount = 0
    advance_remaining: Amount = 0
    date_join: Text = ""
    date_leave: Text = ""


class StudentCreate(StudentProfile):
    hostel_code: str = Field(..., min_length=1, description="Hostel the student is registered in")
    name: str = Field(..., min_length=1, description="Student name")


class StudentUpdate(StudentProfile):
    """Full overwrite of a student's profile"""
    hostel_code: Text = ""
    name: Text = ""


class StudentOut(ORMModel):
    id: int
    hostel_code: str
    name: str
    address: Optional[str] = None
    course: Optional[str] = None
    phone: Optional[str] = None
    room_number: Optional[str] = None
    room_type: Optional[str] = None
    food_option: Optional[str] = None
    monthly_rent: int = 0
    advance_paid: int = 0
    advance_remaining: int = 0
    date_join: Optional[str] = None
    date_leave: Optional[str] = None
    photo_path: Optional[str] = None
    is_deleted: bool = False
    deleted_at: Optional[datetime] = None


class StudentSummary(ORMModel):
    id: int
    name: str
    room_number: Optional[str] = None


class StudentRoomItem(StudentSummary):
    room_type: Optional[str] = None


class DeletedStudentItem(StudentRoomItem):
    deleted_at: Optional[datetime] = None
