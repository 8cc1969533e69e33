# hostel_api/models/attendance.py
from sqlalchemy import Column, String, Integer, Index, UniqueConstraint
from .base import Base
import enum


class AttendanceStatus(str, enum.Enum):
    PRESENT = "Present"
    ABSENT = "Absent"


class Attendance(Base):
    __tablename__ = "attendance"

    hostel_code = Column(String, nullable=False)
    date = Column(String, nullable=False)
    room_number = Column(String, nullable=False)
    student_id = Column(Integer, nullable=False)
    # Stored as plain text so rows stay readable by other tools
    status = Column(String, nullable=False, default=AttendanceStatus.PRESENT.value)

    __table_args__ = (
        UniqueConstraint("hostel_code", "date", "room_number", "student_id", name="uq_attendance"),
        Index("idx_attendance_student", "student_id", "date"),
        Index("idx_attendance_room", "hostel_code", "room_number", "date"),
    )
