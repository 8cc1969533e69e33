# hostel_api/models/student.py
from sqlalchemy import Column, String, Integer, DateTime, Boolean, Index
from .base import Base


class Student(Base):
    __tablename__ = "students"

    # Free-form partition key, not a foreign key
    hostel_code = Column(String, nullable=False, default="")

    # Profile
    name = Column(String, nullable=False, default="")
    address = Column(String, default="")
    course = Column(String, default="")
    phone = Column(String, default="")

    # Room assignment
    room_number = Column(String, default="")
    room_type = Column(String, default="")
    food_option = Column(String, default="")

    # Billing terms
    monthly_rent = Column(Integer, default=0, nullable=False)
    advance_paid = Column(Integer, default=0, nullable=False)
    advance_remaining = Column(Integer, default=0, nullable=False)

    date_join = Column(String, default="")
    date_leave = Column(String, default="")
    photo_path = Column(String, nullable=True)

    # Soft delete
    is_deleted = Column(Boolean, default=False, nullable=False)
    deleted_at = Column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        Index("idx_students_hostel", "hostel_code"),
        Index("idx_students_room", "hostel_code", "room_number"),
    )

    def __repr__(self):
        return f"<Student {self.id} {self.name!r} room={self.room_number!r}>"
