# hostel_api/models/monthly_account.py
from sqlalchemy import Column, String, Integer, Index, UniqueConstraint
from .base import Base


class MonthlyAccount(Base):
    """One month's rent and EB settlement for a student.

    ``eb_share`` and ``eb_remaining`` are rewritten by the room EB batch;
    ``eb_paid`` is only ever changed by manual edits.
    """
    __tablename__ = "monthly_accounts"

    hostel_code = Column(String, nullable=False)
    student_id = Column(Integer, nullable=False)
    date = Column(String, nullable=False)
    room_number = Column(String, default="")

    rent_paid = Column(Integer, default=0, nullable=False)
    rent_remaining = Column(Integer, default=0, nullable=False)
    eb_share = Column(Integer, default=0, nullable=False)
    eb_paid = Column(Integer, default=0, nullable=False)
    eb_remaining = Column(Integer, default=0, nullable=False)

    __table_args__ = (
        UniqueConstraint("hostel_code", "student_id", "date", name="uq_monthly_accounts"),
        Index("idx_monthly_accounts_student", "student_id", "date"),
        Index("idx_monthly_accounts_room", "hostel_code", "room_number", "date"),
    )
