# hostel_api/models/ledger.py
"""Manually recorded payment entries for a student.

``remaining`` is the balance the caller computed at the time of the entry;
nothing here aggregates or checks it.
"""
from sqlalchemy import Column, String, Integer, Index
from .base import Base


class RentPayment(Base):
    __tablename__ = "rent_payments"

    student_id = Column(Integer, nullable=False)
    date = Column(String, default="")
    rent_paid = Column(Integer, default=0, nullable=False)
    remaining = Column(Integer, default=0, nullable=False)

    __table_args__ = (Index("idx_rent_payments_student", "student_id"),)


class ExtraFood(Base):
    __tablename__ = "extra_food"

    student_id = Column(Integer, nullable=False)
    date = Column(String, default="")
    amount = Column(Integer, default=0, nullable=False)
    remaining = Column(Integer, default=0, nullable=False)

    __table_args__ = (Index("idx_extra_food_student", "student_id"),)
