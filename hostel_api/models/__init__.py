# hostel_api/models/__init__.py
"""Import all models here so Base.metadata is complete for create_all and Alembic."""
from .base import Base

from .student import Student
from .ledger import RentPayment, ExtraFood
from .attendance import Attendance, AttendanceStatus
from .monthly_account import MonthlyAccount
