# hostel_api/services/monthly_account_service.py
"""Monthly rent and electricity-bill (EB) ledger.

A room's EB is split evenly between its active occupants with floor
division. The remainder is not assigned to anyone.
"""
from typing import List, Dict, Any
import logging

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func, case, and_

from .base_service import BaseService
from .student_service import StudentService
from ..core.exceptions import BusinessRuleError, ValidationError
from ..models.monthly_account import MonthlyAccount
from ..models.student import Student

logger = logging.getLogger(__name__)

NATURAL_KEY = ["hostel_code", "student_id", "date"]


def split_eb(eb_total: int, student_count: int) -> int:
    """Per-student share of a room's bill; the remainder is dropped"""
    return eb_total // student_count


class MonthlyAccountService(BaseService[MonthlyAccount]):
    label = "Monthly entry"

    def __init__(self, db: AsyncSession):
        super().__init__(MonthlyAccount, db)

    async def get_student_accounts(self, student_id: int) -> List[MonthlyAccount]:
        return await self.list_for_student(
            student_id, order_by=[MonthlyAccount.date.desc(), MonthlyAccount.id.desc()]
        )

    async def add_for_student(self, student_id: int, obj_in: Dict[str, Any]) -> MonthlyAccount:
        if not obj_in.get("hostel_code"):
            raise ValidationError("Missing hostel_code")
        if not obj_in.get("date"):
            raise ValidationError("Missing date")
        return await self.create({**obj_in, "student_id": student_id})

    async def allocate_eb(self, hostel_code: str, room_number: str, date: str, eb_total: int) -> Dict[str, Any]:
        """Split a room's EB across its active students and record each share.

        Each student's row for (hostel_code, student_id, date) is created with
        nothing paid, or, if it already exists, gets the new room and share
        with ``eb_remaining = max(0, eb_share - eb_paid)``. Payments recorded
        against an earlier share are kept, so a bill can be corrected after
        partial payment.
        """
        room_number = (room_number or "").strip()
        if not hostel_code:
            raise ValidationError("Missing hostel_code")
        if not room_number:
            raise ValidationError("Missing room")
        if not date:
            raise ValidationError("Missing date")
        if eb_total < 0:
            raise ValidationError("eb_total cannot be negative")

        students = await StudentService(self.db).active_in_room(hostel_code, room_number)
        if not students:
            raise BusinessRuleError("No active students in this room.")

        eb_share = split_eb(eb_total, len(students))
        rows = [
            {
                "hostel_code": hostel_code,
                "student_id": student.id,
                "date": date,
                "room_number": room_number,
                "rent_paid": 0,
                "rent_remaining": 0,
                "eb_share": eb_share,
                "eb_paid": 0,
                "eb_remaining": eb_share,
            }
            for student in students
        ]

        table = MonthlyAccount.__table__
        stmt = self.upsert_statement(rows)
        outstanding = stmt.excluded.eb_share - table.c.eb_paid
        stmt = stmt.on_conflict_do_update(
            index_elements=NATURAL_KEY,
            set_={
                "room_number": stmt.excluded.room_number,
                "eb_share": stmt.excluded.eb_share,
                "eb_remaining": case((outstanding > 0, outstanding), else_=0),
            },
        )
        await self.db.execute(stmt)
        await self.db.commit()

        logger.info(
            f"EB batch {hostel_code}/{room_number} {date}: total={eb_total} "
            f"students={len(students)} share={eb_share}"
        )
        return {
            "room": room_number,
            "date": date,
            "total_students": len(students),
            "eb_total": eb_total,
            "eb_share": eb_share,
        }

    async def get_room_accounts(self, hostel_code: str, room_number: str, date: str) -> List[Dict[str, Any]]:
        """Active occupants of a room joined with that month's ledger rows"""
        stmt = (
            select(
                Student.id.label("student_id"),
                Student.name,
                Student.room_number,
                Student.room_type,
                Student.monthly_rent,
                MonthlyAccount.id.label("monthly_id"),
                MonthlyAccount.date,
                func.coalesce(MonthlyAccount.rent_paid, 0).label("rent_paid"),
                func.coalesce(MonthlyAccount.rent_remaining, 0).label("rent_remaining"),
                func.coalesce(MonthlyAccount.eb_share, 0).label("eb_share"),
                func.coalesce(MonthlyAccount.eb_paid, 0).label("eb_paid"),
                func.coalesce(MonthlyAccount.eb_remaining, 0).label("eb_remaining"),
            )
            .outerjoin(
                MonthlyAccount,
                and_(
                    MonthlyAccount.student_id == Student.id,
                    MonthlyAccount.hostel_code == Student.hostel_code,
                    MonthlyAccount.date == date,
                ),
            )
            .where(
                Student.hostel_code == hostel_code,
                Student.room_number == room_number,
                Student.is_deleted == False,
            )
            .order_by(Student.name)
        )
        result = await self.db.execute(stmt)
        return [dict(row._mapping) for row in result]
