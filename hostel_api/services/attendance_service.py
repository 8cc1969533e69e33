# hostel_api/services/attendance_service.py
from typing import List, Dict, Any, Iterable
import logging

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from .base_service import BaseService
from .student_service import StudentService
from ..core.exceptions import ValidationError
from ..models.attendance import Attendance, AttendanceStatus
from ..models.student import Student

logger = logging.getLogger(__name__)

NATURAL_KEY = ["hostel_code", "date", "room_number", "student_id"]


def _parse_ids(values: Iterable[Any]) -> set:
    ids = set()
    for value in values:
        try:
            ids.add(int(value))
        except (TypeError, ValueError):
            continue
    return ids


class AttendanceService(BaseService[Attendance]):
    label = "Attendance row"

    def __init__(self, db: AsyncSession):
        super().__init__(Attendance, db)

    async def mark_room(
        self,
        hostel_code: str,
        room_number: str,
        date: str,
        absent_ids: Iterable[Any] = (),
    ) -> int:
        """Mark every active occupant of a room Present or Absent for a date.

        One row per (hostel_code, date, room_number, student_id) is inserted
        or has its status overwritten, so repeating a request leaves the same
        rows behind. Returns the number of students processed.
        """
        room_number = (room_number or "").strip()
        if not hostel_code:
            raise ValidationError("Missing hostel_code")
        if not room_number:
            raise ValidationError("Missing room")
        if not date:
            raise ValidationError("Missing date")

        absent = _parse_ids(absent_ids)
        students = await StudentService(self.db).active_in_room(hostel_code, room_number)
        if not students:
            return 0

        rows = [
            {
                "hostel_code": hostel_code,
                "date": date,
                "room_number": room_number,
                "student_id": student.id,
                "status": (AttendanceStatus.ABSENT if student.id in absent else AttendanceStatus.PRESENT).value,
            }
            for student in students
        ]
        stmt = self.upsert_statement(rows)
        stmt = stmt.on_conflict_do_update(
            index_elements=NATURAL_KEY,
            set_={"status": stmt.excluded.status},
        )
        await self.db.execute(stmt)
        await self.db.commit()

        logger.info(
            f"Attendance {hostel_code}/{room_number} {date}: "
            f"{len(students)} students, {sum(1 for r in rows if r['status'] == 'Absent')} absent"
        )
        return len(students)

    async def get_room_attendance(self, hostel_code: str, room_number: str, date: str) -> List[Dict[str, Any]]:
        """Attendance rows of a room for one date, with student names"""
        stmt = (
            select(
                Attendance.id,
                Attendance.date,
                Attendance.status,
                Attendance.student_id,
                Student.name,
            )
            .join(Student, Student.id == Attendance.student_id)
            .where(
                Attendance.hostel_code == hostel_code,
                Attendance.room_number == room_number,
                Attendance.date == date,
            )
            .order_by(Student.name)
        )
        result = await self.db.execute(stmt)
        return [dict(row._mapping) for row in result]

    async def get_student_history(self, student_id: int) -> List[Attendance]:
        return await self.list_for_student(
            student_id, order_by=[Attendance.date.desc(), Attendance.id.desc()]
        )

    async def update(self, id: int, obj_in: Dict[str, Any]) -> Attendance:
        status = (obj_in.get("status") or "").strip()
        if status not in {s.value for s in AttendanceStatus}:
            raise ValidationError("Status must be Present or Absent")
        return await super().update(id, {**obj_in, "status": status})
