"""Room attendance marking and per-student attendance history."""
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..core.dependencies import require
from ..schemas.attendance_schemas import AttendanceBatchIn, AttendanceUpdate, AttendanceOut, RoomAttendanceEntry
from ..services.attendance_service import AttendanceService

router = APIRouter(prefix="/api", tags=["Attendance"])


@router.post("/rooms/{room}/attendance")
async def mark_room_attendance(room: str, batch: AttendanceBatchIn, db: AsyncSession = Depends(get_db)):
    """Mark a room for a date; everyone not in absent_ids is Present"""
    total = await AttendanceService(db).mark_room(
        hostel_code=batch.hostel_code,
        room_number=room,
        date=batch.date,
        absent_ids=batch.absent_ids,
    )
    return {"success": True, "total_students": total}


@router.get("/rooms/{room}/attendance")
async def get_room_attendance(
    room: str,
    hostel: Optional[str] = Query(None),
    date: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db)
):
    require("Missing hostel or date", hostel, date)
    rows = await AttendanceService(db).get_room_attendance(hostel.strip(), room.strip(), date.strip())
    return {"success": True, "entries": [RoomAttendanceEntry(**row) for row in rows]}


@router.get("/students/{student_id}/attendance")
async def get_student_attendance(student_id: int, db: AsyncSession = Depends(get_db)):
    rows = await AttendanceService(db).get_student_history(student_id)
    return {"success": True, "entries": [AttendanceOut.model_validate(row) for row in rows]}


@router.put("/attendance/{attendance_id}")
async def update_attendance(attendance_id: int, attendance_data: AttendanceUpdate, db: AsyncSession = Depends(get_db)):
    await AttendanceService(db).update(attendance_id, attendance_data.model_dump())
    return {"success": True}


@router.delete("/attendance/{attendance_id}")
async def delete_attendance(attendance_id: int, db: AsyncSession = Depends(get_db)):
    await AttendanceService(db).hard_delete(attendance_id)
    return {"success": True}
