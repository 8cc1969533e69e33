"""Monthly rent/EB ledger and room EB allocation."""
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..core.dependencies import require
from ..schemas.monthly_account_schemas import (
    MonthlyAccountCreate, MonthlyAccountUpdate, MonthlyAccountOut,
    EbBatchIn, EbBatchResult, RoomMonthlyEntry,
)
from ..services.monthly_account_service import MonthlyAccountService

router = APIRouter(prefix="/api", tags=["Monthly Accounts"])


@router.get("/students/{student_id}/monthly-account")
async def get_monthly_accounts(student_id: int, db: AsyncSession = Depends(get_db)):
    rows = await MonthlyAccountService(db).get_student_accounts(student_id)
    return {"success": True, "entries": [MonthlyAccountOut.model_validate(row) for row in rows]}


@router.post("/students/{student_id}/monthly-account")
async def add_monthly_account(student_id: int, account_data: MonthlyAccountCreate, db: AsyncSession = Depends(get_db)):
    entry = await MonthlyAccountService(db).add_for_student(student_id, account_data.model_dump())
    return {"success": True, "entry": MonthlyAccountOut.model_validate(entry)}


@router.put("/monthly_accounts/{account_id}")
async def update_monthly_account(account_id: int, account_data: MonthlyAccountUpdate, db: AsyncSession = Depends(get_db)):
    await MonthlyAccountService(db).update(account_id, account_data.model_dump())
    return {"success": True}


@router.delete("/monthly_accounts/{account_id}")
async def delete_monthly_account(account_id: int, db: AsyncSession = Depends(get_db)):
    await MonthlyAccountService(db).hard_delete(account_id)
    return {"success": True}


@router.post("/rooms/{room}/eb-batch")
async def allocate_room_eb(room: str, batch: EbBatchIn, db: AsyncSession = Depends(get_db)):
    """Split the room's electricity bill evenly across its active students"""
    result = await MonthlyAccountService(db).allocate_eb(
        hostel_code=batch.hostel_code,
        room_number=room,
        date=batch.date,
        eb_total=batch.eb_total,
    )
    return {"success": True, **EbBatchResult(**result).model_dump()}


@router.get("/rooms/{room}/monthly-account")
async def get_room_monthly_accounts(
    room: str,
    hostel: Optional[str] = Query(None),
    date: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db)
):
    require("Missing hostel", hostel)
    require("Missing date", date)
    rows = await MonthlyAccountService(db).get_room_accounts(hostel.strip(), room.strip(), date.strip())
    return {"success": True, "entries": [RoomMonthlyEntry(**row) for row in rows]}
