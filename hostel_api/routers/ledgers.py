"""Rent payment and extra food ledger endpoints."""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..schemas.ledger_schemas import RentPaymentIn, RentPaymentOut, ExtraFoodIn, ExtraFoodOut
from ..services.ledger_service import RentPaymentService, ExtraFoodService

router = APIRouter(prefix="/api", tags=["Ledgers"])


# -------------------- RENT PAYMENTS --------------------

@router.get("/students/{student_id}/rent")
async def get_rent_entries(student_id: int, db: AsyncSession = Depends(get_db)):
    entries = await RentPaymentService(db).list_for_student(student_id)
    return {"success": True, "entries": [RentPaymentOut.model_validate(e) for e in entries]}


@router.post("/students/{student_id}/rent")
async def add_rent_entry(student_id: int, entry_data: RentPaymentIn, db: AsyncSession = Depends(get_db)):
    entry = await RentPaymentService(db).create({**entry_data.model_dump(), "student_id": student_id})
    return {"success": True, "entry": RentPaymentOut.model_validate(entry)}


@router.put("/rent_payments/{entry_id}")
async def update_rent_entry(entry_id: int, entry_data: RentPaymentIn, db: AsyncSession = Depends(get_db)):
    await RentPaymentService(db).update(entry_id, entry_data.model_dump())
    return {"success": True}


@router.delete("/rent_payments/{entry_id}")
async def delete_rent_entry(entry_id: int, db: AsyncSession = Depends(get_db)):
    await RentPaymentService(db).hard_delete(entry_id)
    return {"success": True}


# -------------------- EXTRA FOOD --------------------

@router.get("/students/{student_id}/extra-food")
async def get_extra_food_entries(student_id: int, db: AsyncSession = Depends(get_db)):
    entries = await ExtraFoodService(db).list_for_student(student_id)
    return {"success": True, "entries": [ExtraFoodOut.model_validate(e) for e in entries]}


@router.post("/students/{student_id}/extra-food")
async def add_extra_food_entry(student_id: int, entry_data: ExtraFoodIn, db: AsyncSession = Depends(get_db)):
    entry = await ExtraFoodService(db).create({**entry_data.model_dump(), "student_id": student_id})
    return {"success": True, "entry": ExtraFoodOut.model_validate(entry)}


@router.put("/extra_food/{entry_id}")
async def update_extra_food_entry(entry_id: int, entry_data: ExtraFoodIn, db: AsyncSession = Depends(get_db)):
    await ExtraFoodService(db).update(entry_id, entry_data.model_dump())
    return {"success": True}


@router.delete("/extra_food/{entry_id}")
async def delete_extra_food_entry(entry_id: int, db: AsyncSession = Depends(get_db)):
    await ExtraFoodService(db).hard_delete(entry_id)
    return {"success": True}
