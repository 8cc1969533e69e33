# hostel_api/services/student_service.py
from typing import List, Optional, Dict, Any
from datetime import datetime, timezone
import logging

from fastapi import UploadFile
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete, func
from sqlalchemy.exc import SQLAlchemyError

from .base_service import BaseService
from .photo_storage import PhotoStorage
from ..core.exceptions import BusinessRuleError, NotFoundError
from ..models.student import Student
from ..models.attendance import Attendance
from ..models.ledger import RentPayment, ExtraFood
from ..models.monthly_account import MonthlyAccount

logger = logging.getLogger(__name__)

# Every table holding rows keyed by students.id
DEPENDENT_MODELS = (Attendance, ExtraFood, RentPayment, MonthlyAccount)


class StudentService(BaseService[Student]):
    label = "Student"

    def __init__(self, db: AsyncSession, photos: Optional[PhotoStorage] = None):
        super().__init__(Student, db)
        self.photos = photos

    # ------------------------------------------------------------------
    # Roster queries
    # ------------------------------------------------------------------

    async def _all(self, stmt) -> List[Student]:
        result = await self.db.execute(stmt)
        return result.scalars().all()

    def _active(self, hostel_code: str):
        return select(self.model).where(
            self.model.hostel_code == hostel_code,
            self.model.is_deleted == False
        )

    async def list_active(self, hostel_code: str) -> List[Student]:
        """Get all active students of a hostel, by name"""
        return await self._all(self._active(hostel_code).order_by(self.model.name))

    async def list_deleted(self, hostel_code: str) -> List[Student]:
        """Soft-deleted students, most recently deleted first"""
        stmt = select(self.model).where(
            self.model.hostel_code == hostel_code,
            self.model.is_deleted == True
        ).order_by(self.model.deleted_at.desc(), self.model.name)
        return await self._all(stmt)

    async def list_by_room(self, hostel_code: str, room_number: str) -> List[Student]:
        stmt = self._active(hostel_code).where(self.model.room_number == room_number)
        return await self._all(stmt.order_by(self.model.name))

    async def list_by_room_type(self, hostel_code: str, room_type: str) -> List[Student]:
        stmt = self._active(hostel_code).where(self.model.room_type == room_type)
        return await self._all(stmt.order_by(self.model.name))

    async def active_in_room(self, hostel_code: str, room_number: str) -> List[Student]:
        """Occupants a room batch applies to, in id order"""
        stmt = self._active(hostel_code).where(self.model.room_number == room_number)
        return await self._all(stmt.order_by(self.model.id))

    async def find_by_name(self, hostel_code: str, name: str) -> Optional[Student]:
        """Case-insensitive exact name match among active students"""
        stmt = self._active(hostel_code).where(
            func.lower(self.model.name) == func.lower(name)
        ).order_by(self.model.id).limit(1)
        result = await self.db.execute(stmt)
        student = result.scalar_one_or_none()
        if student is not None or name.isascii():
            return student

        # SQLite's lower() only folds ASCII
        wanted = name.casefold()
        for candidate in await self._all(self._active(hostel_code).order_by(self.model.id)):
            if (candidate.name or "").casefold() == wanted:
                return candidate
        return None

    async def get(self, id: int, include_deleted: bool = False) -> Optional[Student]:
        stmt = select(self.model).where(self.model.id == id)
        if not include_deleted:
            stmt = stmt.where(self.model.is_deleted == False)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    # ------------------------------------------------------------------
    # Profile CRUD
    # ------------------------------------------------------------------

    async def create(self, obj_in: Dict[str, Any]) -> Student:
        student = await super().create({**obj_in, "is_deleted": False, "deleted_at": None})
        logger.info(f"Registered student {student.id} in hostel {student.hostel_code}")
        return student

    async def update(self, id: int, obj_in: Dict[str, Any]) -> Student:
        """Overwrite profile fields; soft-deleted students can be edited too"""
        student = await self.get(id, include_deleted=True)
        if student is None:
            raise NotFoundError(self.label)
        for key, value in obj_in.items():
            setattr(student, key, value)
        await self.db.commit()
        await self.db.refresh(student)
        return student

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def soft_delete(self, id: int) -> None:
        stmt = (
            update(self.model)
            .where(self.model.id == id, self.model.is_deleted == False)
            .values(is_deleted=True, deleted_at=datetime.now(timezone.utc))
            .execution_options(synchronize_session=False)
        )
        result = await self.db.execute(stmt)
        if result.rowcount == 0:
            await self.db.rollback()
            raise BusinessRuleError("Student not found (or already deleted)")
        await self.db.commit()
        logger.info(f"Soft-deleted student {id}")

    async def restore(self, id: int) -> None:
        """Clear the deleted flag; restoring an active student is a no-op"""
        stmt = (
            update(self.model)
            .where(self.model.id == id)
            .values(is_deleted=False, deleted_at=None)
            .execution_options(synchronize_session=False)
        )
        result = await self.db.execute(stmt)
        if result.rowcount == 0:
            await self.db.rollback()
            raise NotFoundError(self.label)
        await self.db.commit()
        logger.info(f"Restored student {id}")

    async def permanent_delete(self, id: int) -> None:
        """Erase a student and every dependent row in one transaction.

        The photo file goes only after the commit, and failing to remove it
        never fails the request.
        """
        student = await self.get(id, include_deleted=True)
        photo_path = student.photo_path if student else None

        try:
            for model in DEPENDENT_MODELS:
                await self.db.execute(
                    delete(model)
                    .where(model.student_id == id)
                    .execution_options(synchronize_session=False)
                )
            result = await self.db.execute(
                delete(self.model)
                .where(self.model.id == id)
                .execution_options(synchronize_session=False)
            )
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise

        if result.rowcount == 0:
            raise NotFoundError(self.label)
        logger.info(f"Permanently deleted student {id}")

        if photo_path and self.photos is not None:
            self.photos.remove(photo_path)

    async def set_photo(self, id: int, upload: UploadFile) -> Student:
        student = await self.get(id, include_deleted=True)
        if student is None:
            raise NotFoundError(self.label)

        old_path = student.photo_path
        new_path = await self.photos.save(upload)
        student.photo_path = new_path
        try:
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            self.photos.remove(new_path)
            raise
        await self.db.refresh(student)

        if old_path and old_path != new_path:
            self.photos.remove(old_path)
        return student
