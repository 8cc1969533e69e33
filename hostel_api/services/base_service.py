# hostel_api/services/base_service.py
"""Base service with common CRUD operations."""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete
from sqlalchemy.dialects import postgresql, sqlite
from typing import Type, Any, Dict, Optional, List, TypeVar, Generic

from ..core.exceptions import DatabaseError, NotFoundError

# Define generic type
T = TypeVar('T')

class BaseService(Generic[T]):
    # Used in "<label> not found" business errors
    label: str = "Record"

    def __init__(self, model: Type[T], db: AsyncSession):
        self.model = model
        self.db = db

    @property
    def dialect_name(self) -> str:
        return self.db.bind.dialect.name

    async def get(self, id: Any) -> Optional[T]:
        stmt = select(self.model).where(self.model.id == id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_or_fail(self, id: Any) -> T:
        obj = await self.get(id)
        if obj is None:
            raise NotFoundError(self.label)
        return obj

    async def list_for_student(self, student_id: int, order_by: Optional[List] = None) -> List[T]:
        stmt = select(self.model).where(self.model.student_id == student_id)
        stmt = stmt.order_by(*(order_by or [self.model.id]))
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def create(self, obj_in: Dict) -> T:
        obj = self.model(**obj_in)
        self.db.add(obj)
        await self.db.commit()
        await self.db.refresh(obj)
        return obj

    async def update(self, id: Any, obj_in: Dict) -> T:
        obj = await self.get_or_fail(id)
        for key, value in obj_in.items():
            setattr(obj, key, value)
        await self.db.commit()
        await self.db.refresh(obj)
        return obj

    async def hard_delete(self, id: Any) -> None:
        """Permanently delete record from database"""
        result = await self.db.execute(delete(self.model).where(self.model.id == id))
        if result.rowcount == 0:
            await self.db.rollback()
            raise NotFoundError(self.label)
        await self.db.commit()

    def upsert_statement(self, rows: List[Dict]):
        """Multi-row INSERT that the caller finishes with on_conflict_do_update()"""
        dialect = self.dialect_name
        if dialect == "postgresql":
            return postgresql.insert(self.model).values(rows)
        if dialect == "sqlite":
            return sqlite.insert(self.model).values(rows)
        raise DatabaseError(f"Upsert is not supported on {dialect}")
