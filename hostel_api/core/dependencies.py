# hostel_api/core/dependencies.py
"""Request-scoped access to the objects create_app() puts on app.state."""
from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from .database import get_db
from .exceptions import ValidationError
from ..services.photo_storage import PhotoStorage
from ..services.student_service import StudentService


def get_photo_storage(request: Request) -> PhotoStorage:
    return request.app.state.photo_storage


def get_student_service(
    db: AsyncSession = Depends(get_db),
    photos: PhotoStorage = Depends(get_photo_storage),
) -> StudentService:
    return StudentService(db, photos)


def require(message: str, *values) -> None:
    """Reject the request with 400 unless every value is non-blank"""
    if not all(v is not None and str(v).strip() for v in values):
        raise ValidationError(message)
