"""Student roster, profile and lifecycle endpoints."""
from typing import Optional
from fastapi import APIRouter, Depends, File, Query, UploadFile

from ..core.dependencies import get_student_service, require
from ..schemas.student_schemas import (
    StudentCreate, StudentUpdate, StudentOut,
    StudentSummary, StudentRoomItem, DeletedStudentItem,
)
from ..services.student_service import StudentService

router = APIRouter(prefix="/api/students", tags=["Students"])

# Fixed paths are declared before /{student_id} so they are not read as ids


@router.get("/list")
async def list_students(
    hostel: Optional[str] = Query(None),
    service: StudentService = Depends(get_student_service)
):
    """Active roster of a hostel"""
    require("Missing hostel code", hostel)
    students = await service.list_active(hostel.strip())
    return {"success": True, "students": [StudentSummary.model_validate(s) for s in students]}


@router.get("/old")
async def list_old_students(
    hostel: Optional[str] = Query(None),
    service: StudentService = Depends(get_student_service)
):
    """Soft-deleted students, most recently deleted first"""
    require("Missing hostel code", hostel)
    students = await service.list_deleted(hostel.strip())
    return {"success": True, "students": [DeletedStudentItem.model_validate(s) for s in students]}


@router.get("/by-roomtype")
async def list_by_room_type(
    hostel: Optional[str] = Query(None),
    room_type: Optional[str] = Query(None, alias="roomType"),
    service: StudentService = Depends(get_student_service)
):
    require("Missing hostel or roomType", hostel, room_type)
    students = await service.list_by_room_type(hostel.strip(), room_type.strip())
    return {"success": True, "students": [StudentRoomItem.model_validate(s) for s in students]}


@router.get("/by-room")
async def list_by_room(
    hostel: Optional[str] = Query(None),
    room: Optional[str] = Query(None),
    service: StudentService = Depends(get_student_service)
):
    require("Missing hostel or room", hostel, room)
    students = await service.list_by_room(hostel.strip(), room.strip())
    return {"success": True, "students": [StudentRoomItem.model_validate(s) for s in students]}


@router.get("")
async def search_student(
    hostel: Optional[str] = Query(None),
    name: Optional[str] = Query(None),
    service: StudentService = Depends(get_student_service)
):
    """Case-insensitive exact name lookup"""
    require("Missing hostel or name", hostel, name)
    student = await service.find_by_name(hostel.strip(), name.strip())
    if not student:
        return {"success": False, "message": "No student found"}
    return {"success": True, "student": StudentOut.model_validate(student)}


@router.post("")
async def create_student(
    student_data: StudentCreate,
    service: StudentService = Depends(get_student_service)
):
    student = await service.create(student_data.model_dump())
    return {"success": True, "student": StudentOut.model_validate(student)}


@router.get("/{student_id}")
async def get_student(
    student_id: int,
    include_deleted: Optional[str] = Query(None, alias="includeDeleted"),
    service: StudentService = Depends(get_student_service)
):
    student = await service.get(student_id, include_deleted=(include_deleted == "1"))
    if not student:
        return {"success": False, "message": "Student not found"}
    return {"success": True, "student": StudentOut.model_validate(student)}


@router.put("/{student_id}")
async def update_student(
    student_id: int,
    student_data: StudentUpdate,
    service: StudentService = Depends(get_student_service)
):
    await service.update(student_id, student_data.model_dump())
    return {"success": True}


@router.delete("/{student_id}")
async def soft_delete_student(
    student_id: int,
    service: StudentService = Depends(get_student_service)
):
    await service.soft_delete(student_id)
    return {"success": True}


@router.post("/{student_id}/restore")
async def restore_student(
    student_id: int,
    service: StudentService = Depends(get_student_service)
):
    await service.restore(student_id)
    return {"success": True}


@router.delete("/{student_id}/permanent")
async def permanent_delete_student(
    student_id: int,
    service: StudentService = Depends(get_student_service)
):
    """Erase the student and all attendance, ledger and monthly rows"""
    await service.permanent_delete(student_id)
    return {"success": True}


@router.post("/{student_id}/photo")
async def upload_photo(
    student_id: int,
    photo: UploadFile = File(...),
    service: StudentService = Depends(get_student_service)
):
    student = await service.set_photo(student_id, photo)
    return {"success": True, "photo_path": student.photo_path}
