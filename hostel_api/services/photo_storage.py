# hostel_api/services/photo_storage.py
"""Student photos kept in a local upload directory.

``students.photo_path`` stores ``uploads/<file name>``, which is also the URL
the directory is served under.
"""
import logging
import uuid
from pathlib import Path
from typing import Optional

from fastapi import UploadFile
from starlette.concurrency import run_in_threadpool

from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)

URL_PREFIX = "uploads"
ALLOWED_EXTENSIONS = {"jpg", "jpeg", "png", "gif", "webp"}


class PhotoStorage:
    def __init__(self, upload_dir: str, max_bytes: int):
        self.root = Path(upload_dir)
        self.max_bytes = max_bytes

    def ensure_dir(self) -> None:
        self.root.mkdir(parents=True, exist_ok=True)

    def path_for(self, photo_path: Optional[str]) -> Optional[Path]:
        """Map a stored photo_path back to a file inside the upload dir"""
        if not photo_path:
            return None
        name = Path(photo_path).name
        if not name or name in (".", ".."):
            return None
        return self.root / name

    async def save(self, upload: UploadFile) -> str:
        filename = upload.filename or ""
        ext = filename.rsplit(".", 1)[-1].lower() if "." in filename else ""
        if ext not in ALLOWED_EXTENSIONS:
            raise ValidationError(f"Photo must be one of: {', '.join(sorted(ALLOWED_EXTENSIONS))}")

        data = await upload.read(self.max_bytes + 1)
        if not data:
            raise ValidationError("Photo file is empty")
        if len(data) > self.max_bytes:
            raise ValidationError(f"Photo exceeds {self.max_bytes} bytes")

        self.ensure_dir()
        name = f"{uuid.uuid4().hex}.{ext}"
        await run_in_threadpool((self.root / name).write_bytes, data)
        logger.info(f"Saved photo {name} ({len(data)} bytes)")
        return f"{URL_PREFIX}/{name}"

    def remove(self, photo_path: Optional[str]) -> bool:
        """Delete a stored photo; failures are logged and never raised"""
        path = self.path_for(photo_path)
        if path is None:
            return False
        try:
            path.unlink()
            return True
        except FileNotFoundError:
            logger.warning(f"Photo {path} already missing")
        except OSError as e:
            logger.warning(f"Could not delete photo {path}: {e}")
        return False
