import os
import uuid
from pathlib import Path
from typing import Optional

from fastapi import UploadFile

from videotube.config.environments import TEMP_UPLOAD_DIR

CHUNK_SIZE = 1024 * 1024


async def save_upload_to_temp(file: Optional[UploadFile], upload_dir: str = TEMP_UPLOAD_DIR) -> Optional[str]:
    """Stream an uploaded file to the temp directory and return its local path"""
    if file is None or not file.filename:
        return None

    os.makedirs(upload_dir, exist_ok=True)
    local_path = os.path.join(upload_dir, f"{uuid.uuid4()}{Path(file.filename).suffix}")

    with open(local_path, "wb") as buffer:
        while chunk := await file.read(CHUNK_SIZE):
            buffer.write(chunk)

    return local_path
