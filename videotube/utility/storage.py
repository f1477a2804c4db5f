import logging
import mimetypes
import os
import uuid
from pathlib import Path
from typing import Optional

from fastapi.concurrency import run_in_threadpool
from supabase import create_client, Client

from videotube.config.environments import SUPABASE_PROJECT_URL, SUPABASE_SERVICE_KEY, SUPABASE_BUCKET

logger = logging.getLogger(__name__)


def remove_local_file(local_file_path: str) -> None:
    try:
        os.remove(local_file_path)
    except FileNotFoundError:
        pass


class MediaStorage:
    """
    Media upload service backed by Supabase Storage.

    ``upload`` takes a local file path and answers ``{"url": public_url}``,
    or None when the file could not be uploaded. The local file is removed
    either way.
    """

    def __init__(self, bucket: str = SUPABASE_BUCKET, client: Optional[Client] = None):
        self.bucket = bucket
        self._client = client

    @property
    def client(self) -> Client:
        if self._client is None:
            self._client = create_client(SUPABASE_PROJECT_URL, SUPABASE_SERVICE_KEY)
        return self._client

    def _upload_sync(self, local_file_path: str) -> dict:
        """
        Upload file content to Supabase Storage

        Args:
            local_file_path: Path of the file on local disk

        Returns:
            dict: ``url`` (public URL) and ``path`` (object name in the bucket)
        """
        filename = f"{uuid.uuid4()}{Path(local_file_path).suffix}"
        content_type = mimetypes.guess_type(local_file_path)[0] or "application/octet-stream"

        with open(local_file_path, "rb") as f:
            self.client.storage.from_(self.bucket).upload(
                path=filename,
                file=f.read(),
                file_options={
                    "content-type": content_type,
                    "upsert": "false"  # Don't overwrite existing files
                }
            )

        public_url = self.client.storage.from_(self.bucket).get_public_url(filename)
        return {"url": public_url, "path": filename}

    async def upload(self, local_file_path: Optional[str]) -> Optional[dict]:
        if not local_file_path:
            return None

        try:
            result = await run_in_threadpool(self._upload_sync, local_file_path)
            logger.info("File uploaded to storage: %s", result["url"])
            return result
        except Exception as e:
            logger.error("Failed to upload %s to storage: %s", local_file_path, e)
            return None
        finally:
            remove_local_file(local_file_path)

