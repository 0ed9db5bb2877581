"""
Upload handling: copy an uploaded file to disk for the duration of one ingestion
"""

import logging
import os
import shutil
import tempfile
from contextlib import contextmanager
from typing import Iterator, Optional

from fastapi import UploadFile

from bookrank.core.errors import IngestionError

logger = logging.getLogger(__name__)


@contextmanager
def saved_upload(upload: UploadFile, directory: Optional[str] = None) -> Iterator[str]:
    """
    Write *upload* to a temporary .csv file and yield its path.

    The file is removed when the block exits, whether ingestion
    succeeded or raised.
    """
    if directory:
        os.makedirs(directory, exist_ok=True)
    tmp = tempfile.NamedTemporaryFile(
        delete=False, suffix=".csv", prefix="upload_", dir=directory
    )
    try:
        try:
            with tmp:
                shutil.copyfileobj(upload.file, tmp)
        except OSError as exc:
            raise IngestionError(f"Could not read uploaded file {upload.filename}: {exc}") from exc
        logger.info("Saved upload %s to %s", upload.filename, tmp.name)
        yield tmp.name
    finally:
        try:
            os.unlink(tmp.name)
        except FileNotFoundError:
            pass
