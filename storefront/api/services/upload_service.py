# This file stores uploaded product main images in the public directory served by the frontend.
# Files keep their own base name, so re-uploading the same name replaces the earlier file.

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import BinaryIO

from storefront.api.api_config import ApiConfig

LOGGER = logging.getLogger("storefront.uploads")


class UploadService:
    def __init__(self, *, config: ApiConfig) -> None:
        self.config = config

    @property
    def upload_dir(self) -> Path:
        return Path(self.config.upload_dir)

    def save_main_image(self, *, filename: str, stream: BinaryIO) -> Path:
        """Write the upload to the public directory; `OSError` propagates to the caller."""

        target = self.upload_dir / Path(filename).name
        with target.open("wb") as handle:
            shutil.copyfileobj(stream, handle)
        LOGGER.info("Stored main image %s", target)
        return target
