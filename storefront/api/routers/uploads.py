# This file defines the main-image upload endpoint, served on `/upload` and `/main-image`.
# The success and empty-upload messages are the strings the admin frontend already displays.
# A failed write answers with the raw error text as plain text, which the frontend shows verbatim.

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from storefront.api.dependencies import get_upload_service
from storefront.api.schemas.common import MessageResponse
from storefront.api.services.upload_service import UploadService

LOGGER = logging.getLogger("storefront.uploads")

NO_FILES_MESSAGE = "Nema otpremljenih fajlova"
UPLOADED_MESSAGE = "Fajl je uspešno otpremljen"

router = APIRouter(tags=["uploads"])
UploadServiceDep = Annotated[UploadService, Depends(get_upload_service)]


@router.post("/upload", response_model=MessageResponse)
@router.post("/main-image", response_model=MessageResponse)
def upload_main_image(
    service: UploadServiceDep,
    uploaded_file: Annotated[UploadFile | None, File(alias="uploadedFile")] = None,
) -> Response:
    if uploaded_file is None or not uploaded_file.filename:
        return JSONResponse(status_code=400, content={"message": NO_FILES_MESSAGE})

    try:
        service.save_main_image(filename=uploaded_file.filename, stream=uploaded_file.file)
    except OSError as exc:
        LOGGER.error("Main image upload failed: %s", exc)
        return PlainTextResponse(str(exc), status_code=500)
    return JSONResponse(status_code=200, content={"message": UPLOADED_MESSAGE})
