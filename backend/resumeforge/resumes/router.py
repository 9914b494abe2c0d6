"""
Resume processing routes
"""
import os
import uuid
from pathlib import Path
from typing import List, Optional
from fastapi import APIRouter, Depends, UploadFile, File, Request
import structlog

from resumeforge.core.config import settings
from resumeforge.core.exceptions import BadRequestError, ProcessingError, TextExtractionError
from resumeforge.resumes.ocr import OCREngine, get_ocr_engine
from resumeforge.resumes.parser import ResumeParser
from resumeforge.resumes.schemas import PhotoUploadResponse

router = APIRouter(prefix="/api/resume", tags=["Resumes"])
logger = structlog.get_logger()

parser = ResumeParser()


def _file_extension(upload: UploadFile, allowed: List[str]) -> str:
    file_ext = Path(upload.filename or "").suffix.lower().lstrip(".")
    if file_ext not in allowed:
        raise BadRequestError(
            f"File type not allowed. Allowed types: {', '.join(allowed)}"
        )
    return file_ext


def _read_limited(upload: UploadFile) -> bytes:
    content = upload.file.read()
    if len(content) > settings.max_upload_size_bytes:
        raise ProcessingError(
            f"File size exceeds maximum allowed size of {settings.MAX_UPLOAD_SIZE_MB}MB"
        )
    return content


@router.post("/parse")
def parse_resume(
    resume: Optional[UploadFile] = File(None),
    ocr_engine: OCREngine = Depends(get_ocr_engine),
):
    """Upload a resume document and get the structured fields back"""
    if resume is None:
        raise BadRequestError("No file uploaded")

    file_ext = _file_extension(resume, settings.ALLOWED_RESUME_EXTENSIONS)
    content = _read_limited(resume)

    try:
        text = parser.extract_text_from_bytes(content, file_ext)
    except Exception as e:
        raise TextExtractionError(details={"file_name": resume.filename, "reason": str(e)}) from e

    if parser.is_probably_scanned(text):
        logger.warning("scanned_document_detected", file_name=resume.filename, text_length=len(text.strip()))
        ocr_text = ocr_engine.reextract(content, file_ext)
        if ocr_text:
            text = ocr_text

    record = parser.parse(text)
    logger.info("resume_parse_completed", file_name=resume.filename, file_size=len(content))
    return record.to_response()


@router.post("/upload-photo", response_model=PhotoUploadResponse)
def upload_photo(
    request: Request,
    profilePicture: Optional[UploadFile] = File(None),
):
    """Store a profile picture and return the URL it is served from"""
    if profilePicture is None:
        raise BadRequestError("No image uploaded")

    file_ext = _file_extension(profilePicture, settings.ALLOWED_IMAGE_EXTENSIONS)
    content = _read_limited(profilePicture)

    os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
    file_name = f"{uuid.uuid4()}.{file_ext}"
    with open(os.path.join(settings.UPLOAD_DIR, file_name), "wb") as f:
        f.write(content)

    image_url = f"{str(request.base_url).rstrip('/')}/uploads/{file_name}"
    logger.info("photo_uploaded", file_name=file_name, file_size=len(content))

    return PhotoUploadResponse(image_url=image_url)
