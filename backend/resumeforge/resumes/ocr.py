"""
OCR fallback hook for scanned documents
"""
from abc import ABC, abstractmethod
from typing import Optional
import structlog

logger = structlog.get_logger()


class OCREngine(ABC):
    """
    Re-extracts text from a document whose text layer came back (nearly)
    empty. The parse endpoint offers the raw upload to the engine and keeps
    the original text whenever the engine returns None.
    """

    @abstractmethod
    def reextract(self, data: bytes, file_type: str) -> Optional[str]:
        """Return the recognised text, or None to keep the extracted text"""


class NullOCREngine(OCREngine):
    """Default engine: no OCR backend is installed, so nothing is re-extracted"""

    def reextract(self, data: bytes, file_type: str) -> Optional[str]:
        logger.warning("ocr_not_available_skipping", file_type=file_type, size=len(data))
        return None


_ocr_engine: OCREngine = NullOCREngine()


def get_ocr_engine() -> OCREngine:
    """FastAPI dependency returning the configured OCR engine"""
    return _ocr_engine
