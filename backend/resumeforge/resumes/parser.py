"""
Resume parsing service
"""
import io
from typing import Dict, List, Optional, Sequence
from pathlib import Path
import pdfplumber
from docx import Document
import structlog

from resumeforge.core.config import settings
from resumeforge.resumes.schemas import (
    PersonalInfo,
    ExperienceEntry,
    EducationEntry,
    ResumeRecord,
)
from resumeforge.resumes.sections import (
    SUMMARY,
    EXPERIENCE,
    EDUCATION,
    SKILLS,
    locate_sections,
    slice_section,
)
from resumeforge.resumes.extractors import (
    extract_personal_info,
    extract_skills,
    extract_experience,
    extract_education,
)

logger = structlog.get_logger()


def assemble_resume(
    personal_info: PersonalInfo,
    summary: str,
    skills: List[str],
    experience: List[ExperienceEntry],
    education: List[EducationEntry],
) -> ResumeRecord:
    """Compose extractor output into one record"""
    return ResumeRecord(
        personal_info=personal_info,
        summary=summary,
        skills=skills,
        experience=experience,
        education=education,
    )


class ResumeParser:
    """Extract text from PDF and DOCX files and structure it into a resume record"""

    def __init__(
        self,
        section_keywords: Optional[Dict[str, List[str]]] = None,
        skills_dictionary: Optional[Sequence[str]] = None,
        max_skills: Optional[int] = None,
    ):
        self.section_keywords = section_keywords if section_keywords is not None else settings.SECTION_KEYWORDS
        self.skills_dictionary = skills_dictionary if skills_dictionary is not None else settings.SKILLS_DICTIONARY
        self.max_skills = max_skills if max_skills is not None else settings.MAX_SKILLS

    def extract_text(self, file_path: str) -> str:
        """Extract raw text from resume file"""
        path = Path(file_path)
        return self.extract_text_from_bytes(path.read_bytes(), path.suffix.lower().lstrip("."))

    def extract_text_from_bytes(self, data: bytes, file_type: str) -> str:
        """Extract raw text from an uploaded document's bytes"""
        try:
            if file_type == "pdf":
                return self._extract_from_pdf(data)
            elif file_type == "docx":
                return self._extract_from_docx(data)
            else:
                raise ValueError(f"Unsupported file type: {file_type}")
        except Exception as e:
            logger.error("text_extraction_failed", file_type=file_type, error=str(e))
            raise

    def _extract_from_pdf(self, data: bytes) -> str:
        """Extract text from PDF"""
        text_parts = []
        with pdfplumber.open(io.BytesIO(data)) as pdf:
            for page in pdf.pages:
                text = page.extract_text()
                if text:
                    text_parts.append(text)
        return "\n".join(text_parts)

    def _extract_from_docx(self, data: bytes) -> str:
        """Extract text from DOCX"""
        doc = Document(io.BytesIO(data))
        return "\n".join(paragraph.text for paragraph in doc.paragraphs)

    def is_probably_scanned(self, text: str) -> bool:
        return len(text.strip()) < settings.SCANNED_TEXT_THRESHOLD

    def parse(self, text: str) -> ResumeRecord:
        """Parse resume text into a structured record"""
        anchors = locate_sections(text, self.section_keywords)

        skills = extract_skills(
            text,
            slice_section(text, SKILLS, anchors),
            dictionary=self.skills_dictionary,
            limit=self.max_skills,
            min_token_length=settings.SKILL_TOKEN_MIN_LENGTH,
            max_token_length=settings.SKILL_TOKEN_MAX_LENGTH,
        )
        experience = extract_experience(
            slice_section(text, EXPERIENCE, anchors),
            min_length=settings.EXPERIENCE_MIN_BLOCK_LENGTH,
        )
        education = extract_education(
            slice_section(text, EDUCATION, anchors),
            min_length=settings.EDUCATION_MIN_BLOCK_LENGTH,
        )

        record = assemble_resume(
            personal_info=extract_personal_info(text),
            summary=slice_section(text, SUMMARY, anchors),
            skills=skills,
            experience=experience,
            education=education,
        )

        logger.info(
            "resume_parsed",
            sections=[anchor.type for anchor in anchors],
            skills_count=len(record.skills),
            experience_count=len(record.experience),
            education_count=len(record.education),
        )
        return record
