"""
Field extractors for the resume text pipeline.

Every extractor is total over str input: an empty document or section
gives empty or default output, never an exception.
"""
import re
from typing import Dict, List, Optional, Sequence, Tuple

from resumeforge.core.config import DEFAULT_SKILLS_DICTIONARY
from resumeforge.resumes.sections import trim
from resumeforge.resumes.schemas import PersonalInfo, ExperienceEntry, EducationEntry

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._-]+@[a-zA-Z0-9._-]+\.[a-zA-Z0-9_-]+")
PHONE_PATTERN = re.compile(r"(\+?[0-9]{1,2}\s?)?\(?[0-9]{3}\)?[\s.-]?[0-9]{3}[\s.-]?[0-9]{4}")
SKILL_SEPARATORS = re.compile(r"[,•\n]")
BLOCK_SEPARATOR = re.compile(r"\n\s*\n")

NAME_SKIP_MARKER = "resume"

EXPERIENCE_FIELDS: Sequence[Tuple[str, str]] = (
    ("company", "Unknown Company"),
    ("position", "Role"),
)
EDUCATION_FIELDS: Sequence[Tuple[str, str]] = (
    ("school", "Unknown School"),
    ("degree", "Degree"),
)


def extract_personal_info(text: str) -> PersonalInfo:
    """Email, phone and name from the whole document"""
    info = PersonalInfo()

    email_match = EMAIL_PATTERN.search(text)
    if email_match:
        info.email = email_match.group(0)

    phone_match = PHONE_PATTERN.search(text)
    if phone_match:
        info.phone = phone_match.group(0)

    info.full_name = _guess_full_name(text)
    return info


def _guess_full_name(text: str) -> Optional[str]:
    # The first non-blank line, unless it is a "Resume"/"My Resume" title
    for line in text.split("\n"):
        first = trim(line)
        if first:
            if NAME_SKIP_MARKER in first.lower():
                return None
            return first
    return None


def extract_skills(
    text: str,
    skills_section: str,
    dictionary: Optional[Sequence[str]] = None,
    limit: int = 20,
    min_token_length: int = 2,
    max_token_length: int = 25,
) -> List[str]:
    """
    Merge dictionary hits from the whole document with the free-text items
    of the skills section.

    Dictionary terms are added in their canonical casing, in dictionary
    order; section tokens follow verbatim. Duplicates are dropped by exact
    value, so "react" from the section and "React" from the dictionary
    both survive.
    """
    terms = dictionary if dictionary is not None else DEFAULT_SKILLS_DICTIONARY
    found: Dict[str, None] = {}

    text_lower = text.lower()
    for term in terms:
        if term.lower() in text_lower:
            found.setdefault(term, None)

    if skills_section:
        for token in SKILL_SEPARATORS.split(skills_section):
            token = trim(token)
            if min_token_length < len(token) < max_token_length:
                found.setdefault(token, None)

    return list(found)[:limit]


def split_blocks(section_text: str, min_length: int) -> List[List[str]]:
    """
    Split a section into blank-line separated blocks.

    Blocks whose trimmed text is not longer than min_length are dropped.
    Each kept block is returned as its non-blank, trimmed lines.
    """
    if not section_text:
        return []

    blocks = []
    for block in BLOCK_SEPARATOR.split(section_text):
        if len(trim(block)) <= min_length:
            continue
        blocks.append([trim(line) for line in block.split("\n") if trim(line)])
    return blocks


def assign_fields(lines: Sequence[str], fields: Sequence[Tuple[str, str]]) -> Dict[str, str]:
    """Map lines to field names by position, falling back to each field's default"""
    assigned = {}
    for position, (name, default) in enumerate(fields):
        assigned[name] = lines[position] if position < len(lines) and lines[position] else default
    return assigned


def extract_experience(section_text: str, min_length: int = 20) -> List[ExperienceEntry]:
    entries = []
    for lines in split_blocks(section_text, min_length):
        fields = assign_fields(lines, EXPERIENCE_FIELDS)
        entries.append(
            ExperienceEntry(
                company=fields["company"],
                position=fields["position"],
                description="\n".join(lines[len(EXPERIENCE_FIELDS):]),
            )
        )
    return entries


def extract_education(section_text: str, min_length: int = 10) -> List[EducationEntry]:
    entries = []
    for lines in split_blocks(section_text, min_length):
        fields = assign_fields(lines, EDUCATION_FIELDS)
        entries.append(EducationEntry(school=fields["school"], degree=fields["degree"]))
    return entries
