"""
Section header detection and section slicing over plain resume text.

Headers are found line by line: a short line that contains one of the
keywords of a section type is an anchor for that type. A section's text
runs from the line after its first anchor up to the next anchor of any
type, or to the end of the document.
"""
from dataclasses import dataclass
from typing import List, Mapping, Optional, Sequence, Tuple

from resumeforge.core.config import DEFAULT_SECTION_KEYWORDS

SUMMARY = "summary"
EXPERIENCE = "experience"
EDUCATION = "education"
SKILLS = "skills"

SECTION_TYPES = (SUMMARY, EXPERIENCE, EDUCATION, SKILLS)

# Header candidates are strictly longer than MIN and strictly shorter than MAX
HEADER_MIN_LENGTH = 2
HEADER_MAX_LENGTH = 40

BYTE_ORDER_MARK = "\ufeff"


@dataclass(frozen=True)
class SectionAnchor:
    type: str
    line_index: int
    header_text: str


def split_lines(text: str) -> List[str]:
    return text.split("\n")


def trim(value: str) -> str:
    """Strip surrounding whitespace and byte-order marks"""
    return value.strip().strip(BYTE_ORDER_MARK).strip()


def classify_header(line: str, section_keywords: Mapping[str, Sequence[str]]) -> Optional[str]:
    """Return the section type a line announces, or None.

    Types are tried in the mapping's order and the first hit wins, so a
    line is never classified twice.
    """
    candidate = trim(line).lower()
    if not HEADER_MIN_LENGTH < len(candidate) < HEADER_MAX_LENGTH:
        return None

    for section_type, keywords in section_keywords.items():
        if any(keyword.lower() in candidate for keyword in keywords):
            return section_type
    return None


def locate_sections(
    text: str,
    section_keywords: Optional[Mapping[str, Sequence[str]]] = None,
) -> List[SectionAnchor]:
    """Scan the document and return every header line as an anchor.

    Duplicates are kept; callers decide which anchor of a type to use.
    """
    keywords = section_keywords if section_keywords is not None else DEFAULT_SECTION_KEYWORDS
    anchors: List[SectionAnchor] = []

    for index, line in enumerate(split_lines(text)):
        section_type = classify_header(line, keywords)
        if section_type is not None:
            anchors.append(SectionAnchor(section_type, index, trim(line)))

    anchors.sort(key=lambda anchor: anchor.line_index)
    return anchors


def section_bounds(
    section_type: str,
    anchors: Sequence[SectionAnchor],
    line_count: int,
) -> Optional[Tuple[int, int]]:
    """Half-open line range [start, end) of a section's body, or None"""
    for position, anchor in enumerate(anchors):
        if anchor.type == section_type:
            start = anchor.line_index + 1
            if position + 1 < len(anchors):
                end = anchors[position + 1].line_index
            else:
                end = line_count
            return start, end
    return None


def slice_section(text: str, section_type: str, anchors: Sequence[SectionAnchor]) -> str:
    """Text of the first section of the given type, trimmed; "" if absent"""
    lines = split_lines(text)
    bounds = section_bounds(section_type, anchors, len(lines))
    if bounds is None:
        return ""

    start, end = bounds
    return trim("\n".join(lines[start:end]))
