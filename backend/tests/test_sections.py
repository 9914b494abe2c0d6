from resumeforge.resumes.sections import (
    SECTION_TYPES,
    SectionAnchor,
    classify_header,
    locate_sections,
    section_bounds,
    slice_section,
)
from resumeforge.core.config import DEFAULT_SECTION_KEYWORDS


SAMPLE = "\n".join(
    [
        "Jane Smith",                # 0
        "jane@example.com",          # 1
        "Professional Summary",      # 2
        "Backend engineer.",         # 3
        "Work Experience",           # 4
        "Acme Corp",                 # 5
        "Engineer",                  # 6
        "Education",                 # 7
        "State University",          # 8
        "Technical Skills",          # 9
        "Python, SQL",               # 10
    ]
)


def test_locate_finds_every_header_in_line_order():
    anchors = locate_sections(SAMPLE)

    assert anchors == [
        SectionAnchor("summary", 2, "Professional Summary"),
        SectionAnchor("experience", 4, "Work Experience"),
        SectionAnchor("education", 7, "Education"),
        SectionAnchor("skills", 9, "Technical Skills"),
    ]
    assert all(anchor.type in SECTION_TYPES for anchor in anchors)


def test_header_length_bounds_are_exclusive():
    assert classify_header("cv", DEFAULT_SECTION_KEYWORDS) is None
    assert classify_header("  SKILLS  ", DEFAULT_SECTION_KEYWORDS) == "skills"
    long_line = "I have plenty of experience in many different fields"
    assert len(long_line) >= 40
    assert classify_header(long_line, DEFAULT_SECTION_KEYWORDS) is None


def test_first_matching_type_wins():
    # "profile" (summary) and "experience" both appear; summary is tried first
    assert classify_header("Profile & Experience", DEFAULT_SECTION_KEYWORDS) == "summary"
    # "academic" belongs to education even though "skills" is present too
    assert classify_header("Academic skills", DEFAULT_SECTION_KEYWORDS) == "education"


def test_duplicate_anchors_are_all_reported():
    text = "Experience\nA\nExperience\nB"
    anchors = locate_sections(text)
    assert [a.line_index for a in anchors] == [0, 2]
    assert {a.type for a in anchors} == {"experience"}


def test_no_headers_gives_no_anchors_and_empty_slices():
    text = "Just a line\nanother line here\n"
    anchors = locate_sections(text)

    assert anchors == []
    for section_type in SECTION_TYPES:
        assert slice_section(text, section_type, anchors) == ""


def test_slice_excludes_header_and_stops_at_next_anchor():
    anchors = locate_sections(SAMPLE)

    assert slice_section(SAMPLE, "summary", anchors) == "Backend engineer."
    assert slice_section(SAMPLE, "experience", anchors) == "Acme Corp\nEngineer"
    assert slice_section(SAMPLE, "skills", anchors) == "Python, SQL"


def test_slice_never_crosses_following_anchor():
    anchors = locate_sections(SAMPLE)
    lines = SAMPLE.split("\n")

    for current, following in zip(anchors, anchors[1:]):
        start, end = section_bounds(current.type, anchors, len(lines))
        assert end <= following.line_index
        body = slice_section(SAMPLE, current.type, anchors)
        for line in lines[following.line_index:]:
            if line.strip():
                assert line not in body.split("\n")


def test_same_type_duplicate_truncates_first_slice():
    text = "Experience\nFirst job\nExperience\nSecond job\nEducation\nSchool"
    anchors = locate_sections(text)

    assert slice_section(text, "experience", anchors) == "First job"


def test_custom_keyword_tables():
    keywords = {"skills": ["toolbox"]}
    anchors = locate_sections("Name\nMy Toolbox\nhammer, saw", keywords)

    assert anchors == [SectionAnchor("skills", 1, "My Toolbox")]
    assert slice_section("Name\nMy Toolbox\nhammer, saw", "skills", anchors) == "hammer, saw"


def test_section_bounds_missing_type():
    assert section_bounds("education", [SectionAnchor("skills", 0, "Skills")], 3) is None


def test_byte_order_mark_before_header():
    anchors = locate_sections("\ufeffSkills\nPython, SQL")

    assert anchors == [SectionAnchor("skills", 0, "Skills")]
    assert slice_section("\ufeffSkills\nPython, SQL", "skills", anchors) == "Python, SQL"
