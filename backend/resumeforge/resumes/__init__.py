"""
Rule-based resume text structuring: section anchors, slices and field extractors
"""
from resumeforge.resumes.parser import ResumeParser, assemble_resume

__all__ = ["ResumeParser", "assemble_resume"]
