"""
Resume Pydantic schemas
"""
from typing import Optional, List
from pydantic import BaseModel, Field


class PersonalInfo(BaseModel):
    """Contact details found anywhere in the document"""
    full_name: Optional[str] = Field(default=None, alias="fullName")
    email: Optional[str] = None
    phone: Optional[str] = None

    class Config:
        populate_by_name = True


class ExperienceEntry(BaseModel):
    """One job, read positionally from a paragraph of the experience section"""
    company: str
    position: str
    start_date: str = Field(default="", alias="startDate")
    end_date: str = Field(default="", alias="endDate")
    description: str = ""

    class Config:
        populate_by_name = True


class EducationEntry(BaseModel):
    """One degree, read positionally from a paragraph of the education section"""
    school: str
    degree: str
    start_date: str = Field(default="", alias="startDate")
    end_date: str = Field(default="", alias="endDate")

    class Config:
        populate_by_name = True


class ResumeRecord(BaseModel):
    """Structured resume returned by the parse endpoint"""
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo, alias="personalInfo")
    summary: str = ""
    experience: List[ExperienceEntry] = Field(default_factory=list)
    education: List[EducationEntry] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)

    class Config:
        populate_by_name = True

    def to_response(self) -> dict:
        """camelCase JSON body; personal-info keys that were not found are left out"""
        return self.model_dump(by_alias=True, exclude_none=True)


class PhotoUploadResponse(BaseModel):
    """Profile picture upload response"""
    image_url: str = Field(alias="imageUrl")

    class Config:
        populate_by_name = True
