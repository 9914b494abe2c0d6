"""
Application configuration using Pydantic Settings
"""
from typing import List, Optional, Dict
from pydantic_settings import BaseSettings
from pydantic import Field


DEFAULT_SECTION_KEYWORDS: Dict[str, List[str]] = {
    "summary": ["summary", "profile", "objective", "about me", "professional summary"],
    "experience": ["experience", "work history", "employment", "work experience", "professional experience"],
    "education": ["education", "academic", "qualifications", "credentials", "academic background"],
    "skills": [
        "skills", "technologies", "technical skills", "core competencies",
        "expertise", "technical proficiency",
    ],
}

DEFAULT_SKILLS_DICTIONARY: List[str] = [
    "React", "JavaScript", "Python", "Java", "Node.js", "CSS", "HTML", "SQL",
    "Git", "AWS", "Docker", "Kubernetes", "C++", "C#", "Go", "Rust",
    "TypeScript", "Angular", "Vue", "MongoDB", "PostgreSQL", "Express",
    "Django", "Flask", "Spring Boot",
]


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Application
    APP_NAME: str = "ResumeForge"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    SECRET_KEY: str = Field(default="change-this-in-production-min-32-characters-required", min_length=32)
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 30

    # Database
    DATABASE_URL: str = "sqlite:///./resumeforge.db"
    DATABASE_POOL_SIZE: int = 10
    DATABASE_MAX_OVERFLOW: int = 20

    # File Upload
    MAX_UPLOAD_SIZE_MB: int = 10
    ALLOWED_RESUME_EXTENSIONS: List[str] = ["pdf", "docx"]
    ALLOWED_IMAGE_EXTENSIONS: List[str] = ["png", "jpg", "jpeg", "gif", "webp"]
    UPLOAD_DIR: str = "./uploads"

    # Resume parser tables and thresholds
    SECTION_KEYWORDS: Dict[str, List[str]] = DEFAULT_SECTION_KEYWORDS
    SKILLS_DICTIONARY: List[str] = DEFAULT_SKILLS_DICTIONARY
    MAX_SKILLS: int = 20
    SKILL_TOKEN_MIN_LENGTH: int = 2
    SKILL_TOKEN_MAX_LENGTH: int = 25
    EXPERIENCE_MIN_BLOCK_LENGTH: int = 20
    EDUCATION_MIN_BLOCK_LENGTH: int = 10
    SCANNED_TEXT_THRESHOLD: int = 50  # characters of extracted text

    # One-time passwords
    OTP_LENGTH: int = 6
    OTP_EXPIRE_MINUTES: int = 10

    # Email
    EMAIL_BACKEND: str = "smtp"  # "smtp" or "console"
    SMTP_HOST: str = "smtp.gmail.com"
    SMTP_PORT: int = 465
    SMTP_USE_TLS: bool = False  # STARTTLS instead of implicit SSL
    SMTP_USER: Optional[str] = None
    SMTP_PASSWORD: Optional[str] = None
    SMTP_FROM_NAME: str = "Resume Builder"
    SMTP_FROM_EMAIL: Optional[str] = None  # defaults to SMTP_USER
    SMTP_TIMEOUT: int = 15

    # CORS
    CORS_ORIGINS: List[str] = ["*"]
    CORS_ALLOW_CREDENTIALS: bool = False

    # Observability
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS if origin.strip()]

    @property
    def max_upload_size_bytes(self) -> int:
        return self.MAX_UPLOAD_SIZE_MB * 1024 * 1024

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
