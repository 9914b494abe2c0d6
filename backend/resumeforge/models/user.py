"""
User models
"""
from sqlalchemy import Column, Integer, String, DateTime, Boolean
from sqlalchemy.sql import func
from resumeforge.core.database import Base


class User(Base):
    """Verified account"""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)
    role = Column(String(50), default="user", nullable=False)
    is_verified = Column(Boolean, default=False, nullable=False)

    # Password reset / late verification
    otp = Column(String(12))
    otp_expires = Column(DateTime)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())


class PendingRegistration(Base):
    """Registration waiting for its emailed OTP to be confirmed"""

    __tablename__ = "pending_registrations"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)
    otp = Column(String(12), nullable=False)
    otp_expires = Column(DateTime, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
