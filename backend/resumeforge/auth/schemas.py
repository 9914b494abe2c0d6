"""
Authentication Pydantic schemas
"""
from typing import Optional
from pydantic import BaseModel, EmailStr, Field
from datetime import datetime


class RegisterRequest(BaseModel):
    """Registration request schema"""
    name: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=6)


class VerifyOTPRequest(BaseModel):
    """OTP confirmation schema"""
    email: EmailStr
    otp: str


class EmailRequest(BaseModel):
    """Request carrying only an email (resend OTP, forgot password)"""
    email: EmailStr


class LoginRequest(BaseModel):
    """Login request schema"""
    email: EmailStr
    password: str


class ResetPasswordRequest(BaseModel):
    """Password reset schema"""
    email: EmailStr
    otp: str
    new_password: str = Field(..., min_length=6, alias="newPassword")

    class Config:
        populate_by_name = True


class UserSummary(BaseModel):
    """User fields embedded in token responses"""
    id: int
    name: str
    email: EmailStr
    role: str

    class Config:
        from_attributes = True


class UserResponse(UserSummary):
    """Full user response schema"""
    is_verified: bool = Field(alias="isVerified")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")

    class Config:
        from_attributes = True
        populate_by_name = True


class TokenResponse(BaseModel):
    """Token response schema"""
    success: bool = True
    token: str
    user: UserSummary


class OTPSentResponse(BaseModel):
    """Response after an OTP email went out"""
    success: bool = True
    message: str
    email: Optional[str] = None


class MessageResponse(BaseModel):
    """Plain status message"""
    success: bool = True
    message: str


class CurrentUserResponse(BaseModel):
    """Current user wrapper"""
    success: bool = True
    data: UserResponse
