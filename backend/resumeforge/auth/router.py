"""
Authentication routes
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import structlog

from resumeforge.core.database import get_db
from resumeforge.auth.dependencies import get_current_user
from resumeforge.auth.service import (
    authenticate_user,
    confirm_registration,
    issue_token,
    request_password_reset,
    resend_otp,
    reset_password,
    start_registration,
)
from resumeforge.auth.schemas import (
    CurrentUserResponse,
    EmailRequest,
    LoginRequest,
    MessageResponse,
    OTPSentResponse,
    RegisterRequest,
    ResetPasswordRequest,
    TokenResponse,
    UserResponse,
    UserSummary,
    VerifyOTPRequest,
)
from resumeforge.models.user import User

router = APIRouter(prefix="/api/auth", tags=["Authentication"])
logger = structlog.get_logger()


def _token_response(user: User) -> TokenResponse:
    return TokenResponse(token=issue_token(user), user=UserSummary.model_validate(user))


@router.post("/register", response_model=OTPSentResponse)
def register(
    payload: RegisterRequest,
    db: Session = Depends(get_db),
):
    """Start a registration and email the verification OTP"""
    pending = start_registration(db, payload.name, payload.email, payload.password)
    return OTPSentResponse(
        message="OTP sent to email. Please verify to complete registration.",
        email=pending.email,
    )


@router.post("/verify-otp", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
def verify_otp(
    payload: VerifyOTPRequest,
    db: Session = Depends(get_db),
):
    """Confirm the OTP, create the account and log it in"""
    user = confirm_registration(db, payload.email, payload.otp)
    return _token_response(user)


@router.post("/resend-otp", response_model=MessageResponse)
def resend(
    payload: EmailRequest,
    db: Session = Depends(get_db),
):
    """Send a new registration OTP"""
    resend_otp(db, payload.email)
    return MessageResponse(message="OTP resent to email")


@router.post("/login", response_model=TokenResponse)
def login(
    credentials: LoginRequest,
    db: Session = Depends(get_db),
):
    """Authenticate user and return a token"""
    user = authenticate_user(db, credentials.email, credentials.password)
    logger.info("user_logged_in", user_id=user.id, email=user.email)
    return _token_response(user)


@router.post("/forgot-password", response_model=MessageResponse)
def forgot_password(
    payload: EmailRequest,
    db: Session = Depends(get_db),
):
    """Email a password reset OTP"""
    request_password_reset(db, payload.email)
    return MessageResponse(message="OTP sent to email for password reset")


@router.post("/reset-password", response_model=MessageResponse)
def reset(
    payload: ResetPasswordRequest,
    db: Session = Depends(get_db),
):
    """Set a new password using the reset OTP"""
    reset_password(db, payload.email, payload.otp, payload.new_password)
    return MessageResponse(message="Password reset successful. You can now login.")


@router.get("/me", response_model=CurrentUserResponse)
def get_current_user_info(
    current_user: User = Depends(get_current_user),
):
    """Get current user information"""
    return CurrentUserResponse(data=UserResponse.model_validate(current_user))
