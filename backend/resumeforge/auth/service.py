"""
Authentication service layer
"""
import secrets
from datetime import datetime, timedelta
from typing import Optional
from sqlalchemy.orm import Session
from jose import jwt
from passlib.context import CryptContext
import structlog

from resumeforge.core.config import settings
from resumeforge.core.exceptions import (
    AuthenticationError,
    BadRequestError,
    EmailDeliveryError,
    NotFoundError,
)
from resumeforge.models.user import User, PendingRegistration
from resumeforge.notifications.mailer import send_email

logger = structlog.get_logger()

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash"""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password"""
    return pwd_context.hash(password)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create JWT access token"""
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.utcnow() + expires_delta
    else:
        expire = datetime.utcnow() + timedelta(
            minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES
        )

    to_encode.update({"exp": expire, "type": "access"})
    encoded_jwt = jwt.encode(
        to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM
    )
    return encoded_jwt


def issue_token(user: User) -> str:
    return create_access_token(data={"sub": user.email, "user_id": user.id})


def generate_otp() -> str:
    """Random numeric code of OTP_LENGTH digits, never starting with 0"""
    low = 10 ** (settings.OTP_LENGTH - 1)
    return str(low + secrets.randbelow(9 * low))


def otp_expiry() -> datetime:
    return datetime.utcnow() + timedelta(minutes=settings.OTP_EXPIRE_MINUTES)


def otp_matches(expected: Optional[str], received: str) -> bool:
    return expected is not None and expected.strip() == received.strip()


def otp_expired(expires: Optional[datetime]) -> bool:
    return expires is None or expires < datetime.utcnow()


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    """Get user by email"""
    return db.query(User).filter(User.email == email).first()


def get_user_by_id(db: Session, user_id: int) -> Optional[User]:
    """Get user by ID"""
    return db.query(User).filter(User.id == user_id).first()


def get_pending_registration(db: Session, email: str) -> Optional[PendingRegistration]:
    return db.query(PendingRegistration).filter(PendingRegistration.email == email).first()


def purge_expired_registrations(db: Session) -> int:
    """Delete registrations whose OTP can no longer be confirmed"""
    removed = (
        db.query(PendingRegistration)
        .filter(PendingRegistration.otp_expires < datetime.utcnow())
        .delete(synchronize_session=False)
    )
    db.commit()
    if removed:
        logger.info("expired_registrations_purged", count=removed)
    return removed


def start_registration(db: Session, name: str, email: str, password: str) -> PendingRegistration:
    """Store (or overwrite) a pending registration and email its OTP"""
    if get_user_by_email(db, email):
        raise BadRequestError("User already exists")

    purge_expired_registrations(db)

    otp = generate_otp()
    pending = get_pending_registration(db, email)
    if pending is None:
        pending = PendingRegistration(email=email)
        db.add(pending)
    pending.name = name
    pending.hashed_password = get_password_hash(password)
    pending.otp = otp
    pending.otp_expires = otp_expiry()
    db.commit()
    db.refresh(pending)

    try:
        send_email(
            pending.email,
            "Resume Builder - Verify Your Email",
            f"Your OTP for Resume Builder registration is: {otp}\n\n"
            f"It expires in {settings.OTP_EXPIRE_MINUTES} minutes.",
        )
    except EmailDeliveryError:
        db.delete(pending)
        db.commit()
        raise EmailDeliveryError("Email could not be sent. Please try again.")

    logger.info("registration_started", email=email)
    return pending


def confirm_registration(db: Session, email: str, otp: str) -> User:
    """Turn a pending registration into a verified user"""
    pending = get_pending_registration(db, email)
    if pending is None:
        raise BadRequestError("Invalid or expired registration session. Please register again.")

    if not otp_matches(pending.otp, otp):
        logger.warning("otp_mismatch", email=email)
        raise BadRequestError("Invalid OTP")

    if otp_expired(pending.otp_expires):
        raise BadRequestError("OTP expired. Please register again.")

    # The pending password is already hashed; copy it as-is
    user = User(
        name=pending.name,
        email=pending.email,
        hashed_password=pending.hashed_password,
        role="user",
        is_verified=True,
    )
    db.add(user)
    db.delete(pending)
    db.commit()
    db.refresh(user)

    logger.info("user_created", user_id=user.id, email=email)
    return user


def resend_otp(db: Session, email: str) -> None:
    """Issue a fresh registration OTP to a pending or unverified account"""
    subject = "Resume Builder - Resend OTP"

    pending = get_pending_registration(db, email)
    if pending is not None:
        pending.otp = generate_otp()
        pending.otp_expires = otp_expiry()
        db.commit()
        send_email(
            email,
            subject,
            f"Your new OTP for Resume Builder registration is: {pending.otp}\n\n"
            f"It expires in {settings.OTP_EXPIRE_MINUTES} minutes.",
        )
        return

    user = get_user_by_email(db, email)
    if user is not None and not user.is_verified:
        user.otp = generate_otp()
        user.otp_expires = otp_expiry()
        db.commit()
        send_email(
            email,
            subject,
            f"Your new OTP for Resume Builder registration is: {user.otp}\n\n"
            f"It expires in {settings.OTP_EXPIRE_MINUTES} minutes.",
        )
        return

    raise BadRequestError("Registration session expired or user not found. Please register again.")


def authenticate_user(db: Session, email: str, password: str) -> User:
    """Authenticate user with email and password"""
    user = get_user_by_email(db, email)
    if not user:
        raise AuthenticationError("This email is not registered")
    if not verify_password(password, user.hashed_password):
        logger.warning("failed_login_attempt", email=email)
        raise AuthenticationError("Invalid password")
    if not user.is_verified:
        raise AuthenticationError(
            "Email not verified. Please verify your email.",
            details={"isVerified": False},
        )
    return user


def request_password_reset(db: Session, email: str) -> None:
    """Store a reset OTP on the user and email it"""
    user = get_user_by_email(db, email)
    if not user:
        raise NotFoundError("User")

    user.otp = generate_otp()
    user.otp_expires = otp_expiry()
    db.commit()

    try:
        send_email(
            user.email,
            "Resume Builder - Password Reset OTP",
            f"Your OTP for password reset is: {user.otp}\n\n"
            f"It expires in {settings.OTP_EXPIRE_MINUTES} minutes.",
        )
    except EmailDeliveryError:
        user.otp = None
        user.otp_expires = None
        db.commit()
        raise

    logger.info("password_reset_requested", user_id=user.id)


def reset_password(db: Session, email: str, otp: str, new_password: str) -> User:
    """Replace the password once the reset OTP checks out"""
    user = get_user_by_email(db, email)
    if not user:
        raise NotFoundError("User")

    if not otp_matches(user.otp, otp):
        raise BadRequestError("Invalid OTP")

    if otp_expired(user.otp_expires):
        raise BadRequestError("OTP expired")

    user.hashed_password = get_password_hash(new_password)
    user.otp = None
    user.otp_expires = None
    db.commit()

    logger.info("password_reset", user_id=user.id)
    return user
