"""
Authentication dependencies for FastAPI routes
"""
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
from jose import JWTError, jwt

from resumeforge.core.database import get_db
from resumeforge.core.config import settings
from resumeforge.core.exceptions import AuthenticationError
from resumeforge.models.user import User
from resumeforge.auth.service import get_user_by_email

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/auth/login")


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    """
    Get current authenticated user from JWT token
    """
    try:
        payload = jwt.decode(
            token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM]
        )
    except JWTError:
        raise AuthenticationError("Invalid token")

    email = payload.get("sub")
    if email is None or payload.get("type") != "access":
        raise AuthenticationError("Invalid token")

    user = get_user_by_email(db, email)
    if user is None:
        raise AuthenticationError("User not found")

    return user
