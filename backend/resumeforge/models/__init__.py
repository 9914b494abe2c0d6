"""
Database models
"""
from resumeforge.models.user import User, PendingRegistration

__all__ = [
    "User",
    "PendingRegistration",
]
