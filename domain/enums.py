"""
Domain enums for the Daily Diet application.
"""

import enum


class SessionFailureReason(str, enum.Enum):
    """Why a session token could not be resolved to a user"""

    MISSING = "missing"
    UNKNOWN = "unknown"
