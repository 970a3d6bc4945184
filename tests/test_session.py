"""
Tests for registration and explicit session resolution.
"""

from sqlalchemy.orm import Session

from test_fixtures import db_session
from services.session_service import SessionService
from domain.enums import SessionFailureReason


def test_register_user_generates_unique_tokens(db_session: Session):
    first = SessionService.register_user(db_session, "John Doe", "john@example.com")
    second = SessionService.register_user(db_session, "John Doe", "john@example.com")

    assert first.session_id
    assert second.session_id
    assert first.session_id != second.session_id
    assert first.id != second.id


def test_resolve_session_authenticated(db_session: Session):
    user = SessionService.register_user(db_session, "Jane", "jane@example.com")

    result = SessionService.resolve_session(db_session, user.session_id)

    assert result.authenticated
    assert result.user.id == user.id
    assert result.failure is None


def test_resolve_session_missing_token(db_session: Session):
    for token in (None, ""):
        result = SessionService.resolve_session(db_session, token)
        assert not result.authenticated
        assert result.failure is SessionFailureReason.MISSING


def test_resolve_session_unknown_token(db_session: Session):
    SessionService.register_user(db_session, "Jane", "jane@example.com")

    result = SessionService.resolve_session(db_session, "not-a-session")

    assert not result.authenticated
    assert result.user is None
    assert result.failure is SessionFailureReason.UNKNOWN
