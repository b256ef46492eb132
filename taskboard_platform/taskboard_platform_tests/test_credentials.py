import pytest

from taskboard_platform.taskboard_platform.taskboard_service.errors import (
    DuplicateEmail,
    InvalidCredentials,
    UserNotFound,
    ValidationError,
)
from taskboard_platform.taskboard_platform.taskboard_service.models import User


def test_register_persists_user_with_hashed_password(credentials, db):
    user_id = credentials.register("a@x.com", "pw1")

    user = db.query(User).filter(User.id == user_id).first()
    assert user is not None
    assert user.email == "a@x.com"
    assert user.password_hash != "pw1"
    assert credentials.hasher.verify("pw1", user.password_hash)


def test_register_same_email_twice_fails(credentials, db):
    credentials.register("a@x.com", "pw1")

    with pytest.raises(DuplicateEmail):
        credentials.register("a@x.com", "another")

    assert db.query(User).filter(User.email == "a@x.com").count() == 1


@pytest.mark.parametrize("email,password", [("", "pw"), ("   ", "pw"), ("a@x.com", "")])
def test_register_requires_email_and_password(credentials, email, password):
    with pytest.raises(ValidationError):
        credentials.register(email, password)


def test_find_by_email_and_id(credentials):
    user_id = credentials.register("a@x.com", "pw1")

    assert credentials.find_by_email("a@x.com").id == user_id
    assert credentials.find_by_id(user_id).email == "a@x.com"
    assert credentials.find_by_email("nobody@x.com") is None
    assert credentials.find_by_id("7d1b6a3c-0000-4000-8000-000000000000") is None


def test_find_by_id_with_malformed_id_returns_none(credentials):
    credentials.register("a@x.com", "pw1")
    assert credentials.find_by_id("not-an-id") is None


def test_check_credentials(credentials):
    user_id = credentials.register("a@x.com", "pw1")

    assert credentials.check_credentials("a@x.com", "pw1").id == user_id

    with pytest.raises(InvalidCredentials):
        credentials.check_credentials("a@x.com", "wrong")

    with pytest.raises(UserNotFound):
        credentials.check_credentials("nobody@x.com", "pw1")


def test_register_reports_unique_index_violation_as_duplicate(credentials, db, monkeypatch):
    credentials.register("a@x.com", "pw1")

    # Simulate a concurrent registration that passed the pre-check
    monkeypatch.setattr(credentials, "find_by_email", lambda email: None)

    with pytest.raises(DuplicateEmail):
        credentials.register("a@x.com", "pw2")

    assert db.query(User).filter(User.email == "a@x.com").count() == 1
