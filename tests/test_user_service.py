import pytest

from core.exceptions import DuplicateUserError, InvalidCredentialsError
from core.security import verify_password
from schemas.user_schema import UserCreate
from services.directory import SqlUserDirectory
from services.user_service import UserService


def _new_user(**overrides):
    data = dict(username="Lena", email="lena@example.com", password="s3cret", first_name="Lena")
    data.update(overrides)
    return UserCreate(**data)


def test_register_hashes_password(db):
    user = UserService(db).register_user(_new_user())

    assert user.id > 0
    assert user.password_hash != "s3cret"
    assert verify_password("s3cret", user.password_hash)


def test_register_rejects_duplicate_username(db, users):
    with pytest.raises(DuplicateUserError):
        UserService(db).register_user(_new_user(username="Charles"))


def test_register_rejects_duplicate_email(db, users):
    with pytest.raises(DuplicateUserError) as exc:
        UserService(db).register_user(_new_user(email="rick@example.com"))
    assert exc.value.status_code == 400


def test_authenticate(db, users):
    service = UserService(db)
    assert service.authenticate_user("Charles", "password").username == "Charles"
    assert service.authenticate_user("Charles", "wrong") is None
    assert service.authenticate_user("James", "password") is None


def test_authenticate_rejects_blank_input(db, users):
    with pytest.raises(InvalidCredentialsError):
        UserService(db).authenticate_user("   ", "password")
    with pytest.raises(InvalidCredentialsError):
        UserService(db).authenticate_user("Charles", "")


def test_directory_sees_registered_users(db, session_factory):
    directory = SqlUserDirectory(session_factory)
    assert directory.exists("Lena") is False

    UserService(db).register_user(_new_user())
    assert directory.exists("Lena") is True
