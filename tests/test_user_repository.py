from datetime import datetime, timezone

import pytest
from jose import jwt

from villa_api.config import settings
from villa_api.core.exceptions import ConflictError
from villa_api.models.user import LocalUser, UserRole
from villa_api.repository.user_repository import UserRepository
from villa_api.schemas.user import LoginRequestDTO, RegistrationRequestDTO


def _register(repo, username="alice", password="secret", role=UserRole.customer):
    return repo.register(RegistrationRequestDTO(username=username, name="Alice", password=password, role=role))


class TestIsUniqueUser:
    def test_unknown_usernames_are_unique(self, db_session):
        repo = UserRepository(db_session)
        for username in ("alice", "bob", "carol"):
            assert repo.is_unique_user(username)

    def test_registered_username_is_not_unique(self, db_session):
        repo = UserRepository(db_session)
        _register(repo)
        assert not repo.is_unique_user("alice")

    def test_comparison_ignores_case(self, db_session):
        repo = UserRepository(db_session)
        _register(repo)
        assert not repo.is_unique_user("ALICE")
        assert repo.is_unique_user("alice2")


class TestLogin:
    def test_valid_credentials_issue_token_with_claims(self, db_session):
        repo = UserRepository(db_session)
        _register(repo)

        response = repo.login(LoginRequestDTO(username="alice", password="secret"))

        assert response.token
        assert response.user.username == "alice"
        assert response.user.role == UserRole.customer
        claims = jwt.decode(response.token, settings.secret_key, algorithms=[settings.algorithm])
        assert claims["sub"] == "alice"
        assert claims["role"] == "customer"
        days_left = (claims["exp"] - datetime.now(timezone.utc).timestamp()) / 86400
        assert 6.99 < days_left <= 7

    def test_login_is_case_insensitive_on_username(self, db_session):
        repo = UserRepository(db_session)
        _register(repo)
        assert repo.login(LoginRequestDTO(username="Alice", password="secret")).token

    @pytest.mark.parametrize("username,password", [("alice", "wrong"), ("nobody", "secret")])
    def test_mismatch_returns_empty_token_and_no_user(self, db_session, username, password):
        repo = UserRepository(db_session)
        _register(repo)

        response = repo.login(LoginRequestDTO(username=username, password=password))

        assert response.token == ""
        assert response.user is None


class TestRegister:
    def test_register_then_login(self, db_session):
        repo = UserRepository(db_session)
        user = _register(repo, username="bob", password="pw", role=UserRole.admin)

        assert user.id
        assert user.role == UserRole.admin
        assert repo.login(LoginRequestDTO(username="bob", password="pw")).user.id == user.id

    def test_password_is_stored_hashed(self, db_session):
        repo = UserRepository(db_session)
        _register(repo)
        stored = db_session.query(LocalUser).filter(LocalUser.username == "alice").one()
        assert stored.password_hash != "secret"

    def test_duplicate_username_is_a_conflict(self, db_session):
        repo = UserRepository(db_session)
        _register(repo)
        with pytest.raises(ConflictError):
            _register(repo, username="ALICE")
        assert db_session.query(LocalUser).count() == 1
