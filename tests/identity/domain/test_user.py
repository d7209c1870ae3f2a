"""Tests for the User aggregate root."""

import pytest
from protean.exceptions import ValidationError

from storefront.identity.user.events import PasswordChanged, UserDetailsUpdated, UserRegistered
from storefront.identity.user.user import User, UserRole


def _user(**overrides):
    data = {"username": "janesmith", "email": "jane@example.com", "password": "Passw0rd!", "name": "Jane Smith"}
    data.update(overrides)
    return User.create(**data)


class TestUserCreation:
    def test_create_user(self):
        user = _user()
        assert user.username == "janesmith"
        assert user.email == "jane@example.com"
        assert user.name == "Jane Smith"
        assert user.role == UserRole.CUSTOMER.value
        assert user.is_admin is False

    def test_password_is_never_stored_in_plain_text(self):
        user = _user()
        assert user.password_hash != "Passw0rd!"
        assert user.password_hash.startswith("$2")

    def test_same_password_hashes_differently(self):
        assert _user().password_hash != _user().password_hash

    def test_email_is_normalized(self):
        assert _user(email="Jane@Example.COM").email == "jane@example.com"

    def test_invalid_email_is_rejected(self):
        with pytest.raises(ValidationError) as exc:
            _user(email="not-an-email")
        assert "email" in exc.value.messages

    def test_short_username_is_rejected(self):
        with pytest.raises(ValidationError):
            _user(username="jo")

    def test_unknown_role_is_rejected(self):
        with pytest.raises(ValidationError):
            _user(role="superuser")

    def test_admin_role(self):
        assert _user(role="admin").is_admin is True

    def test_create_raises_event_without_password(self):
        event = _user()._events[0]
        assert isinstance(event, UserRegistered)
        assert event.username == "janesmith"
        assert "password" not in event.to_dict()


class TestPasswords:
    def test_check_password(self):
        user = _user()
        assert user.check_password("Passw0rd!") is True
        assert user.check_password("wrong-pass1!") is False

    def test_empty_password_never_matches(self):
        assert _user().check_password("") is False


class TestUserUpdate:
    def test_update_name(self):
        user = _user()
        user._events.clear()

        user.update_details(name="Jane Q. Smith")

        assert user.name == "Jane Q. Smith"
        assert user.username == "janesmith"
        assert isinstance(user._events[-1], UserDetailsUpdated)

    def test_update_password_rehashes(self):
        user = _user()
        user._events.clear()
        old_hash = user.password_hash

        user.update_details(password="N3w-secret")

        assert user.password_hash != old_hash
        assert user.check_password("N3w-secret")
        assert any(isinstance(e, PasswordChanged) for e in user._events)

    def test_update_email_is_validated(self):
        with pytest.raises(ValidationError):
            _user().update_details(email="broken@")

    def test_password_hash_cannot_be_set_directly(self):
        with pytest.raises(ValidationError):
            _user().update_details(password_hash="x")
