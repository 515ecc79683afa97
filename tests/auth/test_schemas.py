"""Tests for authentication Pydantic schemas."""

import pytest
from pydantic import ValidationError

from realty_core.auth.schemas import UserCreate, UserLogin, UserResponse


class TestUserCreate:

    def test_valid(self):
        data = UserCreate(username="agent_007", password="SecurePass123")
        assert data.username == "agent_007"

    @pytest.mark.parametrize("username", ["ab", "has space", "semi;colon", ""])
    def test_invalid_username(self, username):
        with pytest.raises(ValidationError):
            UserCreate(username=username, password="SecurePass123")

    @pytest.mark.parametrize("password", ["short1", "NoDigitsHere", "1234567890"])
    def test_weak_password(self, password):
        with pytest.raises(ValidationError):
            UserCreate(username="agent", password=password)


class TestUserLogin:

    def test_no_strength_rules(self):
        assert UserLogin(username="a", password="b").password == "b"

    def test_empty_rejected(self):
        with pytest.raises(ValidationError):
            UserLogin(username="", password="")


class TestUserResponse:

    def test_ignores_password_hash(self):
        user = UserResponse.model_validate({
            "id": "u-1",
            "username": "agent",
            "created_at": "2026-10-19T00:00:00Z",
            "password_hash": "secret",
        })
        assert "password_hash" not in user.model_dump()
