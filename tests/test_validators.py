"""Tests for utils/validators.py — username and email format checks."""

import pytest

from profile_lookup.utils.validators import is_valid_email, is_valid_username


class TestUsername:
    @pytest.mark.parametrize(
        "username",
        ["steven", "abc", "a" * 16, "user_01", "my-name", "___", "0123456789"],
    )
    def test_valid(self, username):
        assert is_valid_username(username) is True

    @pytest.mark.parametrize(
        "username",
        [
            "steven xxx",
            "ab",
            "a" * 17,
            "Steven",
            "user.name",
            "",
            "steven\n",
            "naïve",
        ],
    )
    def test_invalid(self, username):
        assert is_valid_username(username) is False

    def test_non_string_is_invalid(self):
        assert is_valid_username(None) is False
        assert is_valid_username(12345) is False


class TestEmail:
    @pytest.mark.parametrize(
        "email",
        ["1234567@qq.com", "a@b.c", "First_Last@mail.example.org", "x-y@host-1.co.uk"],
    )
    def test_valid(self, email):
        assert is_valid_email(email) is True

    @pytest.mark.parametrize(
        "email",
        [
            "test.com",
            "user@localhost",
            "user@@qq.com",
            "first.last@qq.com",
            "user@qq.",
            "@qq.com",
            "user@qq.com\n",
            "",
        ],
    )
    def test_invalid(self, email):
        assert is_valid_email(email) is False

    def test_non_string_is_invalid(self):
        assert is_valid_email(None) is False
