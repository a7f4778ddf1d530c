"""Tests for the validation rules."""

from datetime import date

import pytest

from birthday_tracker.services.validation import (
    INTEREST_ERROR,
    add_birthday_errors,
    is_duplicate_birthday_person,
    is_valid_birthday_name,
    is_valid_interest,
    is_valid_username,
    join_errors,
    parse_birth_date,
    sign_up_errors,
)


class TestUsername:
    @pytest.mark.parametrize("username", ["", "al ice", " alice", "a" * 101, ".", ".."])
    def test_invalid(self, username: str) -> None:
        assert not is_valid_username(username)

    @pytest.mark.parametrize("username", ["a", "alice", "a" * 100, "al_ice-99"])
    def test_valid(self, username: str) -> None:
        assert is_valid_username(username)


class TestBirthdayName:
    @pytest.mark.parametrize("name", ["", "   ", "a/b", "a\\b", "x" * 101, ".", " .. ", "..."])
    def test_invalid(self, name: str) -> None:
        assert not is_valid_birthday_name(name)

    @pytest.mark.parametrize("name", ["bob", "mary ann", "  bob  ", "x" * 100, "j.r.", ".bob"])
    def test_valid(self, name: str) -> None:
        assert is_valid_birthday_name(name)


class TestInterest:
    def test_whitespace_only_is_invalid(self) -> None:
        assert not is_valid_interest("   ")

    def test_length_counted_after_trimming(self) -> None:
        assert is_valid_interest("  " + "x" * 100 + "  ")
        assert not is_valid_interest("x" * 101)


class TestDuplicate:
    def test_case_insensitive(self) -> None:
        assert is_duplicate_birthday_person("BOB", ["alice", "bob"])
        assert not is_duplicate_birthday_person("bobby", ["bob"])
        assert not is_duplicate_birthday_person("bob", [])


class TestParseBirthDate:
    def test_iso_date(self) -> None:
        assert parse_birth_date("1990-05-04") == date(1990, 5, 4)

    def test_surrounding_whitespace_ignored(self) -> None:
        assert parse_birth_date(" 1990-05-04 ") == date(1990, 5, 4)

    @pytest.mark.parametrize("value", ["", "05/04/1990", "1990-13-01", "soon"])
    def test_not_a_date(self, value: str) -> None:
        assert parse_birth_date(value) is None

    @pytest.mark.parametrize("value", ["19900504", "1990-W18-5", "1990-124", "1990-05-04T00:00"])
    def test_other_iso_forms_rejected(self, value: str) -> None:
        assert parse_birth_date(value) is None


class TestSignUpErrors:
    def test_no_errors(self) -> None:
        assert sign_up_errors("alice", "pw", "pw", username_taken=False) == []

    def test_taken_username_reported_with_other_errors(self) -> None:
        errors = sign_up_errors("alice", "pw", "", username_taken=True)

        assert errors == [
            "Passwords must match",
            "alice already exists - please try a different name",
            "Password cannot be empty",
        ]

    def test_all_errors_in_order(self) -> None:
        errors = sign_up_errors("", "", "x", username_taken=False)

        assert join_errors(errors) == (
            "Name is required, "
            "Username must be between 1 and 100 characters and no spaces, "
            "Passwords must match, "
            "Password cannot be empty"
        )

    def test_username_of_only_dots(self) -> None:
        errors = sign_up_errors("..", "pw", "pw", username_taken=False)

        assert errors == ["Username cannot consist only of dots"]


class TestAddBirthdayErrors:
    def test_no_errors(self) -> None:
        assert add_birthday_errors("bob", "1990-05-04", ["chess"], existing_names=[]) == []

    def test_all_errors_collected(self) -> None:
        errors = add_birthday_errors("a/b", "", ["ok", " "], existing_names=["A/B"])

        assert errors == [
            "Date is required",
            "Name cannot contain / or \\",
            INTEREST_ERROR,
            "A/b already exists.",
        ]

    def test_name_too_long(self) -> None:
        errors = add_birthday_errors("x" * 101, "1990-05-04", [], existing_names=[])

        assert errors == ["Name must be between 1 and 100 characters"]

    def test_missing_name_and_bad_date(self) -> None:
        errors = add_birthday_errors("", "yesterday", [], existing_names=["bob"])

        assert errors == ["Name is required", "Date must be a valid date (YYYY-MM-DD)"]

    def test_name_of_only_dots(self) -> None:
        errors = add_birthday_errors("..", "1990-05-04", [], existing_names=[])

        assert errors == ["Name cannot consist only of dots"]
