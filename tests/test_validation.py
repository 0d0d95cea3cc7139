"""Tests for request field validation."""

import pytest

from src.errors import ViolationKind, violations_to_errors
from src.schemas.user import UserCreate
from src.services.validation import validate_user_fields


def kinds(**fields):
    violations = validate_user_fields(UserCreate(**fields))
    return {(v.field, v.kind) for v in violations}


def test_valid_request():
    assert kinds(name="João Silva", email="joao@email.com", age=30, phone="(11) 99999-9999") == set()


@pytest.mark.parametrize("name", ["Jo", "x" * 100])
def test_name_length_bounds_pass(name):
    assert kinds(name=name, email="a@example.com") == set()


@pytest.mark.parametrize("name", ["J", "x" * 101])
def test_name_length_out_of_bounds(name):
    assert kinds(name=name, email="a@example.com") == {("name", ViolationKind.LENGTH)}


@pytest.mark.parametrize("name", [None, "", "   "])
def test_name_required(name):
    assert kinds(name=name, email="a@example.com") == {("name", ViolationKind.REQUIRED)}


@pytest.mark.parametrize("email", ["user@localhost", "user@host.local"])
def test_email_syntax_only(email):
    """Test domains that are not publicly deliverable are still valid syntax."""
    assert kinds(name="João", email=email) == set()


def test_malformed_email():
    assert kinds(name="João", email="not-an-email") == {("email", ViolationKind.FORMAT)}


@pytest.mark.parametrize("email", [None, "", "  "])
def test_email_required(email):
    assert kinds(name="João", email=email) == {("email", ViolationKind.REQUIRED)}


def test_email_too_long():
    email = "a" * 60 + "@" + "b" * 86 + ".com"
    assert len(email) == 151
    assert ("email", ViolationKind.LENGTH) in kinds(name="João", email=email)


def test_phone_length():
    assert kinds(name="João", email="a@example.com", phone="1" * 20) == set()
    assert kinds(name="João", email="a@example.com", phone="1" * 21) == {
        ("phone", ViolationKind.LENGTH)
    }


def test_age_is_unconstrained():
    assert kinds(name="João", email="a@example.com", age=-3) == set()
    assert kinds(name="João", email="a@example.com", age=10_000) == set()


def test_all_violations_collected():
    violations = validate_user_fields(UserCreate(name="J", email="bad", phone="1" * 30))
    assert [v.field for v in violations] == ["name", "email", "phone"]
    errors = violations_to_errors(violations)
    assert set(errors) == {"name", "email", "phone"}
    assert "between 2 and 100" in errors["name"]
