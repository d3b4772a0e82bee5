"""
Tests for request validators.
"""

import pytest

from utils.result import ErrorKind
from utils.schemas import LoginRequest, ReportRequest, SignupRequest
from utils.validators import validate_login, validate_report, validate_signup

from conftest import report_body, signup_body


class TestValidateSignup:
    def test_valid_payload(self):
        result = validate_signup(SignupRequest(**signup_body()))
        assert result.ok

    def test_password_mismatch_reported_first(self):
        result = validate_signup(SignupRequest(**signup_body(confirmPassword="other", email="bad")))
        assert not result.ok
        assert result.kind is ErrorKind.VALIDATION
        assert result.message == "Passwords do not match"

    @pytest.mark.parametrize("field", ["fullName", "username", "phone", "email", "location"])
    def test_missing_field(self, field):
        body = signup_body()
        del body[field]
        result = validate_signup(SignupRequest(**body))
        assert not result.ok
        assert result.message == f"{field} is required"

    def test_blank_field(self):
        result = validate_signup(SignupRequest(**signup_body(location="   ")))
        assert result.message == "location is required"

    def test_missing_both_passwords(self):
        body = signup_body()
        del body["password"], body["confirmPassword"]
        result = validate_signup(SignupRequest(**body))
        assert result.message == "password is required"

    @pytest.mark.parametrize("phone", ["12345", "+1234567890123456", "phone12345678", "+1 234 567 8901", "+12345678901\n"])
    def test_bad_phone(self, phone):
        result = validate_signup(SignupRequest(**signup_body(phone=phone)))
        assert result.kind is ErrorKind.VALIDATION
        assert "phone" in result.message

    @pytest.mark.parametrize("phone", ["1234567890", "+123456789012345"])
    def test_phone_length_bounds(self, phone):
        assert validate_signup(SignupRequest(**signup_body(phone=phone))).ok

    @pytest.mark.parametrize("email", ["a@b", "ab.com", "a b@c.com", "a@b.com\n"])
    def test_bad_email(self, email):
        result = validate_signup(SignupRequest(**signup_body(email=email)))
        assert result.message == "Enter a valid email address"


class TestValidateLogin:
    def test_requires_both_fields(self):
        assert not validate_login(LoginRequest(username="ab1")).ok
        assert not validate_login(LoginRequest(password="pw")).ok
        assert validate_login(LoginRequest(username="ab1", password="pw")).ok


class TestValidateReport:
    def test_valid_payload(self):
        assert validate_report(ReportRequest(**report_body())).ok

    @pytest.mark.parametrize("field", ["type", "location", "description", "contact", "severity"])
    def test_each_field_required(self, field):
        result = validate_report(ReportRequest(**report_body(**{field: ""})))
        assert not result.ok
        assert result.kind is ErrorKind.VALIDATION
        assert result.message == "All fields are required"
