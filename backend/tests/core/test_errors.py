"""Error Hierarchy — tests for the REST error envelope."""

from cookmate.core.errors import (
    ConfigurationError,
    ConflictError,
    NotFoundOrNotOwnedError,
    PhoneInUseError,
    UnauthenticatedError,
    UnsupportedLanguageError,
    VerificationIncompleteError,
)


def test_to_response_envelope_shape():
    body = NotFoundOrNotOwnedError("Service not found or not owned by you").to_response()
    error = body["error"]
    assert error["code"] == "RESOURCE_NOT_FOUND"
    assert error["message"] == "Service not found or not owned by you"
    assert error["category"] == "resource_not_found"
    assert "timestamp" in error


def test_unauthenticated_defaults():
    err = UnauthenticatedError()
    assert err.http_status == 401
    assert err.message == "Invalid token"


def test_verification_incomplete_reports_missing_steps():
    err = VerificationIncompleteError(basic_profile=True, worker_profile=False)
    assert err.http_status == 400
    assert err.to_response()["error"]["missing"] == {
        "basicProfile": True, "workerProfile": False,
    }


def test_phone_in_use_is_conflict():
    err = PhoneInUseError()
    assert isinstance(err, ConflictError)
    assert err.http_status == 409
    assert err.code == "PHONE_IN_USE"


def test_unsupported_language_lists_codes():
    err = UnsupportedLanguageError(["fr", "de"])
    assert err.http_status == 400
    assert "fr, de" in err.message


def test_configuration_error_names_fields():
    err = ConfigurationError(["auth_jwt_secret", "database_url"])
    assert err.fields == ["auth_jwt_secret", "database_url"]
    assert "auth_jwt_secret" in err.message
