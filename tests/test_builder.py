import pytest

from structerr.builder import ErrorBuilder
from structerr.kind import ErrorKind

TEST_ERROR = ErrorKind("TestError", 500, "Test error message")


def test_error():
    err = (
        ErrorBuilder(TEST_ERROR, "MyError")
        .with_message("Test error")
        .with_details({"foo": "foo"})
        .build()
    )
    assert str(err) == "Server::TestError::MyError (500) - Test error"
    assert err.details == {"foo": "foo"}


def test_default_builder():
    err = ErrorBuilder().build()
    assert str(err) == "Server::InternalServerError::UnknownError (500) - Internal Server Error"
    assert err.details == {}


def test_defaults_from_kind():
    kind = ErrorKind("ValidationError", 400, "Invalid input")
    err = ErrorBuilder(kind, "InvalidField").build()
    assert err.code == 400
    assert err.message == "Invalid input"
    assert err.class_name == "Client::ValidationError::InvalidField"


def test_overrides():
    kind = ErrorKind("NotFound", 404, "Not Found")
    err = (
        ErrorBuilder(kind, "UrlDoesNotExists")
        .with_code(410)
        .with_message("Resource not found")
        .build()
    )
    assert err.code == 410
    assert err.message == "Resource not found"
    # side comes from the kind, not the overridden code
    assert err.class_name == "Client::NotFound::UrlDoesNotExists"


def test_with_details_replaces():
    err = (
        ErrorBuilder(TEST_ERROR, "E")
        .with_details({"a": 1})
        .with_details({"reason": "Invalid ID"})
        .build()
    )
    assert err.details == {"reason": "Invalid ID"}


def test_empty_message_kept():
    err = ErrorBuilder(TEST_ERROR, "E").with_message("").build()
    assert err.message == ""


def test_invalid_code_rejected_on_build():
    builder = ErrorBuilder(TEST_ERROR, "E").with_code(70000)
    with pytest.raises(ValueError):
        builder.build()