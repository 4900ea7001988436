import pytest

from structerr.convert import ErrorConverter
from structerr.error import Error
from structerr.macros import define_error, define_kinds

MOCK_KIND = define_kinds({"MockKind": (500, "Mock error kind")})["MockKind"]
MockError = define_error("MockError", MOCK_KIND)

MOCK_CLASS = "Server::MockKind::MockError"


class MyError(Exception):
    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class MyErrorConverter(ErrorConverter):
    @classmethod
    def convert(cls, error, text, context):
        return MockError().with_message(text).with_details(context).to_error()


def test_store_origin_with_text():
    context = {"key": "value"}
    message, updated = ErrorConverter.store_origin(MyError("Oops"), "Custom message", context)
    assert message == "Custom message"
    assert "origin" in updated
    assert updated["origin"] == "Oops"
    assert updated["key"] == "value"


def test_store_origin_does_not_modify_context():
    context = {"key": "value"}
    ErrorConverter.store_origin(MyError("Oops"), "Custom message", context)
    assert context == {"key": "value"}


def test_store_origin_without_text():
    message, updated = ErrorConverter.store_origin(MyError("Default error"), None, {})
    assert message == "Default error"
    assert updated == {}


def test_convert_error_with_custom_text():
    context = {"field": "value"}
    result = MyErrorConverter.convert_error(
        MyError("Conversion failed"), "Something went wrong", context
    )
    assert result.message == "Something went wrong"
    assert "origin" in result.details
    assert result.details["origin"] == "Conversion failed"
    expected = Error(
        500,
        MOCK_CLASS,
        "Something went wrong",
        {"field": "value", "origin": "Conversion failed"},
    )
    assert result == expected


def test_convert_error_with_default_message():
    result = MyErrorConverter.convert_error(MyError("Fallback error"), None, {})
    assert result.message == "Fallback error"
    assert "origin" not in result.details
    assert result == Error(500, MOCK_CLASS, "Fallback error", {})


def test_convert_error_builds_class_and_code():
    result = MyErrorConverter.convert_error(MyError("boom"))
    assert result == Error(500, MOCK_CLASS, "boom", {})
    assert result.class_name == MOCK_CLASS
    assert result.code == 500
    assert str(result) == "Server::MockKind::MockError (500) - boom"


def test_converter_without_convert_cannot_be_instantiated():
    with pytest.raises(TypeError):
        ErrorConverter()

    class Incomplete(ErrorConverter):
        pass

    with pytest.raises(TypeError):
        Incomplete()