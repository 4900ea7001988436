# structerr

Structured, serializable error types for applications that send errors across
boundaries: HTTP APIs, RPC, worker queues and log pipelines.

An error carries four pieces of information:

- a numeric **code** (HTTP-style, e.g. `404`, `500`), an integer from 0 to 65535,
- a **class** of the form `Side::Kind::Name` (e.g. `Client::NotFound::PageMissing`),
- a human-readable **message**,
- a dictionary of structured **details**, kept ordered by key.

## Installation

```
pip install structerr
```

## Error kinds

`structerr.kind.ErrorKind` is a frozen dataclass naming a category of error
with a default code and description. Codes up to 499 are on the `Client` side,
500 and above on the `Server` side. A code that is not an integer raises
`TypeError`; one outside 0..65535 raises `ValueError`.

```python
from structerr.kind import ErrorKind

not_found = ErrorKind("NotFound", 404, "Not Found")
not_found.side          # "Client"

ErrorKind.default()
# ErrorKind(name='InternalServerError', code=500, description='Internal Server Error')
```

## Building errors

`structerr.builder.ErrorBuilder` builds a `structerr.error.Error` from a kind
and a name, falling back to the kind's code and description when nothing else
is given. Called with no arguments, it uses `ErrorKind.default()` and the name
`"UnknownError"`.

```python
from structerr.builder import ErrorBuilder
from structerr.kind import ErrorKind

kind = ErrorKind("ValidationError", 400, "Invalid input")

error = (
    ErrorBuilder(kind, "MissingField")
    .with_message("Username is required")
    .with_details({"field": "username"})
    .build()
)

str(error)   # "Client::ValidationError::MissingField (400) - Username is required"

str(ErrorBuilder().build())
# "Server::InternalServerError::UnknownError (500) - Internal Server Error"
```

## The Error type

`Error(code, class_name, message, details)` is an exception, so it can be
raised and caught like any other. Its attributes are `code`, `class_name`,
`message` and `details` (a copy of the details). Two errors compare equal when
all four match.

An error serializes without its code, which usually travels separately (for
example as the HTTP status):

```python
error.to_dict()
# {"class": "Client::ValidationError::MissingField",
#  "message": "Username is required",
#  "details": {"field": "username"}}

error.to_json()                                  # the same, as a JSON string
restored = type(error).from_dict(error.to_dict(), 400)
restored == error                                # True
error.to_io_error()   # an OSError carrying the formatted message
```

`Error.from_dict(data, code=None)` takes the code from its argument, or from
`data["code"]` when none is given. A missing field raises `ValueError`; a field
of the wrong type raises `TypeError`.

## Declaring kinds and errors

`structerr.macros` produces kinds and matching error classes from compact
specifications. An error may keep its kind's code and description, override
the code, or override both.

```python
from structerr.macros import define_errors, define_kinds

kinds = define_kinds({
    "NotFound": (404, "Resource Not Found"),
    "Unauthorized": (401, "Unauthorized Access"),
})

errors = define_errors({
    "NotFoundError": kinds["NotFound"],
    "Forbidden": (kinds["Unauthorized"], 403),
    "LoginTimeout": (kinds["Unauthorized"], 440, "Login Time-out"),
})

err = errors["Forbidden"]()
err.code          # 403
err.message       # "Unauthorized Access"
err.class_name    # "Client::Unauthorized::Forbidden"
str(err)          # "Client::Unauthorized::Forbidden (403): Unauthorized Access"

core = errors["NotFoundError"]().with_message("Page missing").to_error()
core.code         # 404
core.message      # "Page missing"
```

A single error class can also be made with `define_error(name, kind, code, message)`;
`code` and `message` are optional. Every generated class derives from
`DefinedError`, carries its kind as the class attribute `kind`, and accepts
`code`, `message` and `details` as keyword arguments or through `with_code`,
`with_message` and `with_details`. An invalid spec passed to `define_errors`
raises `ValueError`.

## Converting foreign exceptions

Subclass `structerr.convert.ErrorConverter` and implement the classmethod
`convert` to map an exception from another library onto an `Error`.
`convert_error` picks the message first (through `store_origin`): a custom
text wins and the original exception text is kept in the details under
`"origin"`; without a text the exception's own text is used and the context is
passed on unchanged. The context given by the caller is never modified.

```python
from structerr.convert import ErrorConverter

class ValueErrorConverter(ErrorConverter):
    @classmethod
    def convert(cls, error, text, context):
        return errors["NotFoundError"](message=text, details=context).to_error()

result = ValueErrorConverter.convert_error(ValueError("bad id"), "Lookup failed", {})
result.message             # "Lookup failed"
result.details["origin"]   # "bad id"
```

## What is not included

The package provides the error types and their dictionary and JSON forms only.
It does not turn errors into HTTP responses for any web framework, and it does
not generate API schema descriptions for them.

## Running the tests

```
pip install -e ".[test]"
pytest
```