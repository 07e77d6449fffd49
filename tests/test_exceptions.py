from __future__ import annotations

from azmgmt.core.exceptions import (
    AzureRestApiError,
    ResourceExistsError,
    ResourceModifiedError,
    ResourceNotFoundError,
    error_from_response,
)
from azmgmt.core.transport import HttpResponse
from fakes import json_response


def test_error_envelope() -> None:
    error = error_from_response(
        json_response(
            400,
            {
                "error": {
                    "code": "InvalidParameter",
                    "message": "The value of location is not valid",
                    "details": [],
                }
            },
        )
    )

    assert type(error) is AzureRestApiError
    assert error.status == 400
    assert error.code == "InvalidParameter"
    assert error.message == "The value of location is not valid"
    assert "InvalidParameter" in str(error)


def test_errors_list_envelope() -> None:
    error = error_from_response(
        json_response(409, {"errors": [{"code": "Conflict", "message": "in use"}]})
    )
    assert isinstance(error, ResourceExistsError)
    assert error.message == "in use"

    # more than one error doesn't have a single code
    error = error_from_response(
        json_response(400, {"errors": [{"code": "A"}, {"code": "B"}]})
    )
    assert error.code is None

    # errors that isn't a list isn't an envelope we understand
    error = error_from_response(json_response(400, {"errors": 5}))
    assert type(error) is AzureRestApiError
    assert error.status == 400
    assert error.code is None
    assert error.message is None


def test_odata_error_envelope() -> None:
    error = error_from_response(
        json_response(
            404,
            {
                "odata.error": {
                    "code": "NotFound",
                    "message": {"lang": "en-US", "value": "No such workflow"},
                }
            },
        )
    )
    assert isinstance(error, ResourceNotFoundError)
    assert error.message == "No such workflow"


def test_exception_types() -> None:
    for code, expected in [
        ("ResourceGroupNotFound", ResourceNotFoundError),
        ("TestNotFound", ResourceNotFoundError),
        ("EntityAlreadyExists", ResourceExistsError),
        ("PreconditionFailed", ResourceModifiedError),
        ("SomethingElse", AzureRestApiError),
    ]:
        error = error_from_response(json_response(400, {"error": {"code": code}}))
        assert type(error) is expected, (code, type(error))


def test_non_json_error() -> None:
    error = error_from_response(
        HttpResponse(502, {"content-type": "text/html"}, b"<html>Bad Gateway</html>")
    )
    assert error.status == 502
    assert error.code is None
    assert error.message is None
    assert error.body == "<html>Bad Gateway</html>"
    assert "Bad Gateway" in str(error)


def test_malformed_json_error() -> None:
    error = error_from_response(
        HttpResponse(500, {"content-type": "application/json"}, b"{not json")
    )
    assert type(error) is AzureRestApiError
    assert error.code is None
    assert error.body == "{not json"


def test_json_without_content_type() -> None:
    error = error_from_response(
        HttpResponse(404, {}, b'{"error": {"code": "ResourceNotFound"}}')
    )
    assert isinstance(error, ResourceNotFoundError)
