from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Optional, Tuple, Type

if TYPE_CHECKING:
    from .transport import HttpResponse


class AzureRestApiError(Exception):
    """
    Raised when a response's status code is not one of the status codes the operation
    expects.

    status is the integer http status code. code and message are typically returned by
    Azure APIs in the error envelope. code is usually a single word/phrase like
    "ResourceNotFound", and message is usually a more verbose explanation. Both are None
    if the body could not be parsed as an error envelope, in which case body still has
    the raw text of the response.
    """

    def __init__(
        self,
        status: int,
        code: Optional[str],
        message: Optional[str],
        body: Optional[str] = None,
    ):
        super().__init__(status, code, message)
        self.status = status
        self.code = code
        self.message = message
        self.body = body

    def __str__(self) -> str:
        if self.code is None and self.message is None:
            return f"Unexpected status {self.status}: {self.body!r}"
        return f"Unexpected status {self.status} ({self.code}): {self.message}"


class ResourceNotFoundError(AzureRestApiError):
    pass


class ResourceExistsError(AzureRestApiError):
    pass


class ResourceModifiedError(AzureRestApiError):
    pass


class ResponseDecodeError(Exception):
    """
    Raised when the status code was expected but the body does not have the shape the
    operation expects for that status code. This is deliberately not an
    AzureRestApiError, as the server considered the call a success.
    """

    def __init__(self, status: int, message: str, body: Optional[bytes] = None):
        super().__init__(status, message)
        self.status = status
        self.message = message
        self.body = body

    def __str__(self) -> str:
        return f"Unable to decode response with status {self.status}: {self.message}"


def _get_code_and_message_from_json(
    response_json: Any,
) -> Tuple[Optional[str], Optional[str]]:
    if not isinstance(response_json, dict):
        return None, None

    if "error" in response_json:
        error = response_json["error"]
    elif (
        isinstance(response_json.get("errors"), list)
        and len(response_json["errors"]) == 1
    ):
        error = response_json["errors"][0]
    elif "odata.error" in response_json:
        error = response_json["odata.error"]
    else:
        error = None

    if isinstance(error, dict):
        message = error.get("message")
        # odata errors nest the message one level deeper
        if isinstance(message, dict):
            message = message.get("value")
        return error.get("code"), message
    else:
        return None, None


def _exception_type_from_code(code: Optional[str]) -> Type[AzureRestApiError]:
    if code in (
        "ResourceGroupNotFound",
        "ResourceNotFound",
        "NotFound",
        "TestNotFound",
        "TestRunNotFound",
    ):
        return ResourceNotFoundError
    elif code in ("ResourceExists", "EntityAlreadyExists", "Conflict"):
        return ResourceExistsError
    elif code in ("UpdateConditionNotSatisfied", "PreconditionFailed"):
        return ResourceModifiedError
    else:
        return AzureRestApiError


def error_from_response(response: HttpResponse) -> AzureRestApiError:
    """
    Like response.raise_for_status, but builds an AzureRestApiError based on parsing the
    response content
    """
    code, message = None, None
    body_text = response.text()

    if response.content_type.startswith("application/json") or (
        not response.content_type and body_text.startswith("{")
    ):
        try:
            code, message = _get_code_and_message_from_json(json.loads(body_text))
        except ValueError:
            # not actually json, the raw text is still available on the exception
            pass

    return _exception_type_from_code(code)(response.status, code, message, body_text)
