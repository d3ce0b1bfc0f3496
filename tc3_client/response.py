"""
Response classification.

The service reports failures inside a normal JSON document::

    {"Response": {"Error": {"Code": "...", "Message": "..."}, "RequestId": "..."}}

so the body has to be inspected before it is handed to the caller.
"""

import json
from typing import Any, Callable, Optional

from .exceptions import SerializationError, TencentCloudSDKError


def decode(body: bytes) -> Any:
    """Decode a JSON response body."""
    try:
        return json.loads(body)
    except (UnicodeDecodeError, ValueError) as e:
        raise SerializationError(f"cannot decode response body: {e}") from e


def maybe_failed(document: Any) -> Optional[TencentCloudSDKError]:
    """
    Return the service error carried by ``document``, if any.

    Only ``Response.Error.Code`` is looked at; anything else about the shape
    of the document is left to the caller.
    """
    if not isinstance(document, dict):
        return None
    response = document.get('Response')
    if not isinstance(response, dict):
        return None
    error = response.get('Error')
    if not isinstance(error, dict) or not error.get('Code'):
        return None
    return TencentCloudSDKError(
        code=error['Code'],
        message=error.get('Message') or "",
        request_id=response.get('RequestId') or "",
    )


def classify(body: bytes, response_type: Optional[Callable[[Any], Any]] = None) -> Any:
    """
    Decode a response body, raising if it carries a service error.

    Args:
        body: Raw response bytes
        response_type: Optional callable building the caller's response
            object from the decoded document

    Returns:
        The decoded document, or ``response_type(document)``

    Raises:
        SerializationError: If the body is not JSON or ``response_type``
            rejects the document
        TencentCloudSDKError: If the envelope carries a non-empty error code
    """
    document = decode(body)
    error = maybe_failed(document)
    if error is not None:
        raise error
    if response_type is None:
        return document
    try:
        return response_type(document)
    except (KeyError, TypeError, ValueError) as e:
        raise SerializationError(f"cannot build {getattr(response_type, '__name__', response_type)!s}: {e}") from e
