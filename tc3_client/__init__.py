"""
TC3 Client Library

A Python client library that signs requests with TC3-HMAC-SHA256 and calls
JSON-over-POST cloud APIs.

Example usage:
    from tc3_client import Action, TC3Client

    client = TC3Client.from_secret("your-secret-id", "your-secret-key", region="ap-guangzhou")
    response = client.send(Action("cvm", "DescribeRegions", "2017-03-12"), {})
"""

from .actions import Action
from .client import TC3Client
from .config import ClientConfig, with_language, with_region, with_secret
from .exceptions import (
    TC3ClientError,
    ConfigurationError,
    InvalidArgumentError,
    HTTPError,
    SerializationError,
    TencentCloudSDKError
)
from .constants import (
    ALGORITHM_SHA256,
    DEFAULT_CONFIG,
    DEFAULT_DOMAIN,
    HEADER_AUTHORIZATION,
    HEADER_TC_TIMESTAMP
)
from .signer import build_canonical_request, derive, sign_request

__version__ = "1.0.0"
__all__ = [
    "Action",
    "TC3Client",
    "ClientConfig",
    "with_language",
    "with_region",
    "with_secret",
    "TC3ClientError",
    "ConfigurationError",
    "InvalidArgumentError",
    "HTTPError",
    "SerializationError",
    "TencentCloudSDKError",
    "ALGORITHM_SHA256",
    "DEFAULT_CONFIG",
    "DEFAULT_DOMAIN",
    "HEADER_AUTHORIZATION",
    "HEADER_TC_TIMESTAMP",
    "build_canonical_request",
    "derive",
    "sign_request"
]
