"""
Custom exceptions for TC3 client library.
"""


class TC3ClientError(Exception):
    """Base exception for TC3 client errors."""
    pass


class ConfigurationError(TC3ClientError):
    """Raised when client configuration is invalid."""
    pass


class InvalidArgumentError(TC3ClientError, ValueError):
    """Raised when a caller passes input the signer cannot sign."""
    pass


class HTTPError(TC3ClientError):
    """Raised when the HTTP transport fails."""
    pass


class SerializationError(TC3ClientError):
    """Raised when a request cannot be encoded or a response decoded."""
    pass


class TencentCloudSDKError(TC3ClientError):
    """
    Raised when the service answers with an error envelope.

    The call reached the service and was rejected there; branch on ``code``
    (e.g. ``AuthFailure.SignatureFailure``) rather than on the message.
    """

    def __init__(self, code: str, message: str = "", request_id: str = ""):
        super().__init__(code, message, request_id)
        self.code = code
        self.message = message
        self.request_id = request_id

    def __str__(self):
        return (
            f"[TencentCloudSDKError] Code={self.code}, "
            f"Message={self.message}, RequestId={self.request_id}"
        )
