"""
Client configuration.

A ``ClientConfig`` is built once and never changes afterwards. The option
helpers return a modified copy, so a config shared between threads can not be
altered underneath a call that is signing with it.
"""

import dataclasses
import os
from dataclasses import dataclass, field

from .constants import (
    DEFAULT_CONFIG,
    ENV_REGION,
    ENV_SECRET_ID,
    ENV_SECRET_KEY,
    SUPPORTED_LANGUAGES,
)
from .exceptions import ConfigurationError


@dataclass(frozen=True)
class ClientConfig:
    """
    Credentials and request options of a TC3 client.

    Args:
        secret_id: SecretId sent in the credential scope
        secret_key: SecretKey, only ever used as HMAC key material
        region: Value of the X-TC-Region header
        language: Value of the X-TC-Language header (zh-CN or en-US)
        domain: Domain appended to the service name to form the host
        timeout: HTTP timeout in seconds
        request_client: Value of the X-TC-RequestClient header
    """

    secret_id: str
    secret_key: str = field(repr=False)
    region: str = DEFAULT_CONFIG['region']
    language: str = DEFAULT_CONFIG['language']
    domain: str = DEFAULT_CONFIG['domain']
    timeout: float = DEFAULT_CONFIG['timeout']
    request_client: str = DEFAULT_CONFIG['request_client']

    def __post_init__(self):
        self._validate()

    def _validate(self):
        """Validate client configuration."""
        if not self.secret_id:
            raise ConfigurationError("secret_id cannot be empty")

        if not self.secret_key:
            raise ConfigurationError("secret_key cannot be empty")

        if not self.region:
            raise ConfigurationError("region cannot be empty")

        if self.language not in SUPPORTED_LANGUAGES:
            raise ConfigurationError(
                f"language must be one of {', '.join(SUPPORTED_LANGUAGES)}, got {self.language!r}"
            )

        if not self.domain:
            raise ConfigurationError("domain cannot be empty")

        if self.timeout <= 0:
            raise ConfigurationError("timeout must be positive")

    @classmethod
    def from_options(cls, secret_id: str, secret_key: str, **config) -> "ClientConfig":
        """Build a config from keyword options merged over DEFAULT_CONFIG."""
        unknown = set(config) - set(DEFAULT_CONFIG)
        if unknown:
            raise ConfigurationError(f"unknown option(s): {', '.join(sorted(unknown))}")
        return cls(secret_id=secret_id, secret_key=secret_key, **{**DEFAULT_CONFIG, **config})

    @classmethod
    def from_env(cls, environ=None, **config) -> "ClientConfig":
        """
        Build a config from TENCENTCLOUD_* environment variables.

        Keyword options override the environment.
        """
        environ = os.environ if environ is None else environ
        options = {}
        if environ.get(ENV_REGION):
            options['region'] = environ[ENV_REGION]
        options.update(config)
        return cls.from_options(
            environ.get(ENV_SECRET_ID, ""),
            environ.get(ENV_SECRET_KEY, ""),
            **options
        )


def with_secret(config: ClientConfig, secret_id: str, secret_key: str) -> ClientConfig:
    """Return a copy of ``config`` using another credential pair."""
    return dataclasses.replace(config, secret_id=secret_id, secret_key=secret_key)


def with_region(config: ClientConfig, region: str) -> ClientConfig:
    """Return a copy of ``config`` targeting another region."""
    return dataclasses.replace(config, region=region)


def with_language(config: ClientConfig, language: str) -> ClientConfig:
    """Return a copy of ``config`` asking for messages in another language."""
    return dataclasses.replace(config, language=language)
