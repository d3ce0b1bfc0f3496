"""
Action descriptors.

An action names one remote operation: the service that owns it, the action
name sent in ``X-TC-Action`` and the API version sent in ``X-TC-Version``.
The service also selects the host and the credential scope of the signature.
"""

from dataclasses import dataclass

from .constants import DEFAULT_DOMAIN
from .exceptions import InvalidArgumentError


@dataclass(frozen=True)
class Action:
    """Immutable descriptor of a remote operation."""

    service: str
    action: str
    version: str

    def __post_init__(self):
        for field in ('service', 'action', 'version'):
            value = getattr(self, field)
            if not isinstance(value, str) or not value:
                raise InvalidArgumentError(f"action {field} must be a non-empty string")

    def host(self, domain: str = DEFAULT_DOMAIN) -> str:
        """Return the endpoint host, e.g. ``cvm.tencentcloudapi.com``."""
        return f"{self.service}.{domain}"
