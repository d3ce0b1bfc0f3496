"""
TC3-HMAC-SHA256 request signing.

Implements the two halves of the signature the service recomputes on its
side:

1. the canonical request: request line, the whitelisted headers sorted by
   lower-cased name, and the SHA-256 of the exact body bytes;
2. the signature: an HMAC-SHA256 chain narrowing the secret key to the
   signing date, then the service, then the ``tc3_request`` suffix, applied
   to the string to sign.

Everything here is a pure function of its arguments. No key material is
cached between calls.
"""

import datetime
import hashlib
import hmac
from typing import Mapping, Tuple

from .constants import (
    ALGORITHM_SHA256,
    DATE_FORMAT,
    EOL,
    HEADER_TC_TIMESTAMP,
    HTTP_METHOD,
    HTTP_QUERY,
    HTTP_URI,
    KEY_PREFIX,
    SCOPE_TC3_REQUEST,
    SIGNED_HEADERS,
)
from .exceptions import InvalidArgumentError

AUTHORIZATION_TEMPLATE = "{algorithm} Credential={scope}, SignedHeaders={signed_headers}, Signature={signature}"


def sha256_hex(data: bytes) -> str:
    """Return the lowercase hex SHA-256 digest of ``data``."""
    return hashlib.sha256(data).hexdigest()


def hmac_sha256(key: bytes, msg: str) -> bytes:
    """Return the raw HMAC-SHA256 digest of ``msg`` keyed by ``key``."""
    return hmac.new(key, msg.encode('utf-8'), hashlib.sha256).digest()


def join_lines(*lines: str) -> str:
    return EOL.join(lines)


def pick_signed_headers(headers: Mapping[str, str], *names: str) -> Tuple[str, str]:
    """
    Select headers to sign and render them in canonical form.

    Header names are matched case-insensitively and emitted lower-cased,
    sorted ascending. The insertion order of ``headers`` does not matter.

    Args:
        headers: Request headers
        *names: Names of the headers to sign

    Returns:
        Tuple of (signed header names joined by ``;``,
        ``name:value`` lines each terminated by a line break)

    Raises:
        InvalidArgumentError: If a requested header is missing or given twice
    """
    lowered = {}
    for name, value in headers.items():
        key = name.lower()
        if key in lowered:
            raise InvalidArgumentError(f"header {name!r} given more than once")
        lowered[key] = value

    wanted = sorted({name.lower() for name in names})
    missing = [name for name in wanted if name not in lowered]
    if missing:
        raise InvalidArgumentError(f"missing header(s) to sign: {', '.join(missing)}")

    signed_names = ";".join(wanted)
    signed_values = "".join(f"{name}:{lowered[name]}{EOL}" for name in wanted)
    return signed_names, signed_values


def build_canonical_request(
    method: str,
    uri: str,
    query: str,
    headers: Mapping[str, str],
    body: bytes,
) -> Tuple[str, str, str]:
    """
    Build and hash the canonical request.

    Args:
        method: HTTP method
        uri: Request path
        query: Raw query string
        headers: Request headers, must include Content-Type and Host
        body: Exact body bytes that will be transmitted

    Returns:
        Tuple of (canonical request hash, signed header names,
        signed header values)

    Raises:
        InvalidArgumentError: If Content-Type or Host is missing
    """
    signed_names, signed_values = pick_signed_headers(headers, *SIGNED_HEADERS)
    canonical_request = join_lines(
        method,
        uri,
        query,
        signed_values,
        signed_names,
        sha256_hex(body),
    )
    return sha256_hex(canonical_request.encode('utf-8')), signed_names, signed_values


def signing_date(now: datetime.datetime) -> str:
    """UTC calendar date of ``now`` as YYYY-MM-DD."""
    return now.astimezone(datetime.timezone.utc).strftime(DATE_FORMAT)


def unix_timestamp(now: datetime.datetime) -> str:
    """Unix seconds of ``now`` as a decimal string."""
    return str(int(now.timestamp()))


def credential_scope(secret_id: str, date: str, service: str) -> str:
    return f"{secret_id}/{date}/{service}/{SCOPE_TC3_REQUEST}"


def string_to_sign(algorithm: str, timestamp: str, scope: str, canonical_hash: str) -> str:
    return join_lines(algorithm, timestamp, scope, canonical_hash)


def signature(secret_key: str, date: str, service: str, message: str) -> str:
    """
    Derive the signing key and sign ``message``.

    kDate = HMAC("TC3" + secret_key, date)
    kService = HMAC(kDate, service)
    kSigning = HMAC(kService, "tc3_request")
    signature = hex(HMAC(kSigning, message))
    """
    k_date = hmac_sha256((KEY_PREFIX + secret_key).encode('utf-8'), date)
    k_service = hmac_sha256(k_date, service)
    k_signing = hmac_sha256(k_service, SCOPE_TC3_REQUEST)
    return hmac.new(k_signing, message.encode('utf-8'), hashlib.sha256).hexdigest()


def derive(
    canonical_hash: str,
    secret_key: str,
    service: str,
    date: str,
    timestamp: str,
    algorithm: str,
    secret_id: str,
    signed_headers: str,
) -> str:
    """
    Turn a canonical request hash into an Authorization header value.

    Args:
        canonical_hash: Hex SHA-256 of the canonical request
        secret_key: SecretKey used as HMAC key material
        service: Service name of the action
        date: UTC date of the signing instant (YYYY-MM-DD)
        timestamp: Unix seconds of the same instant
        algorithm: Signature algorithm name
        secret_id: SecretId placed in the credential scope
        signed_headers: Signed header names joined by ``;``

    Returns:
        Authorization header value
    """
    scope = credential_scope(secret_id, date, service)
    message = string_to_sign(algorithm, timestamp, scope, canonical_hash)
    return AUTHORIZATION_TEMPLATE.format(
        algorithm=algorithm,
        scope=scope,
        signed_headers=signed_headers,
        signature=signature(secret_key, date, service, message),
    )


def sign_request(
    secret_id: str,
    secret_key: str,
    service: str,
    headers: Mapping[str, str],
    body: bytes,
    now: datetime.datetime,
    algorithm: str = ALGORITHM_SHA256,
) -> str:
    """
    Sign a POST / request and return its Authorization header value.

    ``now`` is the single instant both the X-TC-Timestamp header and the
    signing date are taken from; callers must put ``unix_timestamp(now)`` in
    the header they send.

    Raises:
        InvalidArgumentError: If ``now`` is naive or a signed header is missing
    """
    if now.tzinfo is None:
        raise InvalidArgumentError("signing time must be timezone-aware")

    timestamp = unix_timestamp(now)
    for name, value in headers.items():
        if name.lower() == HEADER_TC_TIMESTAMP.lower() and value != timestamp:
            raise InvalidArgumentError(
                f"{HEADER_TC_TIMESTAMP} {value} does not match signing time {timestamp}"
            )

    canonical_hash, signed_headers, _ = build_canonical_request(
        HTTP_METHOD, HTTP_URI, HTTP_QUERY, headers, body
    )
    return derive(
        canonical_hash,
        secret_key,
        service,
        signing_date(now),
        timestamp,
        algorithm,
        secret_id,
        signed_headers,
    )
