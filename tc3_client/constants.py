"""
Constants for the TC3 client library.
Header names and literals of the TC3-HMAC-SHA256 signing protocol.
"""

from . import regions

# HTTP Headers
HEADER_HOST = "Host"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_AUTHORIZATION = "Authorization"
HEADER_TC_ACTION = "X-TC-Action"
HEADER_TC_VERSION = "X-TC-Version"
HEADER_TC_TIMESTAMP = "X-TC-Timestamp"
HEADER_TC_LANGUAGE = "X-TC-Language"
HEADER_TC_REGION = "X-TC-Region"
HEADER_TC_REQUEST_CLIENT = "X-TC-RequestClient"

# Headers covered by the signature
SIGNED_HEADERS = (HEADER_CONTENT_TYPE, HEADER_HOST)

# Request line, fixed for the JSON-over-POST API family
HTTP_METHOD = "POST"
HTTP_URI = "/"
HTTP_QUERY = ""
SCHEME = "https"

CONTENT_TYPE_JSON = "application/json"
ALGORITHM_SHA256 = "TC3-HMAC-SHA256"
KEY_PREFIX = "TC3"
SCOPE_TC3_REQUEST = "tc3_request"
DATE_FORMAT = "%Y-%m-%d"
EOL = "\n"

DEFAULT_DOMAIN = "tencentcloudapi.com"
DEFAULT_REQUEST_CLIENT = "tc3-client-python"

LANGUAGE_ZH_CN = "zh-CN"
LANGUAGE_EN_US = "en-US"
SUPPORTED_LANGUAGES = (LANGUAGE_ZH_CN, LANGUAGE_EN_US)

# Environment variables read by ClientConfig.from_env()
ENV_SECRET_ID = "TENCENTCLOUD_SECRET_ID"
ENV_SECRET_KEY = "TENCENTCLOUD_SECRET_KEY"
ENV_REGION = "TENCENTCLOUD_REGION"

# Default configuration values
DEFAULT_CONFIG = {
    'region': regions.GUANGZHOU,
    'language': LANGUAGE_ZH_CN,
    'domain': DEFAULT_DOMAIN,
    'timeout': 30,              # HTTP timeout in seconds
    'request_client': DEFAULT_REQUEST_CLIENT,
}
