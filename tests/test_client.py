"""
Unit tests for TC3 client.
"""

import datetime
from unittest.mock import Mock, patch

import pytest
import requests

from tc3_client import (
    Action,
    ClientConfig,
    HTTPError,
    InvalidArgumentError,
    SerializationError,
    TC3Client,
    TencentCloudSDKError
)
from tc3_client.constants import (
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    HEADER_HOST,
    HEADER_TC_ACTION,
    HEADER_TC_LANGUAGE,
    HEADER_TC_REGION,
    HEADER_TC_REQUEST_CLIENT,
    HEADER_TC_TIMESTAMP,
    HEADER_TC_VERSION
)
from tc3_client.signer import sign_request

SECRET_ID = "AKIDEXAMPLE"
SECRET_KEY = "test_secret_key"
NOW = datetime.datetime(2024, 1, 1, tzinfo=datetime.timezone.utc)
CVM_AUTHORIZATION = (
    "TC3-HMAC-SHA256 Credential=AKIDEXAMPLE/2024-01-01/cvm/tc3_request, "
    "SignedHeaders=content-type;host, "
    "Signature=f7c65cda054fcf5949646ede865b08f672958dbd862b1d3151b60c5b698d91c5"
)
SUCCESS = b'{"Response":{"TotalCount":1,"RegionSet":[{"Region":"ap-guangzhou"}],"RequestId":"r1"}}'
AUTH_FAILURE = b'{"Response":{"Error":{"Code":"AuthFailure","Message":"bad sig"},"RequestId":"r2"}}'


def http_response(content: bytes, status_code: int = 200) -> Mock:
    response = Mock()
    response.status_code = status_code
    response.content = content
    return response


class TestTC3Client:
    """Test TC3 client functionality."""

    @pytest.fixture
    def session(self):
        """Create mocked HTTP session."""
        session = Mock()
        session.request.return_value = http_response(SUCCESS)
        return session

    @pytest.fixture
    def client(self, session):
        """Create test client."""
        return TC3Client(ClientConfig(SECRET_ID, SECRET_KEY), session=session)

    @pytest.fixture
    def action(self):
        return Action("cvm", "DescribeRegions", "2017-03-12")

    def test_from_secret(self):
        """Test client creation from a credential pair."""
        client = TC3Client.from_secret("id", "key", region="ap-beijing", language="en-US")

        assert client.config.secret_id == "id"
        assert client.config.region == "ap-beijing"
        assert client.config.language == "en-US"
        assert isinstance(client.session, requests.Session)
        client.close()

    def test_prepare_request_body_json(self, client):
        """Test request body preparation with JSON data."""
        body = client._prepare_request_body({"Limit": 10, "Name": "测试"})

        assert body == '{"Limit":10,"Name":"测试"}'.encode("utf-8")

    def test_prepare_request_body_string(self, client):
        """Test request body preparation with string data."""
        assert client._prepare_request_body('{"Limit":1}') == b'{"Limit":1}'

    def test_prepare_request_body_bytes(self, client):
        """Test request body preparation with bytes data."""
        assert client._prepare_request_body(b'{"Limit":1}') == b'{"Limit":1}'

    def test_prepare_request_body_empty(self, client):
        """Test request body preparation with no data."""
        assert client._prepare_request_body() == b"{}"

    def test_prepare_request_body_unserialisable(self, client):
        """Test that an unserialisable payload is a serialization error."""
        with pytest.raises(SerializationError):
            client._prepare_request_body({"when": datetime.datetime.now()})

    def test_build_headers(self, client, action):
        """Test that all protocol headers are present."""
        headers = client.build_headers(action, b"{}", NOW)

        assert headers[HEADER_HOST] == "cvm.tencentcloudapi.com"
        assert headers[HEADER_CONTENT_TYPE] == "application/json"
        assert headers[HEADER_TC_ACTION] == "DescribeRegions"
        assert headers[HEADER_TC_VERSION] == "2017-03-12"
        assert headers[HEADER_TC_TIMESTAMP] == "1704067200"
        assert headers[HEADER_TC_LANGUAGE] == "zh-CN"
        assert headers[HEADER_TC_REGION] == "ap-guangzhou"
        assert headers[HEADER_TC_REQUEST_CLIENT] == "tc3-client-python"
        assert headers[HEADER_AUTHORIZATION] == CVM_AUTHORIZATION

    def test_secret_key_not_in_headers(self, client, action):
        """Test that the secret key never leaves the client."""
        headers = client.build_headers(action, b"{}", NOW)

        for value in headers.values():
            assert SECRET_KEY not in value

    @patch("tc3_client.client._utcnow")
    def test_send_request(self, mock_now, client, session, action):
        """Test the outgoing request."""
        mock_now.return_value = NOW

        result = client.send(action)

        assert result["Response"]["TotalCount"] == 1
        session.request.assert_called_once()
        args, kwargs = session.request.call_args
        assert args == ("POST", "https://cvm.tencentcloudapi.com/")
        assert kwargs["data"] == b"{}"
        assert kwargs["timeout"] == 30
        assert kwargs["headers"][HEADER_AUTHORIZATION] == CVM_AUTHORIZATION

    @patch("tc3_client.client._utcnow")
    def test_timestamp_and_date_from_one_instant(self, mock_now, client, session, action):
        """Test that the clock is read once per call."""
        shanghai = datetime.timezone(datetime.timedelta(hours=8))
        mock_now.return_value = datetime.datetime(2024, 1, 2, 7, 30, tzinfo=shanghai)

        client.send(action, {"Limit": 1})

        assert mock_now.call_count == 1
        headers = session.request.call_args[1]["headers"]
        assert headers[HEADER_TC_TIMESTAMP] == "1704151800"
        assert "Credential=AKIDEXAMPLE/2024-01-01/cvm/tc3_request" in headers[HEADER_AUTHORIZATION]

    @patch("tc3_client.client._utcnow")
    def test_signature_covers_sent_body(self, mock_now, client, session, action):
        """Test that the sent headers and body verify against each other."""
        mock_now.return_value = NOW

        client.send(action, {"Limit": 1, "Offset": 0})

        kwargs = session.request.call_args[1]
        headers = dict(kwargs["headers"])
        authorization = headers.pop(HEADER_AUTHORIZATION)
        assert authorization == sign_request(SECRET_ID, SECRET_KEY, "cvm", headers, kwargs["data"], NOW)

    @patch("tc3_client.client._utcnow")
    def test_repeated_call_new_signature(self, mock_now, client, session, action):
        """Test that the same call at two instants is signed twice."""
        mock_now.side_effect = [NOW, NOW + datetime.timedelta(seconds=10)]

        client.send(action)
        client.send(action)

        first, second = [call[1]["headers"] for call in session.request.call_args_list]
        assert first[HEADER_TC_TIMESTAMP] == "1704067200"
        assert second[HEADER_TC_TIMESTAMP] == "1704067210"
        assert first[HEADER_AUTHORIZATION] != second[HEADER_AUTHORIZATION]
        for headers, now in ((first, NOW), (second, NOW + datetime.timedelta(seconds=10))):
            unsigned = {k: v for k, v in headers.items() if k != HEADER_AUTHORIZATION}
            assert headers[HEADER_AUTHORIZATION] == sign_request(
                SECRET_ID, SECRET_KEY, "cvm", unsigned, b"{}", now
            )

    def test_send_service_error(self, client, session, action):
        """Test that an error envelope raises a service error."""
        session.request.return_value = http_response(AUTH_FAILURE)

        with pytest.raises(TencentCloudSDKError) as exc_info:
            client.send(action)

        assert exc_info.value.code == "AuthFailure"
        assert exc_info.value.request_id == "r2"

    def test_send_response_type(self, client, action):
        """Test building the caller's response shape."""
        result = client.send(action, response_type=lambda document: document["Response"]["RegionSet"])

        assert result == [{"Region": "ap-guangzhou"}]

    def test_send_undecodable_response(self, client, session, action):
        """Test that a non-JSON body is a serialization error."""
        session.request.return_value = http_response(b"Bad Gateway", status_code=502)

        with pytest.raises(SerializationError):
            client.send(action)

    def test_send_transport_error(self, client, session, action):
        """Test that transport failures are wrapped, not retried."""
        session.request.side_effect = requests.ConnectionError("connection refused")

        with pytest.raises(HTTPError) as exc_info:
            client.send(action)

        assert isinstance(exc_info.value.__cause__, requests.ConnectionError)
        assert session.request.call_count == 1

    def test_send_unserialisable_request(self, client, session, action):
        """Test that nothing is sent when the request can not be encoded."""
        with pytest.raises(SerializationError):
            client.send(action, {"bad": object()})

        session.request.assert_not_called()

    def test_custom_domain(self, session, action):
        """Test that the domain option changes host and URL."""
        client = TC3Client(ClientConfig(SECRET_ID, SECRET_KEY, domain="internal.example.com"), session=session)

        client.send(action)

        args, kwargs = session.request.call_args
        assert args[1] == "https://cvm.internal.example.com/"
        assert kwargs["headers"][HEADER_HOST] == "cvm.internal.example.com"

    def test_naive_clock_rejected(self, client, action):
        """Test that signing with a naive instant fails."""
        with pytest.raises(InvalidArgumentError):
            client.build_headers(action, b"{}", datetime.datetime(2024, 1, 1))

    @patch("tc3_client.client.requests.Session.request")
    def test_default_session(self, mock_request, action):
        """Test sending through the default requests session."""
        mock_request.return_value = http_response(SUCCESS)

        with TC3Client.from_secret(SECRET_ID, SECRET_KEY) as client:
            result = client.send(action)

        assert result["Response"]["RequestId"] == "r1"
        mock_request.assert_called_once()

    def test_context_manager(self, session):
        """Test client as context manager."""
        with TC3Client(ClientConfig(SECRET_ID, SECRET_KEY), session=session) as client:
            assert client.session is session

        session.close.assert_called_once()

    def test_logging_omits_secrets(self, client, session, action, caplog):
        """Test that log records never carry credentials or signatures."""
        session.request.return_value = http_response(AUTH_FAILURE)

        with caplog.at_level("DEBUG", logger="tc3_client"):
            with pytest.raises(TencentCloudSDKError):
                client.send(action)

        assert "AuthFailure" in caplog.text
        assert SECRET_KEY not in caplog.text
        assert "Signature=" not in caplog.text
