"""
Tests for the requests-backed transport
"""

import logging
from unittest.mock import Mock, patch

import pytest
import requests
from requests.structures import CaseInsensitiveDict

from signedrequest.http.request_builder import PreparedOAuthRequest
from signedrequest.http.transport import (
    DEFAULT_USER_AGENT,
    HttpClientConfig,
    RequestsTransport,
    Transport,
)
from signedrequest.signing.types import HttpMethod
from signedrequest.exceptions import TransportError, ValidationError


def make_response(status_code=200, content=b"ok"):
    response = requests.Response()
    response.status_code = status_code
    response._content = content
    response.headers = CaseInsensitiveDict({"Content-Type": "text/plain"})
    response.encoding = "utf-8"
    return response


@pytest.fixture
def prepared():
    return PreparedOAuthRequest(
        method=HttpMethod.POST,
        url="https://api.example.com/items?oauth_signature=secret-sig",
        headers=(("Content-Type", "application/x-www-form-urlencoded; charset=UTF-8"),),
        body=b"a=1",
    )


class TestHttpClientConfig:
    """Test transport configuration"""

    def test_defaults(self):
        config = HttpClientConfig()
        assert config.timeout == 30.0
        assert config.verify_ssl is True
        assert config.allow_redirects is True
        assert config.default_charset == "UTF-8"
        assert config.user_agent == DEFAULT_USER_AGENT

    def test_invalid_timeout(self):
        with pytest.raises(ValidationError):
            HttpClientConfig(timeout=0)

    def test_unknown_charset(self):
        with pytest.raises(ValidationError):
            HttpClientConfig(default_charset="x-no-such-charset")


class TestRequestsTransport:
    """Test sending prepared requests through requests.Session"""

    def test_is_transport(self):
        assert isinstance(RequestsTransport(), Transport)

    def test_user_agent_on_own_session(self):
        transport = RequestsTransport(HttpClientConfig(user_agent="tests/1.0"))
        assert transport.session.headers["User-Agent"] == "tests/1.0"

    def test_given_session_untouched(self):
        session = requests.Session()
        original = session.headers["User-Agent"]
        transport = RequestsTransport(session=session)
        assert transport.session is session
        assert session.headers["User-Agent"] == original

    @patch('requests.Session.request')
    def test_send(self, mock_request, prepared):
        mock_request.return_value = make_response(201, b"created")
        transport = RequestsTransport(HttpClientConfig(timeout=5.0, verify_ssl=False, allow_redirects=False))

        response = transport.send(prepared)

        assert response.status_code == 201
        assert response.body == "created"
        mock_request.assert_called_once_with(
            "POST",
            prepared.url,
            headers={"Content-Type": "application/x-www-form-urlencoded; charset=UTF-8"},
            data=b"a=1",
            timeout=5.0,
            verify=False,
            allow_redirects=False,
        )

    @pytest.mark.parametrize("error", [
        requests.exceptions.Timeout("timed out"),
        requests.exceptions.ConnectionError("refused"),
        requests.exceptions.TooManyRedirects("loop"),
    ])
    @patch('requests.Session.request')
    def test_errors_wrapped(self, mock_request, error, prepared):
        """requests failures surface as TransportError with the cause chained"""
        mock_request.side_effect = error

        with pytest.raises(TransportError) as exc_info:
            RequestsTransport().send(prepared)

        assert exc_info.value.error_code == "TRANSPORT_ERROR"
        assert exc_info.value.__cause__ is error
        assert exc_info.value.details["url"] == "https://api.example.com/items"

    @patch('requests.Session.request')
    def test_errors_logged_without_query(self, mock_request, prepared, caplog):
        mock_request.side_effect = requests.exceptions.ConnectionError("refused")

        with caplog.at_level(logging.DEBUG, logger="signedrequest"):
            with pytest.raises(TransportError):
                RequestsTransport().send(prepared)

        assert any(record.levelno == logging.ERROR for record in caplog.records)
        assert "secret-sig" not in caplog.text

    def test_close(self):
        session = Mock(spec=requests.Session)
        RequestsTransport(session=session).close()
        session.close.assert_called_once_with()
