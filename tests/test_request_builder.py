"""
Tests for assembling transport-ready signed requests
"""

import pytest

from signedrequest.http.request_builder import (
    FORM_CONTENT_TYPE,
    PreparedOAuthRequest,
    build_authorization_header,
    build_request,
)
from signedrequest.signing.types import HttpMethod, OAuthParameters, ParameterPlacement, SignatureMethod
from signedrequest.exceptions import ValidationError

from conftest import APPENDIX_A_NONCE, APPENDIX_A_PARAMS, APPENDIX_A_SIGNATURE, APPENDIX_A_TIMESTAMP, APPENDIX_A_URL

ENCODED_SIGNATURE = "tR3%2BTy81lMeYAr%2FFid0kMTYa%2FWM%3D"


@pytest.fixture
def signed_parameters():
    return OAuthParameters(
        consumer_key="dpf43f3p2l4k3l03",
        nonce=APPENDIX_A_NONCE,
        timestamp=APPENDIX_A_TIMESTAMP,
        signature_method=SignatureMethod.HMAC_SHA1,
        token="nnch734d00sl2jdk",
        signature=APPENDIX_A_SIGNATURE,
    )


class TestAuthorizationHeader:
    """Test the OAuth Authorization header"""

    def test_header_value(self, signed_parameters):
        assert build_authorization_header(signed_parameters) == (
            'OAuth oauth_consumer_key="dpf43f3p2l4k3l03", '
            'oauth_token="nnch734d00sl2jdk", '
            'oauth_signature_method="HMAC-SHA1", '
            'oauth_timestamp="1191242096", '
            'oauth_nonce="kllo9940pd9333jh", '
            'oauth_version="1.0", '
            f'oauth_signature="{ENCODED_SIGNATURE}"'
        )

    def test_realm_first(self, signed_parameters):
        header = build_authorization_header(signed_parameters, realm="Photos")
        assert header.startswith('OAuth realm="Photos", oauth_consumer_key=')

    def test_unsigned_parameters_rejected(self, signed_parameters):
        unsigned = OAuthParameters(
            consumer_key="key", nonce="n", timestamp=1, signature_method=SignatureMethod.HMAC_SHA1
        )
        with pytest.raises(ValidationError):
            build_authorization_header(unsigned)


class TestBuildRequest:
    """Test request assembly"""

    def test_get_appends_query(self, signed_parameters):
        request = build_request("GET", APPENDIX_A_URL, signed_parameters, APPENDIX_A_PARAMS)

        assert isinstance(request, PreparedOAuthRequest)
        assert request.method is HttpMethod.GET
        assert request.url == APPENDIX_A_URL + "?file=vacation.jpg&size=original"
        assert request.body is None
        assert request.header_dict()["Authorization"].startswith("OAuth ")
        assert "Content-Type" not in request.header_dict()

    def test_existing_query_kept(self, signed_parameters):
        request = build_request("DELETE", "http://example.com/p?a=1", signed_parameters, {"b": "2"})
        assert request.url == "http://example.com/p?a=1&b=2"

    def test_list_values(self, signed_parameters):
        request = build_request("GET", "http://example.com/p", signed_parameters, {"tag": ["a", "b c"]})
        assert request.url == "http://example.com/p?tag=a&tag=b%20c"

    @pytest.mark.parametrize("method", ["POST", "PUT", "PATCH"])
    def test_body_methods_send_form(self, signed_parameters, method):
        """POST, PUT and PATCH carry parameters in a form body"""
        request = build_request(method, APPENDIX_A_URL, signed_parameters, APPENDIX_A_PARAMS)

        assert request.url == APPENDIX_A_URL
        assert request.body == b"file=vacation.jpg&size=original"
        assert request.header_dict()["Content-Type"] == f"{FORM_CONTENT_TYPE}; charset=UTF-8"

    def test_post_without_parameters(self, signed_parameters):
        request = build_request("POST", APPENDIX_A_URL, signed_parameters)
        assert request.body is None
        assert "Content-Type" not in request.header_dict()

    def test_body_charset(self, signed_parameters):
        request = build_request("POST", APPENDIX_A_URL, signed_parameters, {"name": "é"}, charset="ISO-8859-1")
        assert request.body == b"name=%E9"
        assert request.charset == "ISO-8859-1"
        assert request.header_dict()["Content-Type"].endswith("charset=ISO-8859-1")

    def test_query_placement(self, signed_parameters):
        """Query placement moves the protocol parameters into the URL"""
        request = build_request(
            "GET", APPENDIX_A_URL, signed_parameters, APPENDIX_A_PARAMS,
            placement=ParameterPlacement.QUERY_STRING
        )

        assert "Authorization" not in request.header_dict()
        assert request.url.startswith(APPENDIX_A_URL + "?file=vacation.jpg&size=original&oauth_consumer_key=")
        assert request.url.endswith(f"&oauth_signature={ENCODED_SIGNATURE}")

    def test_extra_headers(self, signed_parameters):
        request = build_request("GET", APPENDIX_A_URL, signed_parameters, headers={"Accept": "application/json"})
        headers = request.header_dict()
        assert headers["Accept"] == "application/json"
        assert "Authorization" in headers

    def test_unsupported_method(self, signed_parameters):
        with pytest.raises(ValidationError):
            build_request("CONNECT", APPENDIX_A_URL, signed_parameters)


class TestParameterConsistency:
    """Test that sent parameters equal the signed ones"""

    def test_bytes_value_sent_as_text(self, signed_parameters):
        request = build_request("GET", "http://example.com/p", signed_parameters, {"q": b"abc"})
        assert request.url == "http://example.com/p?q=abc"

    def test_bytes_value_in_body(self, signed_parameters):
        request = build_request("POST", "http://example.com/p", signed_parameters, {"q": [b"caf\xc3\xa9", None]})
        assert request.body == b"q=caf%C3%A9&q="

    def test_invalid_utf8_bytes(self, signed_parameters):
        with pytest.raises(ValidationError):
            build_request("GET", "http://example.com/p", signed_parameters, {"q": b"\xff"})

    def test_unencodable_value_for_charset(self, signed_parameters):
        """Values the charset cannot represent raise ValidationError naming the charset"""
        with pytest.raises(ValidationError) as exc_info:
            build_request("POST", APPENDIX_A_URL, signed_parameters, {"name": "☃"}, charset="ISO-8859-1")
        assert exc_info.value.details["charset"] == "ISO-8859-1"

        with pytest.raises(ValidationError):
            build_request("GET", APPENDIX_A_URL, signed_parameters, {"name": "☃"}, charset="ascii")


class TestRealm:
    """Test realm rendering in the Authorization header"""

    def test_url_realm_not_percent_encoded(self, signed_parameters):
        header = build_authorization_header(signed_parameters, realm="http://photos.example.net/")
        assert header.startswith('OAuth realm="http://photos.example.net/", oauth_consumer_key=')

    def test_realm_quotes_escaped(self, signed_parameters):
        header = build_authorization_header(signed_parameters, realm='say "hi" \\ bye')
        assert header.startswith('OAuth realm="say \\"hi\\" \\\\ bye", ')
