"""
Shared fixtures for the signedrequest test suite

The photos.example.net values are the OAuth 1.0 Core Appendix A example.
"""

import pytest

from signedrequest.signing import create_signer_config

APPENDIX_A_URL = "http://photos.example.net/photos"
APPENDIX_A_PARAMS = {"file": "vacation.jpg", "size": "original"}
APPENDIX_A_NONCE = "kllo9940pd9333jh"
APPENDIX_A_TIMESTAMP = 1191242096
APPENDIX_A_BASE_STRING = (
    "GET&http%3A%2F%2Fphotos.example.net%2Fphotos&file%3Dvacation.jpg"
    "%26oauth_consumer_key%3Ddpf43f3p2l4k3l03%26oauth_nonce%3Dkllo9940pd9333jh"
    "%26oauth_signature_method%3DHMAC-SHA1%26oauth_timestamp%3D1191242096"
    "%26oauth_token%3Dnnch734d00sl2jdk%26oauth_version%3D1.0%26size%3Doriginal"
)
APPENDIX_A_SIGNATURE = "tR3+Ty81lMeYAr/Fid0kMTYa/WM="


@pytest.fixture
def appendix_a_builder():
    """Builder preloaded with the Appendix A consumer and token"""
    return (create_signer_config()
            .consumer("dpf43f3p2l4k3l03", "kd94hf93k423kf44")
            .token("nnch734d00sl2jdk", "pfkkdhi9sl3r4s00"))


@pytest.fixture
def appendix_a_config(appendix_a_builder):
    """Appendix A configuration with a fixed nonce and timestamp"""
    return (appendix_a_builder
            .nonce_generator(lambda: APPENDIX_A_NONCE)
            .timestamp_generator(lambda: APPENDIX_A_TIMESTAMP)
            .build())


@pytest.fixture(scope="session")
def rsa_private_key():
    """2048-bit RSA key generated once per test session"""
    from cryptography.hazmat.primitives.asymmetric import rsa
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def rsa_pem_pkcs8(rsa_private_key):
    from cryptography.hazmat.primitives import serialization
    return rsa_private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode("ascii")


@pytest.fixture(scope="session")
def rsa_pem_pkcs1(rsa_private_key):
    from cryptography.hazmat.primitives import serialization
    return rsa_private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode("ascii")
