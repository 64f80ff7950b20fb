"""
RSA private key handling for RSA-SHA1 signatures

This module is the only place that touches the cryptography package, so
HMAC-SHA1 and PLAINTEXT signing work without it being importable.
"""

from typing import Union

# Import cryptography components
try:
    from cryptography.hazmat.primitives import hashes, serialization
    from cryptography.hazmat.primitives.asymmetric import padding, rsa
    from cryptography.exceptions import UnsupportedAlgorithm
    CRYPTOGRAPHY_AVAILABLE = True
except ImportError:
    CRYPTOGRAPHY_AVAILABLE = False
    hashes = None
    serialization = None
    padding = None
    rsa = None
    UnsupportedAlgorithm = None

from ..exceptions import InvalidKeyError


class RsaPrivateKey:
    """
    Parsed RSA private key able to produce PKCS#1 v1.5 SHA-1 signatures.

    Instances are read-only after construction and may be shared between
    threads.
    """

    def __init__(self, key):
        self._key = key

    @property
    def key_size(self) -> int:
        return self._key.key_size

    def public_key(self):
        """Return the cryptography public key object."""
        return self._key.public_key()

    def sign_sha1(self, data: Union[str, bytes]) -> bytes:
        """
        Sign data with RSASSA-PKCS1-v1_5 over SHA-1.

        Args:
            data: Message to sign; text is UTF-8 encoded

        Returns:
            bytes: Raw signature
        """
        if isinstance(data, str):
            data = data.encode("utf-8")
        return self._key.sign(data, padding.PKCS1v15(), hashes.SHA1())


def load_rsa_private_key(pem: Union[str, bytes]) -> RsaPrivateKey:
    """
    Parse a PEM encoded PKCS#1 or PKCS#8 RSA private key.

    Args:
        pem: PEM text ("BEGIN RSA PRIVATE KEY" or "BEGIN PRIVATE KEY")

    Returns:
        RsaPrivateKey: Parsed key

    Raises:
        InvalidKeyError: If the key is missing, cannot be parsed, is
            encrypted, is not RSA, or cryptography is not installed
    """
    if not CRYPTOGRAPHY_AVAILABLE:
        raise InvalidKeyError(
            "RSA-SHA1 signing requires the 'cryptography' package. Install with: pip install cryptography",
            "CRYPTOGRAPHY_UNAVAILABLE"
        )

    if not pem:
        raise InvalidKeyError("RSA private key is required for RSA-SHA1 signing")

    if isinstance(pem, str):
        pem = pem.strip().encode("ascii", errors="replace")

    try:
        key = serialization.load_pem_private_key(pem, password=None)
    except (ValueError, TypeError) as e:
        raise InvalidKeyError(
            f"Failed to parse RSA private key: {e}",
            details={"original_error": str(e)}
        ) from e
    except UnsupportedAlgorithm as e:
        raise InvalidKeyError(
            f"Failed to load RSA private key: {e}",
            details={"original_error": str(e)}
        ) from e

    if not isinstance(key, rsa.RSAPrivateKey):
        raise InvalidKeyError(
            f"Private key is not an RSA key: {type(key).__name__}",
            details={"key_type": type(key).__name__}
        )

    return RsaPrivateKey(key)
