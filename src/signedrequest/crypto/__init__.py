"""
Cryptographic key handling for signedrequest
"""

from .rsa import (
    RsaPrivateKey,
    load_rsa_private_key,
    CRYPTOGRAPHY_AVAILABLE,
)

__all__ = [
    'RsaPrivateKey',
    'load_rsa_private_key',
    'CRYPTOGRAPHY_AVAILABLE',
]
