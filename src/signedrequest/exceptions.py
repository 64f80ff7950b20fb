"""
Exception classes for the signedrequest package
"""

from typing import Optional, Dict, Any


class SignedRequestError(Exception):
    """Base exception for all signedrequest errors"""

    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (code: {self.error_code}, details: {self.details})"
        return f"{self.message} (code: {self.error_code})"


class ValidationError(SignedRequestError):
    """Exception raised for invalid credentials, configuration or arguments"""

    def __init__(self, message: str, error_code: str = "VALIDATION_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)


class MalformedURLError(SignedRequestError):
    """Exception raised when a URL cannot be decomposed into scheme, host and path"""

    def __init__(self, message: str, error_code: str = "MALFORMED_URL", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)


class InvalidKeyError(SignedRequestError):
    """Exception raised when an RSA private key is missing, unparsable or not RSA"""

    def __init__(self, message: str, error_code: str = "INVALID_KEY", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)


class UnsupportedSignatureMethodError(SignedRequestError):
    """Exception raised for an unrecognized OAuth signature method"""

    def __init__(self, message: str, error_code: str = "UNSUPPORTED_SIGNATURE_METHOD",
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)


class ConfigurationError(SignedRequestError):
    """Exception raised when configuration cannot be loaded or is invalid"""

    def __init__(self, message: str, error_code: str = "CONFIG_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)


class TransportError(SignedRequestError):
    """Exception raised for network or I/O failures in the HTTP transport"""

    def __init__(self, message: str, error_code: str = "TRANSPORT_ERROR",
                 http_status: int = 0, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)
        self.http_status = http_status
