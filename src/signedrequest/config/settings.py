"""
Configuration loading for signedrequest

Builds signer and transport configuration from a JSON document, a JSON file
or environment variables. Key material may be given inline or as a path to
a PEM file.
"""

import json
import logging
import os
from typing import Any, Dict, Mapping, Optional, Union
from dataclasses import dataclass
from pathlib import Path

from ..exceptions import ConfigurationError, SignedRequestError
from ..signing.types import Credentials, ParameterPlacement, SignatureMethod
from ..signing.signing_config import SignerConfig, validate_signer_config
from ..http.transport import HttpClientConfig

logger = logging.getLogger(__name__)

DEFAULT_ENV_PREFIX = "OAUTH_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class ClientSettings:
    """
    Everything needed to build a SignedRequestClient

    Attributes:
        signer: Signer configuration
        http: Transport configuration
        log_level: Logging level name for the signedrequest logger
    """
    signer: SignerConfig
    http: HttpClientConfig
    log_level: str = "WARNING"

    def apply_logging(self) -> None:
        """Set the level of the package logger from log_level."""
        level = logging.getLevelName(self.log_level.upper())
        if not isinstance(level, int):
            raise ConfigurationError(f"Unknown log level: {self.log_level}", "INVALID_LOG_LEVEL")
        logging.getLogger("signedrequest").setLevel(level)


def _read_key_file(path: Union[str, Path]) -> str:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
    except OSError as e:
        raise ConfigurationError(f"Failed to read RSA private key file: {e}", "FILE_ERROR") from e


def _parse_bool(value: Any, name: str) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Invalid boolean for {name}: {value}", "INVALID_FORMAT")


def _section(data: Mapping[str, Any], name: str, required: bool = False) -> Mapping[str, Any]:
    section = data[name] if required else data.get(name)
    if section is None and not required:
        return {}
    if not isinstance(section, Mapping):
        raise ConfigurationError(
            f"Configuration section '{name}' must be a mapping",
            "INVALID_FORMAT",
            {"section": name, "type": type(section).__name__}
        )
    return section


def load_config_from_dict(data: Mapping[str, Any]) -> ClientSettings:
    """
    Build client settings from a configuration mapping.

    Expected layout:
        {
          "credentials": {"consumer_key": ..., "consumer_secret": ...,
                          "token": ..., "token_secret": ...,
                          "rsa_private_key": ... | "rsa_private_key_file": ...},
          "signature_method": "HMAC-SHA1",
          "realm": ..., "placement": "header" | "query",
          "http": {"timeout": 30, "verify_ssl": true, "allow_redirects": true,
                   "default_charset": "UTF-8", "user_agent": ...},
          "logging": {"level": "INFO"}
        }

    Raises:
        ConfigurationError: If the mapping is incomplete or invalid
    """
    if not isinstance(data, Mapping):
        raise ConfigurationError("Configuration must be a mapping", "INVALID_FORMAT")

    try:
        creds = _section(data, 'credentials', required=True)
        rsa_key = creds.get('rsa_private_key')
        if not rsa_key and creds.get('rsa_private_key_file'):
            rsa_key = _read_key_file(creds['rsa_private_key_file'])

        credentials = Credentials(
            consumer_key=creds['consumer_key'],
            consumer_secret=creds.get('consumer_secret') or "",
            rsa_private_key=rsa_key,
            token=creds.get('token') or None,
            token_secret=creds.get('token_secret') or None,
        )

        default_method = SignatureMethod.RSA_SHA1 if rsa_key else SignatureMethod.HMAC_SHA1
        signer = SignerConfig(
            credentials=credentials,
            signature_method=data.get('signature_method') or default_method,
            realm=data.get('realm'),
            placement=data.get('placement') or ParameterPlacement.HEADER,
        )
        validate_signer_config(signer)

        http_data = dict(_section(data, 'http'))
        for flag in ('verify_ssl', 'allow_redirects'):
            if flag in http_data:
                http_data[flag] = _parse_bool(http_data[flag], flag)
        if 'timeout' in http_data:
            http_data['timeout'] = float(http_data['timeout'])
        http = HttpClientConfig(**http_data)

        log_level = _section(data, 'logging').get('level', 'WARNING')
    except KeyError as e:
        raise ConfigurationError(f"Missing configuration value: {e}", "MISSING_VALUE") from e
    except (AttributeError, TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid configuration format: {e}", "INVALID_FORMAT") from e
    except ConfigurationError:
        raise
    except SignedRequestError as e:
        raise ConfigurationError(f"Invalid configuration: {e.message}", "INVALID_CONFIG", e.details) from e

    return ClientSettings(signer=signer, http=http, log_level=str(log_level))


def load_config_from_json(json_string: str) -> ClientSettings:
    """Load client settings from a JSON string."""
    try:
        data = json.loads(json_string)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Failed to parse configuration JSON: {e}", "PARSE_ERROR") from e

    if not isinstance(data, dict):
        raise ConfigurationError("Configuration JSON must be an object", "INVALID_FORMAT")
    return load_config_from_dict(data)


def load_config_from_file(file_path: Union[str, Path]) -> ClientSettings:
    """Load client settings from a JSON file."""
    path = Path(file_path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            json_string = f.read()
    except OSError as e:
        raise ConfigurationError(f"Failed to read configuration file: {e}", "FILE_ERROR") from e

    logger.debug(f"Loaded configuration from {path}")
    return load_config_from_json(json_string)


def load_config_from_env(
    environ: Optional[Mapping[str, str]] = None,
    prefix: str = DEFAULT_ENV_PREFIX
) -> ClientSettings:
    """
    Load client settings from environment variables.

    Recognized variables (with the default prefix):
        OAUTH_CONSUMER_KEY, OAUTH_CONSUMER_SECRET, OAUTH_TOKEN,
        OAUTH_TOKEN_SECRET, OAUTH_RSA_PRIVATE_KEY, OAUTH_RSA_PRIVATE_KEY_FILE,
        OAUTH_SIGNATURE_METHOD, OAUTH_REALM, OAUTH_PLACEMENT, OAUTH_TIMEOUT,
        OAUTH_VERIFY_SSL, OAUTH_ALLOW_REDIRECTS, OAUTH_CHARSET,
        OAUTH_USER_AGENT, OAUTH_LOG_LEVEL

    Args:
        environ: Mapping to read instead of os.environ
        prefix: Variable name prefix

    Raises:
        ConfigurationError: If required variables are missing or invalid
    """
    env = os.environ if environ is None else environ

    def get(name: str) -> Optional[str]:
        value = env.get(prefix + name)
        return value if value not in (None, "") else None

    credentials: Dict[str, Any] = {
        'consumer_key': get('CONSUMER_KEY'),
        'consumer_secret': get('CONSUMER_SECRET'),
        'token': get('TOKEN'),
        'token_secret': get('TOKEN_SECRET'),
        'rsa_private_key': get('RSA_PRIVATE_KEY'),
        'rsa_private_key_file': get('RSA_PRIVATE_KEY_FILE'),
    }
    if credentials['consumer_key'] is None:
        raise ConfigurationError(f"Environment variable {prefix}CONSUMER_KEY is required", "MISSING_VALUE")

    http: Dict[str, Any] = {}
    for env_name, key in (('TIMEOUT', 'timeout'), ('VERIFY_SSL', 'verify_ssl'),
                          ('ALLOW_REDIRECTS', 'allow_redirects'), ('CHARSET', 'default_charset'),
                          ('USER_AGENT', 'user_agent')):
        value = get(env_name)
        if value is not None:
            http[key] = value

    data = {
        'credentials': credentials,
        'signature_method': get('SIGNATURE_METHOD'),
        'realm': get('REALM'),
        'placement': get('PLACEMENT'),
        'http': http,
        'logging': {'level': get('LOG_LEVEL') or 'WARNING'},
    }
    return load_config_from_dict(data)
