"""
Tests for signer configuration and its fluent builder
"""

import dataclasses

import pytest

from signedrequest.signing import (
    Credentials,
    ParameterPlacement,
    SignatureMethod,
    SignerConfig,
    create_signer_config,
    validate_signer_config,
)
from signedrequest.signing.utils import generate_nonce, generate_timestamp
from signedrequest.exceptions import InvalidKeyError, ValidationError


class TestSignerConfigBuilder:
    """Test the fluent configuration builder"""

    def test_minimal_config(self):
        config = create_signer_config().consumer("key", "secret").build()

        assert config.credentials.consumer_key == "key"
        assert config.credentials.consumer_secret == "secret"
        assert config.signature_method is SignatureMethod.HMAC_SHA1
        assert config.placement is ParameterPlacement.HEADER
        assert config.realm is None
        assert config.nonce_generator is generate_nonce
        assert config.timestamp_generator is generate_timestamp

    def test_full_config(self):
        config = (create_signer_config()
                  .consumer("key", "secret")
                  .token("tok", "toksecret")
                  .signature_method("PLAINTEXT")
                  .realm("Photos")
                  .placement(ParameterPlacement.QUERY_STRING)
                  .nonce_generator(lambda: "fixed")
                  .timestamp_generator(lambda: 42)
                  .build())

        assert config.credentials.is_three_legged
        assert config.credentials.token_secret == "toksecret"
        assert config.signature_method is SignatureMethod.PLAINTEXT
        assert config.realm == "Photos"
        assert config.placement is ParameterPlacement.QUERY_STRING
        assert config.nonce_generator() == "fixed"
        assert config.timestamp_generator() == 42

    def test_rsa_key_switches_method(self):
        config = create_signer_config().consumer("key").rsa_private_key("PEM").build()
        assert config.signature_method is SignatureMethod.RSA_SHA1
        assert config.credentials.rsa_private_key == "PEM"

    def test_consumer_key_required(self):
        with pytest.raises(ValidationError):
            create_signer_config().build()

    def test_token_secret_without_token(self):
        with pytest.raises(ValidationError):
            create_signer_config().consumer("key", "secret").token("", "orphan").build()

    def test_generators_must_be_callable(self):
        with pytest.raises(ValidationError):
            create_signer_config().consumer("key").nonce_generator("not callable").build()
        with pytest.raises(ValidationError):
            create_signer_config().consumer("key").timestamp_generator(12345).build()

    def test_builds_independent_configs(self):
        """Each build() returns a new immutable config"""
        builder = create_signer_config().consumer("key", "secret")
        first = builder.build()
        second = builder.token("tok", "toksecret").build()

        assert not first.credentials.is_three_legged
        assert second.credentials.is_three_legged


class TestSignerConfig:
    """Test the immutable configuration object"""

    def test_wire_names_coerced(self):
        config = SignerConfig(
            credentials=Credentials("key", "secret"),
            signature_method="PLAINTEXT",
            placement="query",
        )
        assert config.signature_method is SignatureMethod.PLAINTEXT
        assert config.placement is ParameterPlacement.QUERY_STRING

    def test_unknown_placement(self):
        with pytest.raises(ValidationError):
            SignerConfig(credentials=Credentials("key"), placement="body")

    def test_frozen(self):
        config = create_signer_config().consumer("key").build()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.realm = "changed"

    def test_validate_rejects_other_types(self):
        with pytest.raises(ValidationError):
            validate_signer_config({"consumer_key": "key"})

    def test_validate_rsa_without_key(self):
        config = SignerConfig(credentials=Credentials("key"), signature_method=SignatureMethod.RSA_SHA1)
        with pytest.raises(InvalidKeyError):
            validate_signer_config(config)
