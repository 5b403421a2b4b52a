import logging

import pytest

from keyedsiphash.errors import ConfigurationError, ServiceDisposedError
from keyedsiphash.options import SipHashOptions
from keyedsiphash.service import SipHashService
from keyedsiphash.siphash import hash64

K0 = 0x0706050403020100
K1 = 0x0F0E0D0C0B0A0908


def test_compute_hash_uses_configured_key():
    with SipHashService(SipHashOptions(k0=K0, k1=K1)) as service:
        assert service.compute_hash(b"") == 0x726FDB47DD0E0E31
        assert service.compute_hash(b"payload") == hash64(K0, K1, b"payload")
        assert str(service.compute_tag(bytes(range(15)))) == "a129ca6149be45e5"


def test_requires_both_key_words():
    with pytest.raises(ConfigurationError):
        SipHashService(SipHashOptions(k0=K0))
    with pytest.raises(TypeError):
        SipHashService(None)  # type: ignore


def test_closed_service_refuses_to_hash():
    service = SipHashService(SipHashOptions(k0=K0, k1=K1))
    service.close()
    assert service.closed
    assert service._keys.released
    with pytest.raises(ServiceDisposedError):
        service.compute_hash(b"late")
    service.close()


def test_context_exit_closes_on_error():
    with pytest.raises(KeyError):
        with SipHashService(SipHashOptions(k0=1, k1=2)) as service:
            raise KeyError("x")
    assert service.closed


def test_from_env():
    environ = {"SIPHASH_K0": hex(K0), "SIPHASH_K1": hex(K1)}
    with SipHashService.from_env(environ=environ) as service:
        assert service.compute_hash(b"abc") == hash64(K0, K1, b"abc")


def test_lifecycle_logging_never_includes_key(caplog):
    caplog.set_level(logging.DEBUG, logger="keyedsiphash")
    with SipHashService(SipHashOptions(k0=K0, k1=K1)) as service:
        service.compute_hash(b"abc")
    text = caplog.text
    assert "Closed SipHashService" in text
    assert "Released SipHash key material" in text
    assert hex(K0)[2:] not in text
    assert str(K0) not in text


def test_blank_key_word_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        SipHashService(SipHashOptions(k0=" ", k1=1))


def test_keys_released_under_a_caller_reports_disposed():
    service = SipHashService(SipHashOptions(k0=K0, k1=K1))
    # close() racing with compute_hash: keys gone, flag not yet set.
    service._keys.release()
    with pytest.raises(ServiceDisposedError):
        service.compute_hash(b"late")
